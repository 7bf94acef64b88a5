"""Culture identifiers."""

from enum import Enum


class Culture(Enum):
    """Cultural background flavoring a world's naming."""

    ARABIC = "Arabic"
    CHINESE = "Chinese"
    ENGLISH = "English"
    GREEK = "Greek"
    INDIAN = "Indian"
    JAPANESE = "Japanese"
    LATIN = "Latin"
    NIGERIAN = "Nigerian"
    RUSSIAN = "Russian"
    SPANISH = "Spanish"
