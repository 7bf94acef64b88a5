"""Plain text and markdown output helpers.

Stars, worlds and points of interest all format themselves through these
helpers, so every entity renders consistently for a given output type.
"""

from enum import Enum
from typing import Protocol, Sequence


class OutputType(Enum):
    """Supported output formats."""

    TEXT = "text"
    MARKDOWN = "markdown"


class Formattable(Protocol):
    """Anything that can render itself for an output type."""

    def format(self, t: OutputType) -> str: ...


def header(t: OutputType, level: int, text: str) -> str:
    """Return a section header at the given nesting level.

    Markdown headers use `#` per level. Text headers underline levels 1 and 2
    with `=` and `-` and print deeper levels as-is.

    Examples:
        >>> header(OutputType.MARKDOWN, 2, "Hex 1,2")
        '## Hex 1,2\\n\\n'
        >>> header(OutputType.TEXT, 1, "Sector")
        'Sector\\n======\\n\\n'
    """
    if level < 1:
        raise ValueError(f"Invalid header level: {level} (must be >= 1)")

    if t is OutputType.MARKDOWN:
        return f"{'#' * level} {text}\n\n"

    if level == 1:
        return f"{text}\n{'=' * len(text)}\n\n"
    if level == 2:
        return f"{text}\n{'-' * len(text)}\n\n"
    return f"{text}\n\n"


def table(t: OutputType, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Return rows laid out as a table.

    Args:
        t: Output type
        headers: Column titles (also fixes the column count)
        rows: Table rows, each with len(headers) cells

    Returns:
        Table text followed by a blank line
    """
    cells = [[str(c) for c in row] for row in rows]
    for row in cells:
        if len(row) != len(headers):
            raise ValueError(f"Row {row} has {len(row)} cells, expected {len(headers)}")

    if t is OutputType.MARKDOWN:
        lines = ["| " + " | ".join(headers) + " |", "|" + "|".join(" --- " for _ in headers) + "|"]
        lines.extend("| " + " | ".join(row) + " |" for row in cells)
        return "\n".join(lines) + "\n\n"

    widths = [len(h) for h in headers]
    for row in cells:
        widths = [max(w, len(c)) for w, c in zip(widths, row)]

    def _line(row: Sequence[str]) -> str:
        return "  ".join(c.ljust(w) for c, w in zip(row, widths)).rstrip()

    lines = [_line(headers)]
    lines.extend(_line(row) for row in cells)
    return "\n".join(lines) + "\n\n"
