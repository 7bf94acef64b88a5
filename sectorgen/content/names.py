"""Star system names.

System names are rolled from a themed table first. When that name is already
taken the generic generator builds a fresh one out of syllable fragments.
"""

from ..utils.rng import SectorRNG

SYSTEM_NAMES = [
    "Achernar", "Aegis", "Alcor", "Ankaa", "Arcadia", "Ardent", "Aster",
    "Avalon", "Bastion", "Beacon", "Caliban", "Castor", "Cinder", "Corvus",
    "Crucible", "Cygnus", "Dawnfall", "Draco", "Dusk", "Ember", "Eridu",
    "Farpoint", "Ferro", "Gallows", "Gemini", "Gloam", "Halcyon", "Helix",
    "Hesper", "Hydra", "Iona", "Janus", "Kestrel", "Kuiper", "Lacuna",
    "Lantern", "Lodestar", "Lumen", "Lyra", "Maelstrom", "Meridian", "Mira",
    "Nadir", "Nemesis", "Nox", "Obelisk", "Orrery", "Pallas", "Paragon",
    "Perihelion", "Pharos", "Pyre", "Quasar", "Rampart", "Requiem", "Rigel",
    "Sable", "Sentinel", "Solace", "Spindle", "Styx", "Tarsus", "Tempest",
    "Thule", "Umbra", "Vanguard", "Vega", "Verge", "Vesper", "Wraith",
    "Zenith", "Zephyr",
]

# Syllable fragments for generic names
ONSETS = [
    "b", "br", "c", "ch", "d", "dr", "f", "g", "gr", "h", "k", "kr", "l", "m",
    "n", "p", "pr", "r", "s", "sh", "st", "t", "th", "tr", "v", "z",
]
VOWELS = ["a", "e", "i", "o", "u", "ae", "ai", "ia", "io", "y"]


def roll_system_name(rng: SectorRNG) -> str:
    """Roll once on the system name table. Repeats are possible."""
    return rng.choice(SYSTEM_NAMES)


def generate_name(rng: SectorRNG, length: int) -> str:
    """Build a pronounceable name of exactly `length` letters.

    Args:
        rng: Random number generator
        length: Number of letters in the result (>= 1)

    Returns:
        Capitalized name, e.g. "Thaero" for length 6
    """
    if length < 1:
        raise ValueError(f"Invalid name length: {length} (must be >= 1)")

    name = ""
    while len(name) < length:
        name += rng.choice(ONSETS) + rng.choice(VOWELS)
    return name[:length].capitalize()
