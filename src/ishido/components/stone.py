from dataclasses import dataclass
from enum import IntEnum


class StoneColor(IntEnum):
    """The six stone colors; the value doubles as the tileset column."""
    RED = 0
    GREEN = 1
    BLUE = 2
    YELLOW = 3
    PURPLE = 4
    TEAL = 5


class StoneSymbol(IntEnum):
    """The six stone symbols; the value doubles as the tileset row."""
    SUN = 0
    MOON = 1
    STAR = 2
    WAVE = 3
    LEAF = 4
    KEY = 5


@dataclass(frozen=True, slots=True)
class Stone:
    """One stone variant. Two stones with equal fields are interchangeable."""
    color: StoneColor
    symbol: StoneSymbol
