from dataclasses import dataclass
from typing import Union

from ishido.components.stone import Stone


@dataclass(frozen=True, slots=True)
class EmptyTile:
    """A cell with no stone on it."""


@dataclass(frozen=True, slots=True)
class OccupiedTile:
    stone: Stone


Tile = Union[EmptyTile, OccupiedTile]

EMPTY = EmptyTile()
