from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from ishido.components.game_state import GameMode
from ishido.components.position import Position
from ishido.components.stone import Stone
from ishido.components.tile import Tile


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Read-only view of a session handed to rendering and input layers.

    ``legal_cells`` is empty unless hints are visible; ``all_legal_cells``
    always carries the full set.
    """
    tiles: Tuple[Tuple[Tile, ...], ...]
    background: Tuple[Tuple[int, ...], ...]
    pending: Optional[Stone]
    score: int
    four_ways: int
    legal_cells: FrozenSet[Position]
    all_legal_cells: FrozenSet[Position]
    supply_size: int
    mode: GameMode
    hints_visible: bool

    @property
    def is_game_over(self) -> bool:
        return self.mode is GameMode.GAME_OVER
