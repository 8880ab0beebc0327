from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from ishido.components.position import Position
from ishido.components.stone import Stone
from ishido.components.tile import EMPTY, OccupiedTile, Tile


@dataclass(slots=True)
class Board:
    """Grid of tiles plus the stone waiting to be placed.

    ``tiles`` and ``background`` are indexed ``[x][y]``. ``background`` holds
    the decorative variant index of each cell and has no effect on play.
    """
    width: int
    height: int
    tiles: List[List[Tile]]
    background: List[List[int]]
    pending: Optional[Stone] = None

    @classmethod
    def empty(cls, width: int, height: int) -> Board:
        return cls(
            width=width,
            height=height,
            tiles=[[EMPTY for _ in range(height)] for _ in range(width)],
            background=[[0 for _ in range(height)] for _ in range(width)],
        )

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def tile_at(self, pos: Position) -> Tile:
        return self.tiles[pos.x][pos.y]

    def set_tile(self, pos: Position, tile: Tile) -> None:
        self.tiles[pos.x][pos.y] = tile

    def positions(self) -> Iterator[Position]:
        for x in range(self.width):
            for y in range(self.height):
                yield Position(x, y)

    def placed_stones(self) -> List[Stone]:
        return [
            tile.stone
            for column in self.tiles
            for tile in column
            if isinstance(tile, OccupiedTile)
        ]
