from __future__ import annotations

import random
from typing import List, Sequence

from esper import World

from ishido.components.board import Board
from ishido.components.position import Position
from ishido.components.stone import Stone
from ishido.components.stone_palette import StonePalette
from ishido.components.tile import EmptyTile, OccupiedTile, Tile
from ishido.constants import BACKGROUND_VARIANTS, BOARD_HEIGHT, BOARD_WIDTH


def get_palette(world: World) -> StonePalette:
    for _, palette in world.get_component(StonePalette):
        return palette
    raise RuntimeError("StonePalette definitions not found")


def is_designated_initial_cell(pos: Position, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> bool:
    """True for the four corners and the two cells diagonal across the centre."""

    x, y = pos.x, pos.y
    corner = x in (0, width - 1) and y in (0, height - 1)
    centre = (x == width // 2 and y == height // 2) or (x == width // 2 - 1 and y == height // 2 - 1)
    return corner or centre


def designated_initial_cells(width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> List[Position]:
    return [
        Position(x, y)
        for x in range(width)
        for y in range(height)
        if is_designated_initial_cell(Position(x, y), width, height)
    ]


def initialize_board(
    initial_placement: Sequence[Stone],
    rng: random.Random,
    width: int = BOARD_WIDTH,
    height: int = BOARD_HEIGHT,
) -> Board:
    """Lay out a fresh board with ``initial_placement`` on the designated cells.

    Cells are visited column by column; each designated cell takes the next
    unused stone. Every cell also gets a random background variant, which
    costs one ``rng.randrange`` call per cell.
    """

    designated = len(designated_initial_cells(width, height))
    if len(initial_placement) != designated:
        raise ValueError(
            f"Expected {designated} initial stones for a {width}x{height} board, got {len(initial_placement)}"
        )
    board = Board.empty(width, height)
    stones = iter(initial_placement)
    for pos in board.positions():
        board.background[pos.x][pos.y] = rng.randrange(BACKGROUND_VARIANTS)
        if is_designated_initial_cell(pos, width, height):
            board.set_tile(pos, OccupiedTile(next(stones)))
    return board


def adjacent_tiles(board: Board, pos: Position) -> List[Tile]:
    """Tiles left, right, above and below ``pos``; off-board sides are omitted."""

    neighbours: List[Tile] = []
    if pos.x > 0:
        neighbours.append(board.tiles[pos.x - 1][pos.y])
    if pos.x < board.width - 1:
        neighbours.append(board.tiles[pos.x + 1][pos.y])
    if pos.y > 0:
        neighbours.append(board.tiles[pos.x][pos.y - 1])
    if pos.y < board.height - 1:
        neighbours.append(board.tiles[pos.x][pos.y + 1])
    return neighbours


def is_border_cell(pos: Position, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> bool:
    """True on the outermost ring, where placements never score."""

    return pos.x in (0, width - 1) or pos.y in (0, height - 1)


def is_empty(board: Board, pos: Position) -> bool:
    return isinstance(board.tile_at(pos), EmptyTile)
