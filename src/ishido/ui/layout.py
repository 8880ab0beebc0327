"""Screen geometry shared by rendering and input.

Arcade's origin is the bottom-left corner while board rows count down from
the top, so row ``y`` occupies the band just below row ``y - 1``.
"""
from typing import Optional, Tuple

from ishido.components.position import Position
from ishido.constants import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    NEW_BUTTON_BOTTOM,
    NEW_BUTTON_HEIGHT,
    NEW_BUTTON_WIDTH,
    STATUS_PANEL_CENTER_X,
    TILE_HEIGHT,
    TILE_WIDTH,
    WINDOW_HEIGHT,
)

Rect = Tuple[float, float, float, float]  # left, right, bottom, top


def cell_rect(pos: Position) -> Rect:
    left = pos.x * TILE_WIDTH
    top = WINDOW_HEIGHT - pos.y * TILE_HEIGHT
    return left, left + TILE_WIDTH, top - TILE_HEIGHT, top


def cell_center(pos: Position) -> Tuple[float, float]:
    left, right, bottom, top = cell_rect(pos)
    return (left + right) / 2, (bottom + top) / 2


def cell_at_point(x: float, y: float) -> Optional[Position]:
    """Map a window point to the board cell under it, or None off the board."""
    if x < 0 or y > WINDOW_HEIGHT:
        return None
    col = int(x // TILE_WIDTH)
    row = int((WINDOW_HEIGHT - y) // TILE_HEIGHT)
    if 0 <= col < BOARD_WIDTH and 0 <= row < BOARD_HEIGHT:
        return Position(col, row)
    return None


def new_button_rect() -> Rect:
    left = STATUS_PANEL_CENTER_X - NEW_BUTTON_WIDTH / 2
    bottom = NEW_BUTTON_BOTTOM
    return left, left + NEW_BUTTON_WIDTH, bottom, bottom + NEW_BUTTON_HEIGHT


def point_in_new_button(x: float, y: float) -> bool:
    left, right, bottom, top = new_button_rect()
    return left <= x <= right and bottom <= y <= top


def pending_stone_rect() -> Rect:
    left = STATUS_PANEL_CENTER_X - TILE_WIDTH / 2
    top = WINDOW_HEIGHT - TILE_HEIGHT / 2
    return left, left + TILE_WIDTH, top - TILE_HEIGHT, top
