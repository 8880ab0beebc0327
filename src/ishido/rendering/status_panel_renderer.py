from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

from ishido.constants import (
    STATUS_PANEL_CENTER_X,
    STATUS_PANEL_LEFT,
    TALLY_BAR_HEIGHT,
    TALLY_BAR_WIDTH,
    TALLY_PER_ROW,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from ishido.rendering.board_renderer import draw_stone
from ishido.ui.layout import new_button_rect, pending_stone_rect

if TYPE_CHECKING:
    from ishido.components.session_snapshot import SessionSnapshot
    from ishido.components.stone_palette import StonePalette

PANEL_COLOR = (92, 64, 44)
TEXT_COLOR = (250, 236, 210)
TALLY_BOTTOM = 60.0
TALLY_LEFT = STATUS_PANEL_LEFT + 18


def tally_bars(stones_left: int) -> List[Tuple[float, float, float, float, bool]]:
    """Rectangles (left, right, bottom, top, emphasized) for the supply counter.

    Bars are laid out in rows of ten from the bottom up; every fifth bar is
    emphasized so the count reads at a glance.
    """
    bars = []
    for index in range(stones_left):
        row, col = divmod(index, TALLY_PER_ROW)
        left = TALLY_LEFT + col * TALLY_BAR_WIDTH * 1.5
        bottom = TALLY_BOTTOM + row * TALLY_BAR_HEIGHT * 1.5
        bars.append((left, left + TALLY_BAR_WIDTH, bottom, bottom + TALLY_BAR_HEIGHT, col % 5 == 0))
    return bars


class StatusPanelRenderer:
    """Draws the side panel: next stone, score, four-way count, supply and New button."""

    def __init__(self, palette: StonePalette):
        self._palette = palette

    def render(self, arcade, snapshot: SessionSnapshot) -> None:
        arcade.draw_lrbt_rectangle_filled(STATUS_PANEL_LEFT, WINDOW_WIDTH, 0, WINDOW_HEIGHT, PANEL_COLOR)
        if snapshot.pending is not None:
            draw_stone(arcade, self._palette, snapshot.pending, pending_stone_rect())
        arcade.draw_text(
            f"{snapshot.score}", STATUS_PANEL_CENTER_X, WINDOW_HEIGHT - 140,
            TEXT_COLOR, 20, anchor_x="center",
        )
        arcade.draw_text(
            f"{snapshot.four_ways}", STATUS_PANEL_CENTER_X, WINDOW_HEIGHT - 185,
            TEXT_COLOR, 20, anchor_x="center",
        )
        for left, right, bottom, top, emphasized in tally_bars(snapshot.supply_size):
            alpha = 170 if emphasized else 128
            arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, (32, 16, 16, alpha))
        self._render_new_button(arcade)
        if snapshot.is_game_over:
            self._render_game_over(arcade)

    def _render_new_button(self, arcade) -> None:
        left, right, bottom, top = new_button_rect()
        arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, (222, 0, 0))
        arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, (0, 0, 0), 2)
        arcade.draw_text(
            "New", (left + right) / 2, (bottom + top) / 2, (0, 0, 0), 16,
            anchor_x="center", anchor_y="center",
        )

    def _render_game_over(self, arcade) -> None:
        margin = 132
        left, right = margin, WINDOW_WIDTH - margin
        bottom, top = margin, WINDOW_HEIGHT - margin
        arcade.draw_lrbt_rectangle_filled(left + 45, right + 45, bottom - 37, top - 37, (0, 0, 0, 64))
        arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, (0, 10, 240))
        arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, (0, 0, 0), 3)
        arcade.draw_text(
            "Game over!", WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2, (0, 0, 0), 36,
            anchor_x="center", anchor_y="center",
        )
