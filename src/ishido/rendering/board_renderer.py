from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

from ishido.components.position import Position
from ishido.components.tile import OccupiedTile
from ishido.systems.board_ops import is_border_cell
from ishido.ui.layout import cell_rect

if TYPE_CHECKING:
    from ishido.components.session_snapshot import SessionSnapshot
    from ishido.components.stone import Stone
    from ishido.components.stone_palette import StonePalette

BORDER_SHADE = 0.82
HINT_TINT = (255, 240, 160, 110)
GRID_LINE = (90, 70, 50)


def shade(color, factor: float):
    r, g, b = color[:3]
    return int(r * factor), int(g * factor), int(b * factor)


def draw_stone(arcade, palette: StonePalette, stone: Stone, rect, padding: float = 4) -> None:
    left, right, bottom, top = rect
    fill = palette.color_for(stone.color)
    arcade.draw_lrbt_rectangle_filled(left + padding, right - padding, bottom + padding, top - padding, fill)
    arcade.draw_lrbt_rectangle_outline(
        left + padding, right - padding, bottom + padding, top - padding, shade(fill, 0.55), 2
    )
    arcade.draw_text(
        palette.glyph_for(stone.symbol),
        (left + right) / 2,
        (bottom + top) / 2,
        (255, 255, 255),
        22,
        anchor_x="center",
        anchor_y="center",
        bold=True,
    )


class BoardRenderer:
    """Draws the cell grid, placed stones and the hint overlay."""

    def __init__(self, palette: StonePalette):
        self._palette = palette

    def build_layout(self, snapshot: SessionSnapshot) -> Dict[Position, Dict[str, Any]]:
        """Per-cell draw data for the current frame, independent of any window."""
        layout: Dict[Position, Dict[str, Any]] = {}
        width = len(snapshot.tiles)
        height = len(snapshot.tiles[0]) if width else 0
        for x in range(width):
            for y in range(height):
                pos = Position(x, y)
                tile = snapshot.tiles[x][y]
                layout[pos] = {
                    "rect": cell_rect(pos),
                    "stone": tile.stone if isinstance(tile, OccupiedTile) else None,
                    "background": snapshot.background[x][y],
                    "border": is_border_cell(pos, width, height),
                    "hint": pos in snapshot.legal_cells,
                }
        return layout

    def render(self, arcade, layout: Dict[Position, Dict[str, Any]]) -> None:
        palette = self._palette
        for entry in layout.values():
            left, right, bottom, top = entry["rect"]
            stone = entry["stone"]
            if stone is not None:
                draw_stone(arcade, palette, stone, entry["rect"])
                continue
            variants = palette.cell_backgrounds
            base = variants[entry["background"] % len(variants)]
            if entry["border"]:
                base = shade(base, BORDER_SHADE)
            arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, base)
            arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, GRID_LINE, 1)
            if entry["hint"]:
                arcade.draw_lrbt_rectangle_filled(left + 3, right - 3, bottom + 3, top - 3, HINT_TINT)
