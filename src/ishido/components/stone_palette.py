from dataclasses import dataclass, field
from typing import Dict, Tuple

from ishido.components.stone import StoneColor, StoneSymbol


def _default_colors() -> Dict[StoneColor, Tuple[int, int, int]]:
    return {
        StoneColor.RED: (186, 48, 48),
        StoneColor.GREEN: (63, 127, 59),
        StoneColor.BLUE: (52, 84, 176),
        StoneColor.YELLOW: (216, 180, 38),
        StoneColor.PURPLE: (123, 62, 133),
        StoneColor.TEAL: (38, 150, 150),
    }


def _default_glyphs() -> Dict[StoneSymbol, str]:
    return {
        StoneSymbol.SUN: "O",
        StoneSymbol.MOON: "C",
        StoneSymbol.STAR: "*",
        StoneSymbol.WAVE: "~",
        StoneSymbol.LEAF: "Y",
        StoneSymbol.KEY: "F",
    }


@dataclass(slots=True)
class StonePalette:
    """Display data for stones, stored on a single registry entity.

    Only the rendering layer reads this; the rules never look at it.
    """
    colors: Dict[StoneColor, Tuple[int, int, int]] = field(default_factory=_default_colors)
    glyphs: Dict[StoneSymbol, str] = field(default_factory=_default_glyphs)
    cell_backgrounds: Tuple[Tuple[int, int, int], ...] = (
        (196, 176, 140),
        (188, 168, 132),
        (204, 184, 150),
        (180, 162, 128),
    )

    def color_for(self, color: StoneColor) -> Tuple[int, int, int]:
        return self.colors[color]

    def glyph_for(self, symbol: StoneSymbol) -> str:
        return self.glyphs[symbol]
