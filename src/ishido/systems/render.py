from __future__ import annotations

from typing import Any, Dict

from esper import World

from ishido.components.position import Position
from ishido.rendering.board_renderer import BoardRenderer
from ishido.rendering.status_panel_renderer import StatusPanelRenderer
from ishido.systems.board_ops import get_palette
from ishido.systems.game_session import GameSessionSystem


class RenderSystem:
    """Draws the session each frame from a read-only snapshot."""

    def __init__(self, world: World, session: GameSessionSystem, window):
        self.world = world
        self.session = session
        self.window = window
        palette = get_palette(world)
        self._board_renderer = BoardRenderer(palette)
        self._status_renderer = StatusPanelRenderer(palette)
        self._last_cell_layout: Dict[Position, Dict[str, Any]] = {}

    @property
    def last_cell_layout(self) -> Dict[Position, Dict[str, Any]]:
        return self._last_cell_layout

    def build_layout(self) -> Dict[Position, Dict[str, Any]]:
        snapshot = self.session.snapshot()
        self._last_cell_layout = self._board_renderer.build_layout(snapshot)
        return self._last_cell_layout

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        layout = self.build_layout()
        try:
            arcade.get_window()
        except Exception:
            # No active window (unit tests): the layout cache is all we need.
            return
        snapshot = self.session.snapshot()
        self._board_renderer.render(arcade, layout)
        self._status_renderer.render(arcade, snapshot)
