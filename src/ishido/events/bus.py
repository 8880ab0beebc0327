from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button
EVENT_TILE_CLICK = "tile_click"                    # payload: x, y (board cell)
EVENT_NEW_GAME_REQUEST = "new_game_request"        # payload: None


# ============================================================================
# BOARD & SCORING
# ============================================================================
EVENT_STONE_PLACED = "stone_placed"                # payload: position=Position, stone=Stone, match_count=int, points=int, border=bool
EVENT_PENDING_STONE_CHANGED = "pending_stone_changed"  # payload: stone=Stone|None, supply_size=int
EVENT_FOUR_WAY_ACHIEVED = "four_way_achieved"      # payload: streak=int, bonus=int
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, delta=int, reason=str


# ============================================================================
# GAME FLOW
# ============================================================================
EVENT_NEW_GAME_STARTED = "new_game_started"        # payload: score=int, supply_size=int, legal_cells=frozenset[Position]
EVENT_GAME_OVER = "game_over"                      # payload: score=int, stones_left=int, bonus=int


# ============================================================================
# HINTS
# ============================================================================
EVENT_HINTS_SHOWN = "hints_shown"                  # payload: None
