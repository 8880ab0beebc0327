"""Session state resource describing whether moves are still accepted."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    """Singleton component storing the session's current mode."""
    mode: GameMode = GameMode.PLAYING
