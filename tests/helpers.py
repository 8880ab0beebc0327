from __future__ import annotations

import random
from typing import Iterable, Mapping, Sequence

from ishido.components.board import Board
from ishido.components.position import Position
from ishido.components.stone import Stone, StoneColor as C, StoneSymbol as S
from ishido.components.stone_supply import StoneSupply
from ishido.components.tile import OccupiedTile
from ishido.constants import BOARD_HEIGHT, BOARD_WIDTH
from ishido.events.bus import EventBus
from ishido.systems.game_session import GameSessionSystem
from ishido.world import create_world


class ScriptedRandom:
    """Stand-in randomness source returning scripted values (0 once exhausted)."""

    def __init__(self, values: Iterable[int] = ()):
        self._values = list(values)
        self.calls: list[int] = []

    def randrange(self, n: int) -> int:
        self.calls.append(n)
        if self._values:
            return self._values.pop(0) % n
        return 0


def stone(color: C, symbol: S) -> Stone:
    return Stone(color=color, symbol=symbol)


def make_board(stones: Mapping[Position, Stone], pending: Stone | None = None) -> Board:
    board = Board.empty(BOARD_WIDTH, BOARD_HEIGHT)
    for pos, placed in stones.items():
        board.set_tile(pos, OccupiedTile(placed))
    board.pending = pending
    return board


def start_session(seed: int = 1234) -> tuple[EventBus, GameSessionSystem]:
    bus = EventBus()
    world = create_world(rng=random.Random(seed))
    return bus, GameSessionSystem(world, bus)


def install_position(
    session: GameSessionSystem,
    stones: Mapping[Position, Stone],
    pending: Stone | None,
    supply: Sequence[Stone],
) -> None:
    """Replace the session's board and supply with a hand-built position."""
    world = session.world
    world.add_component(session.session_entity, make_board(stones, pending))
    world.add_component(session.session_entity, StoneSupply(stack=list(supply)))
    session.refresh_legal_cells()


def filler_supply(count: int) -> list[Stone]:
    return [stone(C.TEAL, S.KEY)] * count
