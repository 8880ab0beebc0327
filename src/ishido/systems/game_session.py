"""Turn orchestration for one solitaire session.

The session entity carries the ``Board``, ``StoneSupply``, ``ScoreTrack``,
``LegalCells``, ``HintState`` and ``GameState`` components. This system is
the only writer of those components apart from ``HintSystem`` toggling the
hint flag.
"""
from __future__ import annotations

import logging
import random

from esper import World

from ishido.components.board import Board
from ishido.components.game_state import GameMode, GameState
from ishido.components.hint_state import HintState
from ishido.components.legal_cells import LegalCells
from ishido.components.position import Position
from ishido.components.score_track import ScoreTrack
from ishido.components.session_snapshot import SessionSnapshot
from ishido.components.stone_supply import StoneSupply
from ishido.components.tile import OccupiedTile
from ishido.errors import SessionNotStartedError
from ishido.events.bus import (
    EventBus,
    EVENT_FOUR_WAY_ACHIEVED,
    EVENT_GAME_OVER,
    EVENT_NEW_GAME_REQUEST,
    EVENT_NEW_GAME_STARTED,
    EVENT_PENDING_STONE_CHANGED,
    EVENT_SCORE_CHANGED,
    EVENT_STONE_PLACED,
    EVENT_TILE_CLICK,
)
from ishido.systems.board_ops import initialize_board, is_border_cell
from ishido.systems.match_ops import CellEvaluation, compute_legal_cells, evaluate_cell
from ishido.systems.scoring_ops import fourway_bonus, placement_points, stones_left_bonus
from ishido.systems.supply_ops import build_draw_stack, generate_initial_placement

logger = logging.getLogger(__name__)


class GameSessionSystem:
    """Owns the session state and exposes the only mutating operations.

    Logic:
      - ``new_game`` rebuilds board and supply from a fresh shuffle and zeroes the score.
      - ``place_stone`` accepts a move only on a legal cell while the game is running;
        anything else is ignored without raising.
      - After every accepted move the game ends when there is no pending stone,
        the supply is empty, or the new pending stone has nowhere to go.
    """

    def __init__(self, world: World, event_bus: EventBus, *, start: bool = True):
        self.world = world
        self.event_bus = event_bus
        self.session_entity = self._find_session_entity()
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)
        if start:
            self.new_game()

    def _find_session_entity(self) -> int:
        for ent, _ in self.world.get_component(GameState):
            return ent
        return self.world.create_entity(GameState())

    def _component(self, component_type):
        try:
            return self.world.component_for_entity(self.session_entity, component_type)
        except KeyError:
            raise SessionNotStartedError() from None

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def board(self) -> Board:
        return self._component(Board)

    @property
    def supply(self) -> StoneSupply:
        return self._component(StoneSupply)

    @property
    def score(self) -> int:
        return self._component(ScoreTrack).score

    @property
    def four_ways(self) -> int:
        return self._component(ScoreTrack).four_ways

    @property
    def legal_cells(self) -> frozenset[Position]:
        return self._component(LegalCells).positions

    @property
    def hints_visible(self) -> bool:
        return self._component(HintState).visible

    @property
    def mode(self) -> GameMode:
        # Touch the board first so an unstarted session fails loudly.
        self._component(Board)
        return self._component(GameState).mode

    def evaluate(self, position: Position) -> CellEvaluation:
        return evaluate_cell(self.board, position)

    def snapshot(self) -> SessionSnapshot:
        board = self.board
        track: ScoreTrack = self._component(ScoreTrack)
        legal = self.legal_cells
        hints_visible = self.hints_visible
        return SessionSnapshot(
            tiles=tuple(tuple(column) for column in board.tiles),
            background=tuple(tuple(column) for column in board.background),
            pending=board.pending,
            score=track.score,
            four_ways=track.four_ways,
            legal_cells=legal if hints_visible else frozenset(),
            all_legal_cells=legal,
            supply_size=len(self.supply),
            mode=self.mode,
            hints_visible=hints_visible,
        )

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def on_tile_click(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        try:
            position = Position(int(x), int(y))
        except (TypeError, ValueError):
            return
        self.place_stone(position)

    def on_new_game_request(self, sender, **kwargs):
        self.new_game()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def new_game(self) -> None:
        rng = getattr(self.world, "random", None) or random.Random()
        placement = generate_initial_placement(rng)
        board = initialize_board(placement, rng)
        supply = StoneSupply(stack=build_draw_stack(placement, rng))
        board.pending = supply.draw()

        self.world.add_component(self.session_entity, board)
        self.world.add_component(self.session_entity, supply)
        self.world.add_component(self.session_entity, ScoreTrack())
        self.world.add_component(self.session_entity, HintState())
        self.world.add_component(self.session_entity, GameState(mode=GameMode.PLAYING))
        legal = self.refresh_legal_cells()

        logger.info("New game: %d stones in supply, %d legal cells", len(supply), len(legal))
        self.event_bus.emit(EVENT_NEW_GAME_STARTED, score=0, supply_size=len(supply), legal_cells=legal)
        self.event_bus.emit(EVENT_PENDING_STONE_CHANGED, stone=board.pending, supply_size=len(supply))

    def refresh_legal_cells(self) -> frozenset[Position]:
        """Recompute the legal cells for the current pending stone."""
        legal = compute_legal_cells(self.board)
        self.world.add_component(self.session_entity, LegalCells(positions=legal))
        return legal

    def place_stone(self, position: Position) -> bool:
        """Place the pending stone on ``position``; return False if the move was ignored."""
        board = self.board
        state: GameState = self._component(GameState)
        stone = board.pending
        if state.mode is GameMode.GAME_OVER or stone is None:
            return False
        if position not in self.legal_cells:
            return False

        evaluation = evaluate_cell(board, position)
        match_count = evaluation.match_count
        border = is_border_cell(position, board.width, board.height)
        points = 0
        if not border:
            points = self._score_placement(match_count)

        board.set_tile(position, OccupiedTile(stone))
        supply = self.supply
        board.pending = supply.draw()
        hints: HintState = self._component(HintState)
        hints.visible = False
        hints.idle_time = 0.0
        legal = self.refresh_legal_cells()

        logger.debug(
            "Placed %s at (%d, %d): %d matches, %d points, %d legal cells next",
            stone, position.x, position.y, match_count, points, len(legal),
        )
        self.event_bus.emit(
            EVENT_STONE_PLACED,
            position=position,
            stone=stone,
            match_count=match_count,
            points=points,
            border=border,
        )
        self.event_bus.emit(EVENT_PENDING_STONE_CHANGED, stone=board.pending, supply_size=len(supply))

        if board.pending is None or len(supply) == 0 or not legal:
            self._finish_game(state, len(supply))
        return True

    def _score_placement(self, match_count: int) -> int:
        track: ScoreTrack = self._component(ScoreTrack)
        points = placement_points(match_count, track.four_ways)
        self._add_score(track, points, 'placement')
        if match_count == 4:
            track.four_ways += 1
            bonus = fourway_bonus(track.four_ways)
            self._add_score(track, bonus, 'four_way_bonus')
            self.event_bus.emit(EVENT_FOUR_WAY_ACHIEVED, streak=track.four_ways, bonus=bonus)
            points += bonus
        return points

    def _add_score(self, track: ScoreTrack, delta: int, reason: str) -> None:
        if delta <= 0:
            return
        track.score += delta
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=track.score, delta=delta, reason=reason)

    def _finish_game(self, state: GameState, stones_left: int) -> None:
        track: ScoreTrack = self._component(ScoreTrack)
        bonus = stones_left_bonus(stones_left)
        self._add_score(track, bonus, 'finish_bonus')
        state.mode = GameMode.GAME_OVER
        logger.info("Game over: score %d with %d stones left (bonus %d)", track.score, stones_left, bonus)
        self.event_bus.emit(EVENT_GAME_OVER, score=track.score, stones_left=stones_left, bonus=bonus)
