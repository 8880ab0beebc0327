"""Placement legality for the pending stone.

A cell is legal when it is empty, no neighbor conflicts with the pending
stone, at least one neighbor matches it, and the summed matches satisfy
the arity table below.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Dict, FrozenSet, Optional, Set, Tuple

from ishido.components.board import Board
from ishido.components.match_result import NO_MATCH, NOT_MATCHING, Match, MatchResult, NotMatching
from ishido.components.position import Position
from ishido.components.stone import Stone
from ishido.components.tile import EmptyTile, OccupiedTile, Tile
from ishido.systems.board_ops import adjacent_tiles, is_empty

# Accepted (color_matches, symbol_matches) totals per number of matching
# neighbors. ``None`` accepts any total.
ACCEPTED_TOTALS: Dict[int, Optional[Set[Tuple[int, int]]]] = {
    1: None,
    2: {(1, 1)},
    3: {(2, 1), (1, 2)},
    4: {(2, 2)},
}


@dataclass(frozen=True, slots=True)
class CellEvaluation:
    legal: bool
    matches: Tuple[Match, ...] = ()
    vetoed: bool = False

    @property
    def match_count(self) -> int:
        return len(self.matches)

    @property
    def total(self) -> Match:
        return reduce(lambda acc, m: acc + m, self.matches, NO_MATCH)


ILLEGAL = CellEvaluation(legal=False)


def match_stone(stone: Stone, tile: Tile) -> MatchResult:
    """Compare ``stone`` with one neighboring tile."""

    if isinstance(tile, EmptyTile):
        return NO_MATCH
    if isinstance(tile, OccupiedTile):
        color_match = stone.color == tile.stone.color
        symbol_match = stone.symbol == tile.stone.symbol
        if not (color_match or symbol_match):
            return NOT_MATCHING
        return Match(color_matches=int(color_match), symbol_matches=int(symbol_match))
    raise TypeError(f"Unknown tile kind: {tile!r}")


def is_accepted(matching: Tuple[Match, ...]) -> bool:
    """Apply the arity rule to the non-trivial matches of a cell."""

    if not matching or len(matching) not in ACCEPTED_TOTALS:
        return False
    accepted = ACCEPTED_TOTALS[len(matching)]
    if accepted is None:
        return True
    total = reduce(lambda acc, m: acc + m, matching, NO_MATCH)
    return (total.color_matches, total.symbol_matches) in accepted


def evaluate_cell(board: Board, pos: Position) -> CellEvaluation:
    """Evaluate placing the board's pending stone on ``pos``."""

    pending = board.pending
    if pending is None or not board.in_bounds(pos) or not is_empty(board, pos):
        return ILLEGAL
    matching = []
    for tile in adjacent_tiles(board, pos):
        result = match_stone(pending, tile)
        if isinstance(result, NotMatching):
            # One conflicting neighbor disqualifies the cell outright.
            return CellEvaluation(legal=False, vetoed=True)
        if not result.is_trivial:
            matching.append(result)
    matches = tuple(matching)
    return CellEvaluation(legal=is_accepted(matches), matches=matches)


def compute_legal_cells(board: Board) -> FrozenSet[Position]:
    if board.pending is None:
        return frozenset()
    return frozenset(pos for pos in board.positions() if evaluate_cell(board, pos).legal)
