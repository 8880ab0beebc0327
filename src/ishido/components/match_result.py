from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class NotMatching:
    """Neighbor shares neither color nor symbol; vetoes the whole cell."""


@dataclass(frozen=True, slots=True)
class Match:
    """Per-neighbor (or summed) agreement counts along each axis."""
    color_matches: int = 0
    symbol_matches: int = 0

    @property
    def is_trivial(self) -> bool:
        return self.color_matches == 0 and self.symbol_matches == 0

    def __add__(self, other: Match) -> Match:
        return Match(
            color_matches=self.color_matches + other.color_matches,
            symbol_matches=self.symbol_matches + other.symbol_matches,
        )


MatchResult = Union[NotMatching, Match]

NOT_MATCHING = NotMatching()
NO_MATCH = Match()
