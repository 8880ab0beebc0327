from dataclasses import dataclass


@dataclass(slots=True)
class ScoreTrack:
    """Cumulative score and the number of four-way placements this game.

    ``four_ways`` only grows within a game; it doubles the value of every
    later placement.
    """
    score: int = 0
    four_ways: int = 0
