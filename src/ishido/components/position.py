from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Board cell coordinate; x runs left to right, y top to bottom."""
    x: int
    y: int
