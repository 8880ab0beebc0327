"""Stone supply generation.

Every helper draws randomness from ``rng.randrange(n)`` only, so any object
exposing that method can stand in for ``random.Random``. A new game makes
12 draws for the initial placement (one color and one symbol per stone)
and 65 for shuffling the 66-stone draw stack.
"""
from __future__ import annotations

import random
from typing import List, MutableSequence, Sequence, TypeVar

from ishido.components.stone import Stone, StoneColor, StoneSymbol
from ishido.constants import STONE_COPIES

T = TypeVar("T")


def generate_initial_placement(rng: random.Random) -> List[Stone]:
    """Return six stones covering every color once and every symbol once.

    Color and symbol are drawn independently from the pools still unused,
    so the two permutations are not aligned.
    """

    colors = list(StoneColor)
    symbols = list(StoneSymbol)
    placement: List[Stone] = []
    while colors:
        color = colors.pop(rng.randrange(len(colors)))
        symbol = symbols.pop(rng.randrange(len(symbols)))
        placement.append(Stone(color=color, symbol=symbol))
    return placement


def full_stone_universe() -> List[Stone]:
    """Every stone of a game in canonical order: copy, then color, then symbol."""

    return [
        Stone(color=color, symbol=symbol)
        for _ in range(STONE_COPIES)
        for color in StoneColor
        for symbol in StoneSymbol
    ]


def shuffle_in_place(items: MutableSequence[T], rng: random.Random) -> None:
    """Fisher-Yates shuffle driven by ``rng.randrange``."""

    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]


def build_draw_stack(initial_placement: Sequence[Stone], rng: random.Random) -> List[Stone]:
    """Return the shuffled stones left once ``initial_placement`` is on the board.

    Each placed stone removes one equal stone from the universe; the second
    copy of that variant stays in the stack.
    """

    still_to_remove = list(initial_placement)
    stack: List[Stone] = []
    for stone in full_stone_universe():
        if stone in still_to_remove:
            still_to_remove.remove(stone)
            continue
        stack.append(stone)
    if still_to_remove:
        raise ValueError(f"Initial placement holds stones outside the supply: {still_to_remove}")
    shuffle_in_place(stack, rng)
    return stack
