import random
from collections import Counter

from ishido.components.stone import Stone, StoneColor, StoneSymbol
from ishido.systems.supply_ops import (
    build_draw_stack,
    full_stone_universe,
    generate_initial_placement,
    shuffle_in_place,
)
from tests.helpers import ScriptedRandom


def test_initial_placement_covers_every_color_and_symbol_once():
    for seed in range(25):
        placement = generate_initial_placement(random.Random(seed))
        assert len(placement) == 6
        assert sorted(s.color for s in placement) == list(StoneColor)
        assert sorted(s.symbol for s in placement) == list(StoneSymbol)


def test_initial_placement_draws_color_then_symbol_from_remaining_pools():
    rng = ScriptedRandom([5, 0, 0, 4])
    placement = generate_initial_placement(rng)
    assert placement[0] == Stone(StoneColor.TEAL, StoneSymbol.SUN)
    # TEAL and SUN are gone: index 0 picks RED, index 4 of the remaining symbols picks KEY.
    assert placement[1] == Stone(StoneColor.RED, StoneSymbol.KEY)
    assert rng.calls == [6, 6, 5, 5, 4, 4, 3, 3, 2, 2, 1, 1]


def test_universe_holds_two_copies_of_each_variant():
    universe = full_stone_universe()
    assert len(universe) == 72
    counts = Counter(universe)
    assert len(counts) == 36
    assert set(counts.values()) == {2}


def test_draw_stack_removes_one_copy_per_placed_stone():
    rng = random.Random(7)
    placement = generate_initial_placement(rng)
    stack = build_draw_stack(placement, rng)
    assert len(stack) == 66
    counts = Counter(stack)
    for placed in placement:
        assert counts[placed] == 1
    assert Counter(stack) + Counter(placement) == Counter(full_stone_universe())


def test_draw_stack_shuffle_uses_one_draw_per_swap():
    placement = generate_initial_placement(ScriptedRandom())
    rng = ScriptedRandom()
    build_draw_stack(placement, rng)
    assert len(rng.calls) == 65
    assert rng.calls[0] == 66 and rng.calls[-1] == 2


def test_shuffle_in_place_is_a_permutation():
    items = list(range(20))
    shuffle_in_place(items, random.Random(3))
    assert sorted(items) == list(range(20))
    assert items != list(range(20))


def test_shuffle_with_scripted_source_swaps_last_with_chosen_index():
    items = ["a", "b", "c"]
    shuffle_in_place(items, ScriptedRandom([0, 0]))
    # i=2 swaps with 0 -> c b a; i=1 swaps with 0 -> b c a
    assert items == ["b", "c", "a"]
