from ishido.constants import FOURWAY_BONUSES, MATCH_BASE_POINTS, STONES_LEFT_BONUS


def placement_points(match_count: int, four_ways: int) -> int:
    """Base points for ``match_count`` neighbors, doubled once per earlier four-way."""

    return MATCH_BASE_POINTS.get(match_count, 0) * 2 ** four_ways


def fourway_bonus(streak: int) -> int:
    """Milestone bonus for reaching ``streak`` four-ways; zero past the table."""

    index = streak - 1
    if 0 <= index < len(FOURWAY_BONUSES):
        return FOURWAY_BONUSES[index]
    return 0


def stones_left_bonus(stones_left: int) -> int:
    """Finish bonus indexed by how many stones remain in the supply."""

    if 0 <= stones_left < len(STONES_LEFT_BONUS):
        return STONES_LEFT_BONUS[stones_left]
    return 0
