import random

from esper import World

from ishido.components.game_state import GameState
from ishido.components.stone_palette import StonePalette


def create_world(*, rng: random.Random | None = None) -> World:
    """Build an empty world holding the session entity and the stone palette.

    The board, supply and score components are attached by
    ``GameSessionSystem.new_game``; until then session queries raise
    ``SessionNotStartedError``.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    session_entity = world.create_entity()
    world.add_component(session_entity, GameState())

    world.create_entity(StonePalette())
    return world
