from esper import World

from ishido.components.game_state import GameMode, GameState
from ishido.components.hint_state import HintState
from ishido.constants import HINT_DELAY_SECONDS
from ishido.events.bus import EventBus, EVENT_HINTS_SHOWN, EVENT_TICK


class HintSystem:
    """Reveals the legal-cell overlay once the player has idled long enough.

    The session resets ``HintState`` on every placement and new game; this
    system only advances the idle clock from tick events.
    """

    def __init__(self, world: World, event_bus: EventBus, delay: float = HINT_DELAY_SECONDS):
        self.world = world
        self.event_bus = event_bus
        self.delay = delay
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender, **kwargs):
        try:
            dt = float(kwargs.get('dt', 0.0))
        except (TypeError, ValueError):
            return
        for ent, hints in self.world.get_component(HintState):
            if hints.visible:
                continue
            if self._game_over(ent):
                continue
            hints.idle_time += dt
            if hints.idle_time >= self.delay:
                hints.visible = True
                self.event_bus.emit(EVENT_HINTS_SHOWN)

    def _game_over(self, entity: int) -> bool:
        try:
            state: GameState = self.world.component_for_entity(entity, GameState)
        except KeyError:
            return False
        return state.mode is GameMode.GAME_OVER
