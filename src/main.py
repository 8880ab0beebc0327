"""Entry point for the Ishido stone-placement puzzle.

Sets up the ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color
from ishido.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from ishido.events.bus import EVENT_MOUSE_PRESS, EVENT_TICK, EventBus
from ishido.systems.game_session import GameSessionSystem
from ishido.systems.hint_system import HintSystem
from ishido.systems.input import InputSystem
from ishido.systems.render import RenderSystem
from ishido.world import create_world


class IshidoWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, "Ishido", resizable=False)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world()
        # Session owns the rules; everything else only reads it or sends requests.
        self.session = GameSessionSystem(self.world, self.event_bus)
        self.hint_system = HintSystem(self.world, self.event_bus)
        self.input_system = InputSystem(self.event_bus)
        self.render_system = RenderSystem(self.world, self.session, self)
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    window = IshidoWindow()
    run()

if __name__ == "__main__":
    main()
