from ishido.events.bus import (
    EventBus,
    EVENT_MOUSE_PRESS,
    EVENT_NEW_GAME_REQUEST,
    EVENT_TILE_CLICK,
)
from ishido.ui.layout import cell_at_point, point_in_new_button

# arcade.MOUSE_BUTTON_LEFT; kept literal so input stays importable without arcade.
LEFT_BUTTON = 1


class InputSystem:
    """Translates window clicks into board clicks or new-game requests."""

    def __init__(self, event_bus: EventBus):
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        if button != LEFT_BUTTON:
            return
        if point_in_new_button(x, y):
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST)
            return
        cell = cell_at_point(x, y)
        if cell is not None:
            self.event_bus.emit(EVENT_TILE_CLICK, x=cell.x, y=cell.y)
