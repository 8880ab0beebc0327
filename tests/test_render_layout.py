from ishido.components.position import Position
from ishido.systems.render import RenderSystem
from ishido.systems.hint_system import HintSystem
from ishido.events.bus import EVENT_TICK
from tests.helpers import start_session


class DummyWindow:
    width = 788
    height = 528


def test_layout_cache_covers_every_cell():
    _, session = start_session()
    render = RenderSystem(session.world, session, DummyWindow())
    layout = render.build_layout()
    assert len(layout) == 96
    assert layout[Position(0, 0)]["stone"] is not None
    assert layout[Position(0, 0)]["border"]
    assert layout[Position(3, 3)]["stone"] is None
    assert not any(entry["hint"] for entry in layout.values())


def test_layout_marks_hints_once_visible():
    bus, session = start_session()
    HintSystem(session.world, bus, delay=0.1)
    render = RenderSystem(session.world, session, DummyWindow())
    bus.emit(EVENT_TICK, dt=1.0)
    layout = render.build_layout()
    hinted = {pos for pos, entry in layout.items() if entry["hint"]}
    assert hinted == session.legal_cells
    assert render.last_cell_layout is layout
