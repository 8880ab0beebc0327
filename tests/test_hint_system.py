from ishido.components.game_state import GameMode
from ishido.events.bus import EVENT_HINTS_SHOWN, EVENT_TICK
from ishido.systems.hint_system import HintSystem
from tests.helpers import start_session


def drive_ticks(bus, count, dt=0.5):
    for _ in range(count):
        bus.emit(EVENT_TICK, dt=dt)


def test_hints_appear_after_idle_delay():
    bus, session = start_session()
    HintSystem(session.world, bus, delay=5.0)
    shown = []
    bus.subscribe(EVENT_HINTS_SHOWN, lambda sender, **kw: shown.append(kw))
    drive_ticks(bus, 9)
    assert not session.hints_visible
    drive_ticks(bus, 1)
    assert session.hints_visible
    assert session.snapshot().legal_cells == session.legal_cells
    drive_ticks(bus, 4)
    assert len(shown) == 1


def test_placement_hides_hints_and_restarts_the_clock():
    bus, session = start_session()
    HintSystem(session.world, bus, delay=5.0)
    drive_ticks(bus, 10)
    assert session.hints_visible
    session.place_stone(next(iter(session.legal_cells)))
    assert not session.hints_visible
    if session.mode is GameMode.PLAYING:
        drive_ticks(bus, 9)
        assert not session.hints_visible


def test_new_game_hides_hints():
    bus, session = start_session()
    HintSystem(session.world, bus, delay=1.0)
    drive_ticks(bus, 2)
    assert session.hints_visible
    session.new_game()
    assert not session.hints_visible


def test_bad_tick_payload_is_ignored():
    bus, session = start_session()
    HintSystem(session.world, bus, delay=1.0)
    bus.emit(EVENT_TICK, dt="soon")
    assert not session.hints_visible
