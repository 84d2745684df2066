import pygame
import pytest

from florakit.apps import ApplicationState
from florakit.colours import get_colour
from florakit.events import EventType, FloraEvent
from florakit.screens import Screen, base_screen_destroy
from florakit.widgets import (
    Position,
    Sizing,
    WidgetCallbacks,
    WidgetStyle,
    base_box_widget_render,
    create_box_widget,
    height_fixed,
    width_fixed,
)


@pytest.fixture
def state():
    st = ApplicationState()
    st.current_screen = Screen(on_screen_create=None)
    st.running = True
    return st


def _box(state, x, y, w, h, visible=True, colour=None, **callbacks):
    style = WidgetStyle(
        sizing=Sizing(width_fixed(w), height_fixed(h)),
        position=Position(x, y),
    )
    if colour is not None:
        style.inner_colour = colour
        style.border_colour = colour
    return create_box_widget(state, None, style, WidgetCallbacks(**callbacks), visible)


def _recorder(log):
    def record(widget, _state):
        log.append(widget.id)

    return record


def test_default_hooks():
    screen = Screen()
    assert screen.on_screen_destroy is base_screen_destroy
    assert screen.widgets == []


def test_update_calls_visible_update_hooks(state):
    calls = []
    a = _box(state, 0, 0, 10, 10, update=_recorder(calls))
    _box(state, 0, 0, 10, 10, visible=False, update=_recorder(calls))
    state.current_screen.update(state)
    assert calls == [a.id]


def test_mouse_down_goes_to_topmost_widget(state):
    clicks = []
    _box(state, 0, 0, 50, 50, on_mouse_down=_recorder(clicks))
    top = _box(state, 10, 10, 20, 20, on_mouse_down=_recorder(clicks))
    state.event_queue.enqueue(FloraEvent(EventType.MOUSE_DOWN, x=15, y=15))
    state.current_screen.update(state)
    assert clicks == [top.id]
    assert state.event_queue.is_empty()


def test_mouse_down_outside_reaches_nobody(state):
    clicks = []
    _box(state, 0, 0, 10, 10, on_mouse_down=_recorder(clicks))
    state.event_queue.enqueue(FloraEvent(EventType.MOUSE_DOWN, x=40, y=40))
    state.current_screen.update(state)
    assert clicks == []


def test_mouse_down_skips_widget_without_hook(state):
    clicks = []
    bottom = _box(state, 0, 0, 50, 50, on_mouse_down=_recorder(clicks))
    _box(state, 0, 0, 50, 50)
    state.event_queue.enqueue(FloraEvent(EventType.MOUSE_DOWN, x=5, y=5))
    state.current_screen.update(state)
    assert clicks == [bottom.id]


def test_quit_stops_running(state):
    state.event_queue.enqueue(FloraEvent(EventType.QUIT))
    state.current_screen.update(state)
    assert state.running is False


def test_escape_toggles_running(state):
    state.event_queue.enqueue(FloraEvent(EventType.KEY_DOWN, key=pygame.K_ESCAPE))
    state.current_screen.update(state)
    assert state.running is False
    state.event_queue.enqueue(FloraEvent(EventType.KEY_DOWN, key=pygame.K_ESCAPE))
    state.current_screen.update(state)
    assert state.running is True


def test_other_events_are_drained(state):
    for kind in (EventType.MOUSE_MOVE, EventType.MOUSE_UP, EventType.KEY_UP, EventType.UNHANDLED):
        state.event_queue.enqueue(FloraEvent(kind))
    state.event_queue.enqueue(FloraEvent(EventType.KEY_DOWN, key=pygame.K_a))
    state.current_screen.update(state)
    assert len(state.event_queue) == 0
    assert state.running is True


def test_render_calls_visible_render_hooks(state):
    calls = []
    a = _box(state, 0, 0, 5, 5, render=_recorder(calls))
    _box(state, 0, 0, 5, 5, visible=False, render=_recorder(calls))
    b = _box(state, 0, 0, 5, 5, render=_recorder(calls))
    state.current_screen.render(state)
    assert calls == [a.id, b.id]


def test_render_draws_box(state):
    state.renderer = pygame.Surface((40, 40))
    colour = get_colour("red", 500)
    _box(state, 5, 5, 20, 20, colour=colour, render=base_box_widget_render)
    state.current_screen.render(state)
    assert tuple(state.renderer.get_at((15, 15)))[:3] == colour.as_tuple()[:3]
    assert tuple(state.renderer.get_at((35, 35)))[:3] == (0, 0, 0)


def test_render_without_state_raises(state):
    with pytest.raises(ValueError):
        state.current_screen.render(None)


def test_destroy_clears_widgets_and_hooks(state):
    _box(state, 0, 0, 5, 5)
    _box(state, 0, 0, 5, 5)
    screen = state.current_screen
    screen.destroy(state)
    assert screen.widgets == []
    assert screen.on_screen_destroy is None
    assert screen.on_screen_create is None


def test_base_screen_destroy_rejects_missing_screen(state):
    with pytest.raises(ValueError):
        base_screen_destroy(state, None)