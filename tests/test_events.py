from types import SimpleNamespace
from unittest import mock

import pygame
import pytest

from florakit.constants import GROWTH_FACTOR, INITIAL_EVENT_QUEUE_CAPACITY
from florakit.events import (
    EventQueue,
    EventType,
    FloraEvent,
    event_from_pygame,
    get_input,
)


def test_queue_is_fifo():
    queue = EventQueue()
    events = [FloraEvent(EventType.KEY_DOWN, key=k) for k in (1, 2, 3)]
    for event in events:
        queue.enqueue(event)
    assert [queue.dequeue() for _ in events] == events
    assert queue.is_empty()


def test_new_queue_is_empty():
    queue = EventQueue()
    assert queue.is_empty()
    assert len(queue) == 0
    assert queue.capacity == INITIAL_EVENT_QUEUE_CAPACITY


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        EventQueue().dequeue()


def test_enqueue_rejects_non_event():
    queue = EventQueue()
    with pytest.raises(TypeError):
        queue.enqueue(None)
    assert queue.is_empty()


def test_invalid_capacity():
    with pytest.raises(ValueError):
        EventQueue(0)


def test_queue_grows_when_full():
    queue = EventQueue()
    for _ in range(INITIAL_EVENT_QUEUE_CAPACITY - 1):
        queue.enqueue(FloraEvent(EventType.MOUSE_MOVE))
    assert queue.capacity == INITIAL_EVENT_QUEUE_CAPACITY
    queue.enqueue(FloraEvent(EventType.MOUSE_MOVE))
    assert queue.capacity == INITIAL_EVENT_QUEUE_CAPACITY * GROWTH_FACTOR
    assert len(queue) == INITIAL_EVENT_QUEUE_CAPACITY


def test_growth_preserves_order():
    queue = EventQueue(2)
    events = [FloraEvent(EventType.KEY_UP, key=k) for k in range(20)]
    for event in events:
        queue.enqueue(event)
    assert len(queue) == len(events)
    assert [queue.dequeue() for _ in range(len(events))] == events


def test_clear_empties_queue():
    queue = EventQueue()
    queue.enqueue(FloraEvent(EventType.QUIT))
    queue.clear()
    assert queue.is_empty()
    queue.clear()
    assert len(queue) == 0


def test_key_event_conversion():
    pg_event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, mod=0)
    event = event_from_pygame(pg_event)
    assert event.type is EventType.KEY_DOWN
    assert event.key == pygame.K_ESCAPE


def test_mouse_button_conversion():
    pg_event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 20), button=1)
    event = event_from_pygame(pg_event)
    assert event.type is EventType.MOUSE_DOWN
    assert (event.x, event.y, event.button) == (10.0, 20.0, 1)


def test_mouse_up_and_motion_conversion():
    up = event_from_pygame(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(3, 4), button=3))
    motion = event_from_pygame(
        pygame.event.Event(pygame.MOUSEMOTION, pos=(5, 6), rel=(1, 1), buttons=(0, 0, 0))
    )
    assert up.type is EventType.MOUSE_UP
    assert up.button == 3
    assert motion.type is EventType.MOUSE_MOVE
    assert (motion.x, motion.y) == (5.0, 6.0)


def test_quit_and_unhandled_conversion():
    assert event_from_pygame(pygame.event.Event(pygame.QUIT)).type is EventType.QUIT
    unhandled = event_from_pygame(pygame.event.Event(pygame.USEREVENT))
    assert unhandled == FloraEvent(EventType.UNHANDLED)


def test_conversion_rejects_none():
    with pytest.raises(TypeError):
        event_from_pygame(None)


def test_get_input_enqueues_supported_events():
    state = SimpleNamespace(event_queue=EventQueue())
    raw = [
        pygame.event.Event(pygame.KEYUP, key=pygame.K_a, mod=0),
        pygame.event.Event(pygame.USEREVENT),
        pygame.event.Event(pygame.QUIT),
    ]
    with mock.patch("pygame.event.get", return_value=raw):
        get_input(state)
    assert len(state.event_queue) == 2
    assert state.event_queue.dequeue().type is EventType.KEY_UP
    assert state.event_queue.dequeue().type is EventType.QUIT