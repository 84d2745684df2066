"""Input events and the FIFO queue that carries them to the current screen."""

from __future__ import annotations

import enum
import logging
import os
from collections import deque
from dataclasses import dataclass
from typing import Any

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .constants import GROWTH_FACTOR, INITIAL_EVENT_QUEUE_CAPACITY  # noqa: E402

logger = logging.getLogger(__name__)


class EventType(enum.Enum):
    """Kinds of input event the engine understands."""

    MOUSE_MOVE = enum.auto()
    MOUSE_DOWN = enum.auto()
    MOUSE_UP = enum.auto()
    KEY_DOWN = enum.auto()
    KEY_UP = enum.auto()
    QUIT = enum.auto()
    UNHANDLED = enum.auto()


@dataclass(frozen=True)
class FloraEvent:
    """A single input event.

    Mouse events carry a position and button, key events a key code and
    modifier mask; fields that do not apply keep their zero defaults.
    """

    type: EventType
    x: float = 0.0
    y: float = 0.0
    button: int = 0
    key: int = 0
    mod: int = 0


class EventQueue:
    """A first-in, first-out queue of events that grows as it fills."""

    def __init__(self, capacity: int = INITIAL_EVENT_QUEUE_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"event queue capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._events: deque[FloraEvent] = deque()
        logger.debug("event queue initialised with capacity %d", capacity)

    @property
    def capacity(self) -> int:
        """Number of slots the queue currently reserves."""
        return self._capacity

    def enqueue(self, event: FloraEvent) -> None:
        """Append an event to the back of the queue."""
        if not isinstance(event, FloraEvent):
            raise TypeError(f"expected a FloraEvent, got {event!r}")
        # One slot is always kept free, so the queue grows when it would fill.
        if len(self._events) + 1 >= self._capacity:
            self._capacity *= GROWTH_FACTOR
            logger.debug("event queue resized to %d", self._capacity)
        self._events.append(event)

    def dequeue(self) -> FloraEvent:
        """Remove and return the event at the front of the queue."""
        if not self._events:
            raise IndexError("event queue is empty")
        return self._events.popleft()

    def is_empty(self) -> bool:
        """Return True if no events are waiting."""
        return not self._events

    def clear(self) -> None:
        """Discard every waiting event."""
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)


_TYPE_MAP: dict[int, EventType] = {
    pygame.KEYDOWN: EventType.KEY_DOWN,
    pygame.KEYUP: EventType.KEY_UP,
    pygame.MOUSEMOTION: EventType.MOUSE_MOVE,
    pygame.MOUSEBUTTONDOWN: EventType.MOUSE_DOWN,
    pygame.MOUSEBUTTONUP: EventType.MOUSE_UP,
    pygame.QUIT: EventType.QUIT,
}


def event_from_pygame(pg_event: Any) -> FloraEvent:
    """Convert a pygame event into a FloraEvent.

    Event kinds the engine does not support become UNHANDLED events.
    """
    if pg_event is None:
        raise TypeError("pygame event is None")
    kind = _TYPE_MAP.get(pg_event.type)
    if kind is None:
        logger.warning("unsupported pygame event type %d", pg_event.type)
        return FloraEvent(EventType.UNHANDLED)
    if kind in (EventType.KEY_DOWN, EventType.KEY_UP):
        return FloraEvent(
            kind, key=getattr(pg_event, "key", 0), mod=getattr(pg_event, "mod", 0)
        )
    if kind in (EventType.MOUSE_MOVE, EventType.MOUSE_DOWN, EventType.MOUSE_UP):
        x, y = getattr(pg_event, "pos", (0, 0))
        return FloraEvent(
            kind, x=float(x), y=float(y), button=getattr(pg_event, "button", 0)
        )
    return FloraEvent(kind)


def get_input(state: Any) -> None:
    """Drain pygame's event queue into the application's event queue.

    Only supported event kinds are kept; everything else is dropped.
    """
    for pg_event in pygame.event.get():
        if pg_event.type in _TYPE_MAP:
            state.event_queue.enqueue(event_from_pygame(pg_event))