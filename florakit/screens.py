"""Screens: the widget collections that receive events and draw each frame."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .demos import demo_screen_create  # noqa: E402
from .events import EventType, FloraEvent  # noqa: E402
from .widgets import Widget  # noqa: E402

logger = logging.getLogger(__name__)

ScreenHook = Callable[[Any, "Screen"], None]


def base_screen_destroy(state: Any, screen: Optional[Screen]) -> None:
    """Tear down every widget on ``screen`` and detach its hooks."""
    if screen is None:
        raise ValueError("screen is not initialised")
    if screen.widgets:
        for widget in screen.widgets:
            widget.destroy()
        screen.widgets.clear()
        logger.debug("screen destroyed")
    screen.on_screen_create = None
    screen.on_screen_destroy = None


@dataclass(eq=False)
class Screen:
    """A set of widgets, in creation order, with create and destroy hooks."""

    on_screen_create: Optional[ScreenHook] = demo_screen_create
    on_screen_destroy: Optional[ScreenHook] = base_screen_destroy
    widgets: list[Widget] = field(default_factory=list)

    def update(self, state: Any) -> None:
        """Run widget update hooks, then handle every queued event."""
        for widget in self.widgets:
            if widget is not None and widget.is_visible and widget.callbacks.update:
                widget.callbacks.update(widget, state)

        queue = state.event_queue
        while not queue.is_empty():
            self._handle(queue.dequeue(), state)

    def _handle(self, event: FloraEvent, state: Any) -> None:
        if event.type is EventType.MOUSE_DOWN:
            # The widget drawn last sits on top, so it is offered the click first.
            for widget in reversed(self.widgets):
                if (
                    widget.is_visible
                    and widget.callbacks.on_mouse_down
                    and widget.contains_point(int(event.x), int(event.y))
                ):
                    widget.callbacks.on_mouse_down(widget, state)
                    break
        elif event.type is EventType.KEY_DOWN:
            if event.key == pygame.K_ESCAPE:
                state.running = not state.running
            else:
                logger.info("key pressed: %s", _key_name(event.key))
        elif event.type is EventType.QUIT:
            state.running = False
        elif event.type is EventType.UNHANDLED:
            logger.info("unhandled event: %s", event.type.name)

    def render(self, state: Any) -> None:
        """Call the render hook of every visible widget, in creation order."""
        if state is None:
            raise ValueError("invalid application state")
        for widget in self.widgets:
            if widget.is_visible and widget.callbacks.render:
                widget.callbacks.render(widget, state)

    def destroy(self, state: Any) -> None:
        """Run the screen's destroy hook, or the default teardown if it has none."""
        hook = self.on_screen_destroy or base_screen_destroy
        hook(state, self)


def _key_name(key: int) -> str:
    try:
        return pygame.key.name(key) or str(key)
    except pygame.error:
        return str(key)