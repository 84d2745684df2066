"""Application state and the window's lifecycle."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .events import EventQueue  # noqa: E402
from .fonts import FontError, destroy_fonts, init_fonts  # noqa: E402
from .screens import Screen  # noqa: E402

logger = logging.getLogger(__name__)

EVENT_QUEUE_CAPACITY = 64


class ApplicationError(Exception):
    """Raised when the application or its window cannot be set up or torn down."""


@dataclass(eq=False)
class ApplicationState:
    """Everything the running application shares between its parts."""

    window: Any = None
    renderer: Any = None
    font: Any = None
    font_size: float = 0.0
    last_frame_time: int = 0
    delta_time: float = 0.0
    window_width: int = 800
    window_height: int = 600
    running: bool = False
    event_queue: EventQueue = field(default_factory=EventQueue)
    current_screen: Optional[Screen] = None


def create_window(state: ApplicationState, title: str) -> None:
    """Open a window of the state's size; it doubles as the render target."""
    try:
        pygame.display.init()
    except pygame.error as exc:
        raise ApplicationError(f"failed to initialise video: {exc}") from exc
    try:
        window = pygame.display.set_mode((state.window_width, state.window_height))
    except pygame.error as exc:
        pygame.display.quit()
        raise ApplicationError(f"failed to create window: {exc}") from exc
    pygame.display.set_caption(title)
    state.window = window
    state.renderer = window
    logger.debug("window created")


def destroy_window(state: ApplicationState) -> None:
    """Close the window, stop running and discard pending events."""
    if state.window is None:
        raise ApplicationError("window is not initialised")
    pygame.display.quit()
    state.window = None
    state.renderer = None
    state.running = False
    state.event_queue.clear()
    logger.debug("window destroyed")


def init_application(state: ApplicationState, title: str, width: int, height: int) -> None:
    """Open the window, set up a fresh screen, events and fonts, then build the screen."""
    state.window_width = width
    state.window_height = height
    create_window(state, title)

    state.current_screen = Screen()
    state.event_queue = EventQueue(EVENT_QUEUE_CAPACITY)

    try:
        init_fonts()
    except FontError as exc:
        raise ApplicationError(str(exc)) from exc

    screen = state.current_screen
    if screen.on_screen_create:
        screen.on_screen_create(state, screen)
    logger.debug("application initialised")


def destroy_application(state: ApplicationState) -> None:
    """Release fonts and the window."""
    destroy_fonts(state)
    destroy_window(state)
    state.event_queue.clear()
    logger.debug("application destroyed")