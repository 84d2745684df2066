"""Command-line entry point and the main frame loop."""

from __future__ import annotations

import logging
import math
import re
import sys
import time
from typing import Optional, Sequence

from .apps import ApplicationError, ApplicationState, destroy_application, init_application
from .constants import ENGINE_FATAL, ENGINE_SUCCESS
from .events import get_input
from .fonts import FontError

import pygame

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
DEFAULT_TITLE = "Flora Engine"
PROGRAM = "florakit"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Read the integer at the start of ``text``, or 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_args(argv: Sequence[str]) -> tuple[int, int, str]:
    """Return (width, height, title) from the arguments after the program name.

    With fewer than three arguments the defaults are used and a usage note
    is printed.
    """
    args = list(argv)
    if len(args) < 3:
        print(f"Alternate Usage: {PROGRAM} <width> <height> <title>")
        print(f"Using: {PROGRAM} {DEFAULT_WIDTH} {DEFAULT_HEIGHT} {DEFAULT_TITLE}")
        return DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_TITLE
    return _leading_int(args[0]), _leading_int(args[1]), args[2]


def _ticks() -> int:
    return int(time.monotonic() * 1000)


def application_loop(state: ApplicationState) -> None:
    """Poll input, update, clear, draw and present until the state stops running."""
    screen = state.current_screen
    while state.running:
        frame_start = _ticks()
        get_input(state)
        screen.update(state)
        state.renderer.fill((0, 0, 0))
        screen.render(state)
        pygame.display.flip()
        frame_end = _ticks()

        state.delta_time = (frame_end - frame_start) / 1000.0
        fps = math.inf if state.delta_time == 0 else 1 / state.delta_time
        logger.debug("frames per second (FPS) = %f", fps)
        state.last_frame_time = frame_end


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the engine and return its exit status."""
    if argv is None:
        argv = sys.argv[1:]
    width, height, title = parse_args(argv)
    state = ApplicationState(window_width=width, window_height=height)

    try:
        init_application(state, title, width, height)
    except (ApplicationError, FontError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return ENGINE_FATAL

    state.running = True
    application_loop(state)

    try:
        destroy_application(state)
    except ApplicationError as exc:
        print(f"Error: failed to destroy application: {exc}", file=sys.stderr)
        return ENGINE_FATAL
    return ENGINE_SUCCESS


if __name__ == "__main__":
    sys.exit(main())