"""Font subsystem start-up, shutdown and loading."""

from __future__ import annotations

import logging
import os
from typing import Any

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

logger = logging.getLogger(__name__)


class FontError(Exception):
    """Raised when fonts cannot be initialised or loaded."""


def init_fonts() -> None:
    """Start the font subsystem."""
    try:
        pygame.font.init()
    except pygame.error as exc:
        raise FontError(f"failed to initialise fonts: {exc}") from exc


def destroy_fonts(state: Any) -> None:
    """Drop the application's current font and stop the font subsystem."""
    state.font = None
    pygame.font.quit()
    logger.debug("fonts destroyed")


def add_font(state: Any, path: str | os.PathLike[str], point_size: float) -> pygame.font.Font:
    """Open the font at ``path`` and make it the application's current font."""
    if path is None:
        raise FontError("font path not provided")
    if state is None:
        raise FontError("application not initialised")
    try:
        font = pygame.font.Font(os.fspath(path), int(round(point_size)))
    except (OSError, pygame.error) as exc:
        raise FontError(f"failed to open font {os.fspath(path)!r}: {exc}") from exc
    state.font = font
    state.font_size = point_size
    return font