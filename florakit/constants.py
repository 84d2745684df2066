"""Engine-wide constants and small helpers."""

from __future__ import annotations

import random
from pathlib import Path

ENGINE_FATAL = 1
ENGINE_SUCCESS = 0

INITIAL_EVENT_QUEUE_CAPACITY = 8
INITIAL_WIDGET_CAPACITY = 8
INITIAL_CHILD_WIDGET_CAPACITY = 4
INITIAL_FONT_CAPACITY = 4
GROWTH_FACTOR = 2
BASE_TEXT_SIZE = 24

OPEN_SANS_FONT_PATH = str(
    Path("assets") / "fonts" / "Open_Sans" / "OpenSans-VariableFont_wdth,wght.ttf"
)


def rand_between(low: int, high: int) -> int:
    """Return a random integer in the inclusive range [low, high]."""
    if high < low:
        raise ValueError(f"empty range: low={low} is greater than high={high}")
    return random.randint(low, high)