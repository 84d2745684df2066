"""Demonstration screens that build sample widget trees."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .colours import WHITE, Colour, get_colour  # noqa: E402
from .constants import OPEN_SANS_FONT_PATH  # noqa: E402
from .fonts import FontError, add_font  # noqa: E402
from .widgets import (  # noqa: E402
    Dimension,
    Gap,
    LayoutDirection,
    Padding,
    Position,
    Sizing,
    Widget,
    WidgetCallbacks,
    WidgetStyle,
    base_box_widget_on_mouse_down,
    base_box_widget_render,
    base_box_widget_update,
    base_text_widget_render,
    create_box_widget,
    create_text_widget,
    height_fit,
    height_fixed,
    height_grow,
    width_fit,
    width_fixed,
    width_grow,
)

logger = logging.getLogger(__name__)

_LTR = LayoutDirection.LEFT_TO_RIGHT
_TTB = LayoutDirection.TOP_TO_BOTTOM


def _default_font_path() -> str:
    return str(Path(pygame.__file__).parent / pygame.font.get_default_font())


def _load_font(state: Any, point_size: float) -> Any:
    """Open the engine font, falling back to pygame's bundled font."""
    try:
        return add_font(state, OPEN_SANS_FONT_PATH, point_size)
    except FontError as exc:
        logger.warning("%s; using the bundled default font", exc)
        return add_font(state, _default_font_path(), point_size)


def _box(
    state: Any,
    parent: Optional[Widget],
    inner: Colour,
    border: Colour,
    padding: tuple[float, float, float, float],
    gap: tuple[float, float],
    direction: LayoutDirection,
    width: Dimension,
    height: Dimension,
    position: tuple[float, float] = (0.0, 0.0),
    clickable: bool = True,
    with_update: bool = False,
) -> Widget:
    style = WidgetStyle(
        inner_colour=inner,
        border_colour=border,
        padding=Padding(*padding),
        gap=Gap(*gap),
        layout_direction=direction,
        sizing=Sizing(width=width, height=height),
        position=Position(*position),
    )
    callbacks = WidgetCallbacks(
        update=base_box_widget_update if with_update else None,
        render=base_box_widget_render,
        on_mouse_down=base_box_widget_on_mouse_down if clickable else None,
    )
    return create_box_widget(state, parent, style, callbacks, True)


def _text(
    state: Any,
    parent: Widget,
    colour: Colour,
    font_size: int,
    text: str,
    font: Any,
    position: tuple[float, float] = (0.0, 0.0),
    size: tuple[float, float] = (0.0, 0.0),
) -> Widget:
    style = WidgetStyle(
        text_colour=colour,
        font_size=font_size,
        sizing=Sizing(width=width_fixed(size[0]), height=height_fixed(size[1])),
        position=Position(*position),
    )
    callbacks = WidgetCallbacks(render=base_text_widget_render)
    return create_text_widget(state, parent, style, callbacks, True, text, font)


def demo_screen_create(state: Any, screen: Any) -> None:
    """Build the full demo: header, button row, two content columns and footer."""
    font = _load_font(state, 18)
    title_font = _load_font(state, 32)

    main_container = _box(
        state, None, get_colour("slate", 900), get_colour("slate", 700),
        (20.0, 20.0, 20.0, 20.0), (0.0, 20.0), _TTB,
        width_fixed(760), height_fit(0), position=(20, 20), clickable=False,
    )

    header = _box(
        state, main_container, get_colour("indigo", 600), get_colour("indigo", 400),
        (20.0, 20.0, 15.0, 15.0), (0.0, 10.0), _TTB,
        width_grow(1), height_fit(0),
    )
    header_title = _text(state, header, WHITE, 32, "Flora Engine Demo", title_font)
    header_subtitle = _text(
        state, header, get_colour("indigo", 200), 18,
        "Click widgets to randomize colors", font,
    )
    header.add_child(header_title)
    header.add_child(header_subtitle)
    main_container.add_child(header)

    button_row = _box(
        state, main_container, get_colour("slate", 800), get_colour("slate", 600),
        (15.0, 15.0, 15.0, 15.0), (15.0, 0.0), _LTR,
        width_grow(1), height_fit(0), clickable=False,
    )
    buttons = (
        ("Primary", get_colour("blue", 500)),
        ("Success", get_colour("green", 500)),
        ("Warning", get_colour("amber", 500)),
    )
    for label, colour in buttons:
        button = _box(
            state, button_row, colour, WHITE,
            (12.0, 12.0, 10.0, 10.0), (0.0, 0.0), _LTR,
            width_grow(1), height_fit(0),
        )
        button.add_child(_text(state, button, WHITE, 18, label, font))
        button_row.add_child(button)
    main_container.add_child(button_row)

    content_row = _box(
        state, main_container, get_colour("slate", 800), get_colour("slate", 600),
        (15.0, 15.0, 15.0, 15.0), (20.0, 0.0), _LTR,
        width_grow(1), height_fixed(300), clickable=False,
    )

    left_column = _box(
        state, content_row, get_colour("slate", 700), get_colour("slate", 500),
        (15.0, 15.0, 15.0, 15.0), (0.0, 15.0), _TTB,
        width_grow(1), height_grow(1),
    )
    cards = (
        ("Card 1", get_colour("purple", 600)),
        ("Card 2", get_colour("pink", 600)),
        ("Card 3", get_colour("rose", 600)),
    )
    for label, colour in cards:
        card = _box(
            state, left_column, colour, WHITE,
            (10.0, 10.0, 8.0, 8.0), (0.0, 0.0), _LTR,
            width_grow(1), height_grow(1),
        )
        card.add_child(_text(state, card, WHITE, 18, label, font))
        left_column.add_child(card)
    content_row.add_child(left_column)

    right_column = _box(
        state, content_row, get_colour("cyan", 700), get_colour("cyan", 400),
        (15.0, 15.0, 15.0, 15.0), (0.0, 15.0), _TTB,
        width_grow(1), height_grow(1),
    )
    top_box = _box(
        state, right_column, get_colour("emerald", 600), get_colour("emerald", 300),
        (10.0, 10.0, 8.0, 8.0), (0.0, 0.0), _LTR,
        width_grow(1), height_grow(2),
    )
    top_box.add_child(_text(state, top_box, WHITE, 18, "Nested Layout", font))
    right_column.add_child(top_box)

    bottom_row = _box(
        state, right_column, get_colour("teal", 600), get_colour("teal", 300),
        (10.0, 10.0, 10.0, 10.0), (10.0, 0.0), _LTR,
        width_grow(1), height_grow(1),
    )
    for _ in range(2):
        small_box = _box(
            state, bottom_row, get_colour("sky", 500), get_colour("sky", 200),
            (8.0, 8.0, 6.0, 6.0), (0.0, 0.0), _LTR,
            width_grow(1), height_grow(1),
        )
        bottom_row.add_child(small_box)
    right_column.add_child(bottom_row)
    content_row.add_child(right_column)
    main_container.add_child(content_row)

    footer = _box(
        state, main_container, get_colour("slate", 700), get_colour("slate", 500),
        (15.0, 15.0, 10.0, 10.0), (0.0, 0.0), _LTR,
        width_grow(1), height_fit(0),
    )
    footer.add_child(
        _text(state, footer, get_colour("slate", 300), 18, "Press ESC to quit", font)
    )
    main_container.add_child(footer)


def base_screen_create(state: Any, screen: Any) -> None:
    """Build the small starter layout: a row holding a text box and a column."""
    base_widget = _box(
        state, None, get_colour("slate", 500), WHITE,
        (20.0, 20.0, 10.0, 10.0), (25.0, 0.0), _LTR,
        width_fixed(460), height_fit(50), position=(100, 100), with_update=True,
    )
    child1 = _box(
        state, base_widget, get_colour("indigo", 500), WHITE,
        (0.0, 0.0, 0.0, 0.0), (0.0, 0.0), _LTR,
        width_grow(125), height_grow(50), position=(50, 50), with_update=True,
    )
    child2 = _box(
        state, base_widget, get_colour("emerald", 500), WHITE,
        (10.0, 10.0, 5.0, 5.0), (0.0, 20.0), _TTB,
        width_grow(100), height_fit(100), position=(50, 50), with_update=True,
    )
    child3 = _box(
        state, child2, get_colour("cyan", 500), WHITE,
        (0.0, 0.0, 0.0, 0.0), (0.0, 0.0), _LTR,
        width_grow(50), height_grow(50), position=(50, 50), with_update=True,
    )
    child4 = _box(
        state, child2, get_colour("amber", 500), WHITE,
        (0.0, 0.0, 0.0, 0.0), (0.0, 0.0), _LTR,
        width_grow(90), height_grow(60), position=(50, 50), with_update=True,
    )

    base_widget.add_child(child1)
    base_widget.add_child(child2)
    child2.add_child(child3)
    child2.add_child(child4)

    font = _load_font(state, 24)
    child5 = _text(
        state, child1, WHITE, 24, "Hello World.", font,
        position=(50, 50), size=(40, 24),
    )
    child1.add_child(child5)