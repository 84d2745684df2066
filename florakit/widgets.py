"""Widgets, their styles and the box layout that sizes and places them."""

from __future__ import annotations

import copy
import enum
import logging
import os
import random
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .colours import Colour  # noqa: E402

logger = logging.getLogger(__name__)

WidgetCallback = Callable[["Widget", Any], None]


class WidgetError(Exception):
    """Raised when a widget cannot be created or modified."""


class WidgetType(enum.Enum):
    """What a widget draws."""

    BOX = enum.auto()
    TEXT = enum.auto()


class LayoutDirection(enum.Enum):
    """The axis along which a widget lays out its children."""

    LEFT_TO_RIGHT = enum.auto()
    TOP_TO_BOTTOM = enum.auto()


class SizingType(enum.Enum):
    """How a widget's extent along one axis is decided."""

    FIT = enum.auto()
    FIXED = enum.auto()
    GROW = enum.auto()


def _clear() -> Colour:
    return Colour(0, 0, 0, 0)


@dataclass
class Padding:
    """Space between a widget's edge and its children."""

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0


@dataclass
class Gap:
    """Space between neighbouring children along each axis."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Dimension:
    """A sizing rule and the extent it currently resolves to."""

    type: SizingType = SizingType.FIT
    value: float = 0.0


@dataclass
class Sizing:
    """The width and height rules of a widget."""

    width: Dimension = field(default_factory=Dimension)
    height: Dimension = field(default_factory=Dimension)


@dataclass
class Position:
    """The top-left corner of a widget in window coordinates."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class WidgetStyle:
    """Appearance and layout settings of a widget."""

    text_colour: Colour = field(default_factory=_clear)
    font_size: int = 0
    inner_colour: Colour = field(default_factory=_clear)
    border_colour: Colour = field(default_factory=_clear)
    padding: Padding = field(default_factory=Padding)
    gap: Gap = field(default_factory=Gap)
    layout_direction: LayoutDirection = LayoutDirection.LEFT_TO_RIGHT
    sizing: Sizing = field(default_factory=Sizing)
    position: Position = field(default_factory=Position)


@dataclass
class WidgetCallbacks:
    """Hooks the screen calls on a widget."""

    update: Optional[WidgetCallback] = None
    render: Optional[WidgetCallback] = None
    on_mouse_down: Optional[WidgetCallback] = None
    on_destroy: Optional[WidgetCallback] = None


@dataclass(eq=False)
class Widget:
    """A node in the widget tree: a box or a piece of rendered text."""

    id: int
    type: WidgetType
    style: WidgetStyle = field(default_factory=WidgetStyle)
    callbacks: WidgetCallbacks = field(default_factory=WidgetCallbacks)
    is_visible: bool = True
    parent: Optional[Widget] = field(default=None, repr=False)
    children: list[Widget] = field(default_factory=list, repr=False)
    text: str = ""
    font: Any = field(default=None, repr=False)
    surface: Any = field(default=None, repr=False)

    def contains_point(self, x: float, y: float) -> bool:
        """Return True if the visible widget covers the point (x, y)."""
        if not self.is_visible:
            return False
        pos = self.style.position
        size = self.style.sizing
        return (
            pos.x <= x < pos.x + size.width.value
            and pos.y <= y < pos.y + size.height.value
        )

    def add_child(self, child: Widget) -> None:
        """Append ``child`` to this widget's children and adopt it."""
        if child is None:
            raise WidgetError("cannot add a missing child widget")
        self.children.append(child)
        child.parent = self

    def destroy(self) -> None:
        """Tear down this widget's subtree."""
        for child in self.children:
            child.destroy()
        self.children.clear()


def width_fit(value: float) -> Dimension:
    """A width that fits its children."""
    return Dimension(SizingType.FIT, value)


def width_fixed(value: float) -> Dimension:
    """A fixed width."""
    return Dimension(SizingType.FIXED, value)


def width_grow(value: float) -> Dimension:
    """A width that grows into the parent's free space."""
    return Dimension(SizingType.GROW, value)


def height_fit(value: float) -> Dimension:
    """A height that fits its children."""
    return Dimension(SizingType.FIT, value)


def height_fixed(value: float) -> Dimension:
    """A fixed height."""
    return Dimension(SizingType.FIXED, value)


def height_grow(value: float) -> Dimension:
    """A height that grows into the parent's free space."""
    return Dimension(SizingType.GROW, value)


def _calc_dimensions(widget: Widget) -> None:
    if not widget.is_visible or not widget.children:
        return
    style = widget.style
    total_width = 0.0
    total_height = 0.0
    visible = 0

    if style.layout_direction is LayoutDirection.LEFT_TO_RIGHT:
        for child in widget.children:
            _calc_dimensions(child)
            if child.is_visible:
                total_height = max(total_height, child.style.sizing.height.value)
                total_width += child.style.sizing.width.value
                visible += 1
        if visible:
            total_width += (visible - 1) * style.gap.x
    else:
        for child in widget.children:
            _calc_dimensions(child)
            if child.is_visible:
                total_height += child.style.sizing.height.value
                total_width = max(total_width, child.style.sizing.width.value)
                visible += 1
        if visible:
            total_height += (visible - 1) * style.gap.y

    if style.sizing.width.type is SizingType.FIT:
        style.sizing.width.value = total_width + style.padding.left + style.padding.right
    if style.sizing.height.type is SizingType.FIT:
        style.sizing.height.value = total_height + style.padding.top + style.padding.bottom


def _calc_child_positions(widget: Widget) -> None:
    if not widget.is_visible or not widget.children:
        return
    style = widget.style
    offset_x = style.padding.left
    offset_y = style.padding.top
    horizontal = style.layout_direction is LayoutDirection.LEFT_TO_RIGHT
    for child in widget.children:
        if not child.is_visible:
            continue
        child.style.position.x = style.position.x + offset_x
        child.style.position.y = style.position.y + offset_y
        if horizontal:
            offset_x += child.style.sizing.width.value + style.gap.x
        else:
            offset_y += child.style.sizing.height.value + style.gap.y
        _calc_child_positions(child)


def _grow_axis(widget: Widget, horizontal: bool) -> None:
    style = widget.style
    along = LayoutDirection.LEFT_TO_RIGHT if horizontal else LayoutDirection.TOP_TO_BOTTOM

    def dim(w: Widget) -> Dimension:
        return w.style.sizing.width if horizontal else w.style.sizing.height

    remaining = dim(widget).value
    if horizontal:
        remaining -= style.padding.left + style.padding.right
    else:
        remaining -= style.padding.top + style.padding.bottom

    visible = sum(1 for child in widget.children if child.is_visible)
    if visible:
        remaining -= (style.gap.x if horizontal else style.gap.y) * (visible - 1)

    if style.layout_direction is along:
        remaining -= sum(
            dim(child).value
            for child in widget.children
            if child.is_visible and dim(child).type is not SizingType.GROW
        )

    grow_count = sum(1 for child in widget.children if dim(child).type is SizingType.GROW)
    if grow_count == 0:
        return
    share = remaining / grow_count if style.layout_direction is along else remaining
    for child in widget.children:
        if child.is_visible and dim(child).type is SizingType.GROW:
            dim(child).value = share


def layout(widget: Widget) -> None:
    """Size the widget's subtree, share free space among its growing children
    and place every visible descendant."""
    if widget is None or not widget.is_visible:
        return
    _calc_dimensions(widget)
    _grow_axis(widget, horizontal=True)
    _grow_axis(widget, horizontal=False)
    _calc_child_positions(widget)


def _render_widget(widget: Widget, state: Any) -> None:
    if widget is None or not widget.is_visible:
        return
    target = state.renderer
    pos = widget.style.position
    width = widget.style.sizing.width.value
    height = widget.style.sizing.height.value

    if widget.type is WidgetType.TEXT:
        image = widget.surface
        if image is None or width <= 0 or height <= 0:
            return
        size = (int(width), int(height))
        if image.get_size() != size:
            image = pygame.transform.scale(image, size)
        target.blit(image, (int(pos.x), int(pos.y)))
        return

    rect = pygame.Rect(int(pos.x), int(pos.y), int(width), int(height))
    pygame.draw.rect(target, widget.style.inner_colour.as_tuple(), rect)
    pygame.draw.rect(target, widget.style.border_colour.as_tuple(), rect, 1)
    for child in widget.children:
        if child.is_visible:
            _render_widget(child, state)


def base_text_widget_render(widget: Widget, state: Any) -> None:
    """Draw a text widget at its current position and size."""
    if widget is None or not widget.is_visible:
        return
    _render_widget(widget, state)


def base_box_widget_render(widget: Widget, state: Any) -> None:
    """Lay out a box widget's subtree and draw it."""
    if widget is None or not widget.is_visible:
        return
    layout(widget)
    _render_widget(widget, state)


def base_box_widget_update(widget: Widget, state: Any) -> None:
    """Default per-frame update for a box: keeps its children linked back to it."""
    if widget is None:
        return
    for child in widget.children:
        child.parent = widget


def _random_colour() -> Colour:
    return Colour(*(random.randrange(255) for _ in range(4)))


def base_box_widget_on_mouse_down(widget: Widget, state: Any) -> None:
    """Give the clicked box random fill and border colours."""
    widget.style.inner_colour = _random_colour()
    widget.style.border_colour = _random_colour()


def _screen_of(state: Any) -> Any:
    if state is None:
        raise WidgetError("widget creation got no application state")
    screen = getattr(state, "current_screen", None)
    if screen is None:
        raise WidgetError("no screen to add widgets to")
    return screen


def _register(screen: Any, widget_type: WidgetType, parent: Optional[Widget],
              style: WidgetStyle, callbacks: WidgetCallbacks, is_visible: bool,
              **extra: Any) -> Widget:
    widget = Widget(
        id=len(screen.widgets),
        type=widget_type,
        style=style,
        callbacks=copy.copy(callbacks) if callbacks is not None else WidgetCallbacks(),
        is_visible=is_visible,
        parent=parent,
        **extra,
    )
    screen.widgets.append(widget)
    return widget


def create_box_widget(state: Any, parent: Optional[Widget], style: WidgetStyle,
                      callbacks: WidgetCallbacks, is_visible: bool) -> Widget:
    """Create a box widget and register it with the current screen.

    The style is copied; the widget is not added to ``parent``'s children.
    """
    screen = _screen_of(state)
    return _register(screen, WidgetType.BOX, parent, copy.deepcopy(style),
                     callbacks, is_visible)


def create_text_widget(state: Any, parent: Optional[Widget], style: WidgetStyle,
                       callbacks: WidgetCallbacks, is_visible: bool, text: str,
                       font: Any) -> Widget:
    """Render ``text`` with ``font`` into a text widget sized to the result."""
    screen = _screen_of(state)
    if font is None:
        raise WidgetError("text widget created with no font")
    style = copy.deepcopy(style)
    colour = style.text_colour
    try:
        image = font.render(text, True, (colour.r, colour.g, colour.b))
    except pygame.error as exc:
        raise WidgetError(f"failed to render text {text!r}: {exc}") from exc
    width, height = image.get_size()
    style.sizing.width.value = float(width)
    style.sizing.height.value = float(height)
    return _register(screen, WidgetType.TEXT, parent, style, callbacks,
                     is_visible, text=text, font=font, surface=image)