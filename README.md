# florakit

A small widget toolkit built on pygame. Widgets are boxes and text labels
arranged in rows (`LayoutDirection.LEFT_TO_RIGHT`) or columns
(`LayoutDirection.TOP_TO_BOTTOM`). Each side of a widget has a sizing rule:
`FIT` wraps its children plus padding, `FIXED` keeps its value, and `GROW`
takes a share of the space its parent has left. The toolkit also provides a
growable event queue and a palette of named colours.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Running the demo

```
florakit
```

This opens an 800x600 window titled "Flora Engine" and shows the demo screen.
When fewer than three arguments are given, a usage note is printed and these
defaults are used. You can set the size and title with positional arguments:

```
florakit 1024 768 "My Window"
```

Width and height are read from the leading digits of each argument. A value
with no leading digits counts as 0.

Click a box to give it random fill and border colours. Press Escape or close
the window to quit. The command exits with status 0 on success and 1 if the
application cannot be set up or torn down.

The demo looks for the Open Sans font at
`assets/fonts/Open_Sans/OpenSans-VariableFont_wdth,wght.ttf`, relative to the
working directory. If that font cannot be opened, it uses pygame's bundled
default font.

## Using the library

`init_application` opens the window, creates a fresh `Screen` and runs that
screen's create hook. By default the hook is `demos.demo_screen_create`, so
the new screen already holds the demo widgets. To start from an empty screen,
destroy the screen first. `Screen.destroy` removes every widget and detaches
both hooks.

```python
from florakit.apps import ApplicationState, init_application, destroy_application
from florakit.engine import application_loop
from florakit.colours import get_colour
from florakit.widgets import (
    WidgetStyle, WidgetCallbacks, Padding, Gap, Sizing, Position,
    LayoutDirection, width_fixed, height_fit, width_grow, height_fixed,
    create_box_widget, base_box_widget_render, base_box_widget_on_mouse_down,
)

state = ApplicationState()
init_application(state, "Example", 800, 600)
state.current_screen.destroy(state)  # drop the demo widgets

root = create_box_widget(
    state,
    None,
    WidgetStyle(
        inner_colour=get_colour("slate", 900),
        border_colour=get_colour("slate", 700),
        padding=Padding(20, 20, 20, 20),
        gap=Gap(x=10, y=0),
        layout_direction=LayoutDirection.LEFT_TO_RIGHT,
        sizing=Sizing(width=width_fixed(400), height=height_fit(0)),
        position=Position(x=20, y=20),
    ),
    WidgetCallbacks(render=base_box_widget_render),
    True,
)
child = create_box_widget(
    state,
    root,
    WidgetStyle(
        inner_colour=get_colour("indigo", 500),
        sizing=Sizing(width=width_grow(1), height=height_fixed(80)),
    ),
    WidgetCallbacks(on_mouse_down=base_box_widget_on_mouse_down),
    True,
)
root.add_child(child)

state.running = True
application_loop(state)
destroy_application(state)
```

`create_box_widget` and `create_text_widget` register the new widget with the
current screen, give it an id in creation order and copy the style they are
given. They do not add the widget to its parent's children; call
`Widget.add_child` for that. `create_text_widget` renders the text once with
the given font and sets the widget's size to the size of the rendered image.
Fonts are opened with `fonts.add_font(state, path, point_size)`, which raises
`FontError` if the file cannot be opened.

### Layout

`layout(widget)` proceeds in three steps:

1. It works out the size of every `FIT` side in the subtree.
2. It shares the widget's free space among its `GROW` children. Along the
   layout direction the space is split evenly. Across it, each growing child
   gets the whole space.
3. It places each visible child after the parent's padding, with the gap
   between neighbours.

`base_box_widget_render` runs the layout and then draws the box, its
one-pixel border and its visible children. `base_text_widget_render` draws a
text widget at its position, scaled to its size. `Widget.contains_point(x, y)`
tests whether a visible widget covers a point.

### Events

`EventQueue` is a first-in, first-out queue of frozen `FloraEvent` values.
`enqueue` adds an event, `dequeue` removes one (`IndexError` when the queue is
empty), and `is_empty`, `clear` and `len()` report or reset its contents.

`events.get_input(state)` turns pending pygame key, mouse and quit events
into `FloraEvent`s and queues them. `event_from_pygame` converts a single
event.

`Screen.update` first runs the update hook of each visible widget, then
handles every queued event:

- A mouse click goes to the topmost visible widget under the pointer that has
  an `on_mouse_down` callback.
- Escape toggles `state.running`.
- Any other key press is logged.
- A quit event stops the loop.

`Screen.render` calls each visible widget's render hook in creation order.

### Colours

`Colour` is an immutable RGBA value with channels from 0 to 255. It has
`as_tuple()` and `with_alpha(alpha)`. `get_colour(family, shade)` returns a
palette colour, for example `get_colour("emerald", 500)`. It raises `KeyError`
for an unknown family or shade, and family names are case-insensitive.

The families are slate, gray, zinc, neutral, stone, red, orange, amber,
yellow, lime, green, emerald, teal, cyan, sky, blue, indigo, violet, purple,
fuchsia, pink and rose. Each has shades 50, 100 to 900 in steps of 100, and
950. `BLACK` and `WHITE` are also provided.

## Limitations

- An application has a single screen, and there is no switching between
  screens.
- Text widgets are rendered once, when they are created. Changing their text
  afterwards does not redraw them.
- There is no text input, focus handling or scrolling. The only keyboard
  action is Escape.

## Running the tests

```
pytest
```