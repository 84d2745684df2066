"""A small pygame widget toolkit: box and text widgets, row and column layout, an event queue and a colour palette."""

__version__ = "0.1.0"