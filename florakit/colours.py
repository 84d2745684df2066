"""Colour type and the built-in palette of named colour families."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Colour:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"channel {name} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} out of range 0..255: {value}")

    def as_tuple(self) -> tuple[int, int, int, int]:
        """Return the channels as an (r, g, b, a) tuple."""
        return (self.r, self.g, self.b, self.a)

    def with_alpha(self, alpha: int) -> Colour:
        """Return a copy of this colour with a different alpha."""
        return Colour(self.r, self.g, self.b, alpha)


BLACK = Colour(0, 0, 0, 255)
WHITE = Colour(255, 255, 255, 255)

SHADES: tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

_RAW_PALETTE: dict[str, tuple[tuple[int, int, int], ...]] = {
    "slate": (
        (248, 250, 252), (241, 245, 249), (226, 232, 240), (203, 213, 225),
        (148, 163, 184), (100, 116, 139), (71, 85, 105), (51, 65, 85),
        (30, 41, 59), (15, 23, 42), (2, 6, 23),
    ),
    "gray": (
        (249, 250, 251), (243, 244, 246), (229, 231, 235), (209, 213, 219),
        (156, 163, 175), (107, 114, 128), (75, 85, 99), (55, 65, 81),
        (31, 41, 55), (17, 24, 39), (3, 7, 18),
    ),
    "zinc": (
        (250, 250, 250), (244, 244, 245), (228, 228, 231), (212, 212, 216),
        (161, 161, 170), (113, 113, 122), (82, 82, 91), (63, 63, 70),
        (39, 39, 42), (24, 24, 27), (9, 9, 11),
    ),
    "neutral": (
        (250, 250, 250), (245, 245, 245), (229, 229, 229), (212, 212, 212),
        (163, 163, 163), (115, 115, 115), (82, 82, 82), (64, 64, 64),
        (38, 38, 38), (23, 23, 23), (10, 10, 10),
    ),
    "stone": (
        (250, 250, 249), (245, 245, 244), (231, 229, 228), (214, 211, 209),
        (168, 162, 158), (120, 113, 108), (87, 83, 78), (68, 64, 60),
        (41, 37, 36), (28, 25, 23), (12, 10, 9),
    ),
    "red": (
        (254, 242, 242), (254, 226, 226), (254, 202, 202), (252, 165, 165),
        (248, 113, 113), (239, 68, 68), (220, 38, 38), (185, 28, 28),
        (153, 27, 27), (127, 29, 29), (69, 10, 10),
    ),
    "orange": (
        (255, 247, 237), (255, 237, 213), (254, 215, 171), (253, 186, 116),
        (251, 146, 60), (249, 115, 22), (234, 88, 12), (194, 65, 12),
        (154, 52, 18), (124, 45, 18), (66, 21, 5),
    ),
    "amber": (
        (255, 251, 235), (254, 243, 199), (253, 230, 138), (252, 211, 77),
        (251, 191, 36), (245, 158, 11), (217, 119, 6), (180, 83, 9),
        (146, 64, 14), (120, 53, 15), (65, 28, 5),
    ),
    "yellow": (
        (254, 252, 232), (254, 249, 195), (254, 240, 138), (253, 224, 71),
        (250, 204, 21), (234, 179, 8), (202, 138, 4), (161, 98, 7),
        (133, 77, 14), (113, 63, 18), (66, 32, 6),
    ),
    "lime": (
        (247, 254, 231), (236, 252, 203), (217, 249, 157), (190, 242, 100),
        (163, 230, 53), (132, 204, 22), (101, 163, 13), (77, 124, 15),
        (63, 98, 18), (54, 83, 20), (25, 39, 7),
    ),
    "green": (
        (240, 253, 244), (220, 252, 231), (187, 247, 208), (134, 239, 172),
        (74, 222, 128), (34, 197, 94), (22, 163, 74), (21, 128, 61),
        (22, 101, 52), (20, 83, 45), (5, 46, 22),
    ),
    "emerald": (
        (236, 253, 245), (209, 250, 229), (167, 243, 208), (110, 231, 183),
        (52, 211, 153), (16, 185, 129), (5, 150, 105), (4, 120, 87),
        (6, 95, 70), (6, 78, 59), (2, 44, 34),
    ),
    "teal": (
        (240, 253, 250), (204, 251, 241), (153, 246, 228), (94, 234, 212),
        (45, 212, 191), (20, 184, 166), (13, 148, 136), (15, 118, 110),
        (17, 94, 89), (19, 78, 74), (4, 47, 46),
    ),
    "cyan": (
        (236, 254, 255), (207, 250, 254), (165, 242, 251), (103, 232, 249),
        (34, 211, 238), (6, 182, 212), (8, 145, 178), (14, 116, 144),
        (21, 94, 117), (22, 78, 99), (8, 47, 73),
    ),
    "sky": (
        (240, 249, 255), (224, 242, 254), (186, 230, 253), (125, 211, 252),
        (59, 180, 255), (14, 165, 233), (2, 132, 199), (3, 105, 161),
        (7, 89, 133), (12, 74, 110), (8, 47, 73),
    ),
    "blue": (
        (239, 246, 255), (219, 234, 254), (191, 219, 254), (147, 197, 253),
        (96, 165, 250), (59, 130, 246), (37, 99, 235), (29, 78, 216),
        (30, 64, 175), (30, 58, 138), (17, 24, 39),
    ),
    "indigo": (
        (238, 242, 255), (224, 231, 255), (199, 210, 254), (165, 180, 252),
        (129, 140, 248), (99, 102, 241), (79, 70, 229), (67, 56, 202),
        (55, 48, 163), (49, 46, 129), (26, 24, 58),
    ),
    "violet": (
        (245, 243, 255), (237, 233, 254), (221, 214, 254), (196, 181, 253),
        (167, 139, 250), (139, 92, 246), (124, 58, 237), (109, 40, 217),
        (91, 33, 182), (76, 29, 149), (39, 15, 85),
    ),
    "purple": (
        (250, 245, 255), (243, 232, 255), (233, 213, 255), (216, 180, 254),
        (192, 132, 252), (168, 85, 247), (147, 51, 234), (126, 34, 206),
        (107, 33, 168), (88, 28, 135), (49, 19, 81),
    ),
    "fuchsia": (
        (253, 244, 255), (250, 232, 255), (245, 208, 254), (240, 171, 252),
        (232, 121, 249), (217, 70, 239), (192, 38, 211), (162, 28, 175),
        (134, 25, 143), (112, 26, 117), (66, 15, 70),
    ),
    "pink": (
        (253, 242, 248), (252, 231, 243), (251, 207, 232), (249, 168, 212),
        (244, 114, 182), (236, 72, 153), (219, 39, 119), (190, 24, 93),
        (157, 23, 77), (131, 24, 67), (75, 9, 36),
    ),
    "rose": (
        (255, 241, 242), (255, 228, 230), (254, 205, 211), (253, 164, 175),
        (251, 113, 133), (244, 63, 94), (225, 29, 72), (190, 18, 60),
        (159, 18, 57), (136, 19, 55), (76, 5, 25),
    ),
}

PALETTE: Mapping[str, Mapping[int, Colour]] = MappingProxyType(
    {
        family: MappingProxyType(
            {shade: Colour(*rgb) for shade, rgb in zip(SHADES, values)}
        )
        for family, values in _RAW_PALETTE.items()
    }
)

FAMILIES: tuple[str, ...] = tuple(PALETTE)


def get_colour(family: str, shade: int) -> Colour:
    """Look up a palette colour such as ("slate", 900).

    The family name is case-insensitive. Raises KeyError for an unknown
    family or shade.
    """
    try:
        shades = PALETTE[family.lower()]
    except KeyError:
        raise KeyError(f"unknown colour family: {family!r}") from None
    try:
        return shades[shade]
    except KeyError:
        raise KeyError(f"unknown shade {shade!r} for family {family!r}") from None