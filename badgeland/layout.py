"""
Badge geometry.

Everything here is integer pixel arithmetic on already measured text widths:
the per-size table, the sizing of one segment (subject or content), and the
frozen layout handed to the style renderers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import SizeError

FONT_SIZE_FACTOR = 0.65
CHART_WIDTH_FACTOR = 5
# Extra room right of a sparkline for its stroke in the rounded styles
CHART_STROKE_MARGIN = 5
SOCIAL_NOTCH_WIDTH = 7


@dataclass(frozen=True)
class SizeMetrics:
    height: int
    icon_width: int
    icon_offset: int
    corner_radius: int


class Size(Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"

    @classmethod
    def from_str(cls, value: str) -> "Size":
        aliases = {
            "large": cls.LARGE, "l": cls.LARGE,
            "medium": cls.MEDIUM, "m": cls.MEDIUM,
            "small": cls.SMALL, "s": cls.SMALL,
        }
        try:
            return aliases[value.strip().lower()]
        except KeyError:
            raise SizeError(value) from None

    @property
    def metrics(self) -> SizeMetrics:
        return SIZE_METRICS[self]

    @property
    def height(self) -> int:
        return SIZE_METRICS[self].height

    @property
    def font_size(self) -> float:
        return self.height * FONT_SIZE_FACTOR

    def __str__(self) -> str:
        return self.value


SIZE_METRICS = {
    Size.SMALL: SizeMetrics(height=20, icon_width=15, icon_offset=5, corner_radius=3),
    Size.MEDIUM: SizeMetrics(height=30, icon_width=20, icon_offset=8, corner_radius=6),
    Size.LARGE: SizeMetrics(height=40, icon_width=30, icon_offset=10, corner_radius=9),
}


@dataclass(frozen=True)
class Segment:
    """One measured rectangle of a badge, with the point its text is centred on."""

    pixel_width: int = 0
    box_width: int = 0
    anchor_x: int = 0
    anchor_y: int = 0


EMPTY_SEGMENT = Segment()


def text_segment(
        measured_width: int,
        leading_width: int,
        padding: int,
        height: int,
        x_offset: int = 0,
) -> Segment:
    """
    Size a text segment, optionally led by an icon.

    ``leading_width`` is the icon width and ``x_offset`` the gap before it.
    An icon with no text gets two thirds of the padding instead of all of it.
    """
    if measured_width + leading_width <= 0:
        return EMPTY_SEGMENT
    if measured_width > 0:
        trailing = padding
    else:
        trailing = padding * 2 // 3
    return Segment(
        pixel_width=measured_width,
        box_width=measured_width + leading_width + x_offset + trailing,
        anchor_x=(measured_width + padding) // 2 + leading_width + x_offset,
        anchor_y=height // 2,
    )


def chart_width(height: int) -> int:
    return height * CHART_WIDTH_FACTOR


def data_segment(height: int, padding: int, stroke_margin: int = 0) -> Segment:
    width = chart_width(height)
    return Segment(
        pixel_width=width,
        box_width=width + stroke_margin,
        anchor_x=(width + padding) // 2,
        anchor_y=height // 2,
    )


@dataclass(frozen=True)
class BadgeLayout:
    height: int
    font_size: float
    padding: int
    icon_width: int
    icon_offset: int
    corner_radius: int
    subject: Segment
    content: Segment
    # Left edge of the content segment
    content_x: int
    width: int

    @property
    def icon_y(self) -> int:
        return (self.height - self.icon_width) // 2
