"""
Classic, Flat and Social badge templates.

Every template draws from the same :class:`~badgeland.layout.BadgeLayout`.
They only differ in the ``<defs>`` they declare and in how the background is
decorated:

  classic  - rounded mask, gradient overlay, drop shadow on text and icon
  flat     - square corners, no gradient, same drop shadow
  social   - bordered light buttons joined by a notch, shared CSS classes
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple
from xml.etree import ElementTree

import svgwrite
from svgwrite.base import BaseElement

from .colors import (
    DEFAULT_BLACK,
    DEFAULT_GRAY,
    DEFAULT_GRAY_DARK,
    DEFAULT_WHITE,
    SOCIAL_BORDER,
    SOCIAL_CONTENT_FILL,
    SOCIAL_ICON_GRAY,
    SOCIAL_SUBJECT_FILL,
    SOCIAL_TEXT,
)
from .errors import StyleError
from .fonts import DEFAULT_FONT_FAMILY
from .icons import Icon
from .layout import CHART_STROKE_MARGIN, SOCIAL_NOTCH_WIDTH, BadgeLayout, Size
from .sparkline import format_number


class Style(Enum):
    CLASSIC = "Classic"
    FLAT = "Flat"
    SOCIAL = "Social"

    @classmethod
    def from_str(cls, value: str) -> "Style":
        aliases = {
            "classic": cls.CLASSIC, "c": cls.CLASSIC,
            "flat": cls.FLAT, "f": cls.FLAT,
            "social": cls.SOCIAL, "z": cls.SOCIAL,
        }
        try:
            return aliases[value.strip().lower()]
        except KeyError:
            raise StyleError(value) from None

    def corner_radius(self, size: Size) -> int:
        if self is Style.FLAT:
            return 0
        if self is Style.SOCIAL:
            return Size.SMALL.metrics.corner_radius
        return size.metrics.corner_radius

    @property
    def chart_margin(self) -> int:
        return 0 if self is Style.FLAT else CHART_STROKE_MARGIN

    @property
    def extra_width(self) -> int:
        return SOCIAL_NOTCH_WIDTH if self is Style.SOCIAL else 0

    @property
    def default_icon_color(self) -> str:
        return SOCIAL_ICON_GRAY if self is Style.SOCIAL else DEFAULT_WHITE

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BadgeParts:
    """What goes into the badge, as opposed to where it goes."""

    label: str
    color: str
    subject: Optional[str] = None
    text: Optional[str] = None
    # (line, area) path data of a sparkline
    data_paths: Optional[Tuple[str, str]] = None
    icon: Optional[Icon] = None
    icon_color: Optional[str] = None

    @property
    def has_content(self) -> bool:
        return self.text is not None or self.data_paths is not None

    @property
    def has_subject_segment(self) -> bool:
        return self.subject is not None or self.icon is not None


ICON_PLACEHOLDER = "badgeland:icon-symbol"


class IconPlaceholder(BaseElement):
    """
    Marks where the icon ``<symbol>`` goes inside ``<defs>``.

    The symbol markup is written into the serialized document unchanged, so it
    never goes through an XML parser: it may rely on the ``xlink`` prefix the
    root element declares, or carry its own ``xmlns``.
    """

    elementname = "symbol"

    def get_xml(self):
        return ElementTree.Comment(ICON_PLACEHOLDER)


class DropShadow(BaseElement):
    elementname = "feDropShadow"


def _new_drawing(layout: BadgeLayout, parts: BadgeParts) -> svgwrite.Drawing:
    drawing = svgwrite.Drawing(
        size=(layout.width, layout.height),
        viewBox=f"0 0 {layout.width} {layout.height}",
        role="img",
        aria_label=parts.label,
        debug=False,
    )
    drawing.set_desc(title=parts.label)
    if parts.icon is not None:
        drawing.defs.add(IconPlaceholder(factory=drawing))
    return drawing


def _add_shadow_filter(drawing: svgwrite.Drawing, parts: BadgeParts) -> None:
    shadow = drawing.filter(id="shadow")
    shadow.add(
        DropShadow(
            factory=drawing,
            dx=-0.8,
            dy=-0.8,
            stdDeviation=0,
            flood_color=DEFAULT_BLACK if parts.has_content else DEFAULT_GRAY_DARK,
            flood_opacity=0.4,
        )
    )
    drawing.defs.add(shadow)


def _add_segment_rects(drawing: svgwrite.Drawing, group, layout: BadgeLayout, parts: BadgeParts) -> None:
    if parts.has_subject_segment:
        group.add(
            drawing.rect(
                size=(layout.subject.box_width, layout.height),
                id="subject",
                fill=DEFAULT_GRAY_DARK if parts.has_content else parts.color,
            )
        )
    if parts.has_content:
        group.add(
            drawing.rect(
                insert=(layout.content_x, 0),
                size=(layout.content.box_width, layout.height),
                id="content",
                fill=DEFAULT_GRAY if parts.data_paths is not None else parts.color,
            )
        )


def _add_text_group(
        drawing: svgwrite.Drawing,
        layout: BadgeLayout,
        parts: BadgeParts,
        text_fill: str,
        icon_color: str,
        shadow: bool = True,
        content_fill: Optional[str] = None,
) -> None:
    decoration = {"filter": "url(#shadow)"} if shadow else {}
    group = drawing.g(
        id="text",
        fill=text_fill,
        font_family=DEFAULT_FONT_FAMILY,
        font_size=format_number(layout.font_size),
    )

    if parts.icon is not None:
        group.add(
            drawing.use(
                f"#{parts.icon.name}",
                insert=(layout.icon_offset, layout.icon_y),
                size=(layout.icon_width, layout.icon_width),
                fill=icon_color,
                **decoration,
            )
        )

    if parts.subject is not None:
        group.add(
            drawing.text(
                parts.subject,
                insert=(layout.subject.anchor_x, layout.subject.anchor_y),
                text_anchor="middle",
                dominant_baseline="middle",
                **decoration,
            )
        )

    if parts.text is not None:
        content_decoration = dict(decoration)
        if content_fill is not None:
            content_decoration["fill"] = content_fill
        group.add(
            drawing.text(
                parts.text,
                insert=(layout.content_x + layout.content.anchor_x, layout.content.anchor_y),
                text_anchor="middle",
                dominant_baseline="middle",
                **content_decoration,
            )
        )
    elif parts.data_paths is not None:
        line_d, area_d = parts.data_paths
        translate = f"translate({layout.content_x}, 0)"
        group.add(
            drawing.path(
                d=line_d,
                fill="none",
                stroke=parts.color,
                stroke_width="1px",
                transform=translate,
            )
        )
        group.add(
            drawing.path(
                d=area_d,
                fill=parts.color,
                fill_opacity=0.2,
                stroke="none",
                stroke_width="0px",
                transform=translate,
            )
        )

    drawing.add(group)


def render_classic(layout: BadgeLayout, parts: BadgeParts) -> svgwrite.Drawing:
    drawing = _new_drawing(layout, parts)

    gradient = drawing.linearGradient(id="a", x2=0, y2="75%")
    gradient.add_stop_color(offset=0, color="#eee", opacity=0.1)
    gradient.add_stop_color(offset=1, opacity=0.3)
    drawing.defs.add(gradient)

    mask = drawing.mask(id="bg-mask")
    mask.add(drawing.rect(size=(layout.width, layout.height), rx=layout.corner_radius, fill=DEFAULT_WHITE))
    drawing.defs.add(mask)
    _add_shadow_filter(drawing, parts)

    background = drawing.g(id="bg", mask="url(#bg-mask)")
    _add_segment_rects(drawing, background, layout, parts)
    background.add(drawing.rect(size=(layout.width, layout.height), fill="url(#a)"))
    drawing.add(background)

    _add_text_group(
        drawing,
        layout,
        parts,
        text_fill=DEFAULT_WHITE,
        icon_color=parts.icon_color or Style.CLASSIC.default_icon_color,
    )
    return drawing


def render_flat(layout: BadgeLayout, parts: BadgeParts) -> svgwrite.Drawing:
    drawing = _new_drawing(layout, parts)
    _add_shadow_filter(drawing, parts)

    background = drawing.g(id="bg")
    background.add(drawing.rect(size=(layout.width, layout.height), fill=DEFAULT_GRAY))
    _add_segment_rects(drawing, background, layout, parts)
    drawing.add(background)

    _add_text_group(
        drawing,
        layout,
        parts,
        text_fill=DEFAULT_WHITE,
        icon_color=parts.icon_color or Style.FLAT.default_icon_color,
    )
    return drawing


SOCIAL_CSS = (
    f".sb{{fill:{SOCIAL_SUBJECT_FILL};stroke:{SOCIAL_BORDER};stroke-width:1px}}"
    f".cb{{fill:{SOCIAL_CONTENT_FILL};stroke:{SOCIAL_BORDER};stroke-width:1px}}"
)


def render_social(layout: BadgeLayout, parts: BadgeParts) -> svgwrite.Drawing:
    drawing = _new_drawing(layout, parts)
    drawing.defs.add(drawing.style(SOCIAL_CSS))

    # Rects are inset half a pixel so the 1px border lands on whole pixels
    background = drawing.g(id="bg")
    if parts.has_subject_segment:
        background.add(
            drawing.rect(
                insert=(0.5, 0.5),
                size=(layout.subject.box_width - 1, layout.height - 1),
                rx=layout.corner_radius,
                id="subject",
                class_="sb",
            )
        )
    if parts.has_content:
        background.add(
            drawing.rect(
                insert=(layout.content_x + 0.5, 0.5),
                size=(layout.content.box_width - 1, layout.height - 1),
                rx=layout.corner_radius,
                id="content",
                class_="cb",
            )
        )
        if parts.has_subject_segment:
            middle = layout.height / 2
            notch_x = layout.content_x + 0.5
            background.add(
                drawing.path(
                    d=(
                        f"M{format_number(notch_x)} {format_number(middle - 4)}"
                        f"L{format_number(notch_x - 4)} {format_number(middle)}"
                        f"L{format_number(notch_x)} {format_number(middle + 4)}"
                    ),
                    id="notch",
                    class_="cb",
                )
            )
    drawing.add(background)

    _add_text_group(
        drawing,
        layout,
        parts,
        text_fill=SOCIAL_TEXT,
        icon_color=parts.icon_color or Style.SOCIAL.default_icon_color,
        shadow=False,
        content_fill=parts.color,
    )
    return drawing


RENDERERS: Dict[Style, Callable[[BadgeLayout, BadgeParts], svgwrite.Drawing]] = {
    Style.CLASSIC: render_classic,
    Style.FLAT: render_flat,
    Style.SOCIAL: render_social,
}


def render(style: Style, layout: BadgeLayout, parts: BadgeParts) -> str:
    svg = RENDERERS[style](layout, parts).tostring()
    if parts.icon is not None:
        svg = svg.replace(f"<!--{ICON_PLACEHOLDER}-->", parts.icon.symbol, 1)
    return svg
