"""
Badge composition.

A badge starts out as a :class:`Badge` (no content yet) that collects subject,
color, icon, size and style. Calling :meth:`Badge.text` or :meth:`Badge.data`
returns a new :class:`TextBadge` or :class:`DataBadge`; those cannot change
their content any more. Any of the three renders to an SVG string:

    badge = Badge().subject("build").color("#4c1")
    svg = badge.text("passing").render()

The layout work happens in :func:`render_spec`, which is pure apart from
warming the glyph width cache.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple, Union

from .badge_data import BadgeData
from .colors import DEFAULT_BLUE
from .fonts import FontMetrics, default_metrics
from .icons import Icon
from .layout import (
    EMPTY_SEGMENT,
    BadgeLayout,
    Size,
    chart_width,
    data_segment,
    text_segment,
)
from .sparkline import sparkline_d
from .styles import BadgeParts, Style, render
from .text_width import text_width

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextContent:
    text: str


@dataclass(frozen=True)
class DataContent:
    values: Tuple[float, ...]


Content = Union[TextContent, DataContent, None]


@dataclass(frozen=True)
class BadgeSpec:
    subject: Optional[str] = None
    color: str = DEFAULT_BLUE
    icon: Optional[Icon] = None
    # None picks the style's default icon color
    icon_color: Optional[str] = None
    size: Size = Size.SMALL
    style: Style = Style.CLASSIC


def _visible(text: Optional[str]) -> Optional[str]:
    # Blank text measures zero and is rendered as if it were absent
    if text is None or not text.strip():
        return None
    return text


def _visible_content(content: Content) -> Content:
    if isinstance(content, TextContent) and _visible(content.text) is None:
        return None
    return content


def _accessible_label(spec: BadgeSpec, content: Content) -> str:
    subject = _visible(spec.subject)
    content = _visible_content(content)
    if isinstance(content, TextContent):
        value = content.text
    elif isinstance(content, DataContent):
        value = ", ".join(f"{v:g}" for v in content.values)
    else:
        value = None

    if subject is not None and value is not None:
        return f"{subject}: {value}"
    if subject is not None:
        return subject
    if value is not None:
        return value
    if spec.icon is not None:
        return spec.icon.name
    return "badge"


def compute_layout(spec: BadgeSpec, content: Content, metrics: Optional[FontMetrics] = None) -> BadgeLayout:
    size_metrics = spec.size.metrics
    height = size_metrics.height
    font_size = spec.size.font_size
    padding = height // 2
    subject_text = _visible(spec.subject)
    content = _visible_content(content)

    if spec.icon is not None:
        icon_width, icon_offset = size_metrics.icon_width, size_metrics.icon_offset
    else:
        icon_width, icon_offset = 0, 0

    if subject_text is not None or spec.icon is not None:
        subject_width = text_width(subject_text or "", font_size, metrics)
        subject = text_segment(subject_width, icon_width, padding, height, icon_offset)
    else:
        subject = EMPTY_SEGMENT

    if isinstance(content, TextContent):
        content_size = text_segment(text_width(content.text, font_size, metrics), 0, padding, height)
    elif isinstance(content, DataContent):
        content_size = data_segment(height, padding, spec.style.chart_margin)
    else:
        content_size = EMPTY_SEGMENT

    extra_width = spec.style.extra_width
    # The notch gap sits between the segments; without a subject it trails
    gap = extra_width if subject.box_width > 0 else 0
    return BadgeLayout(
        height=height,
        font_size=font_size,
        padding=padding,
        icon_width=icon_width,
        icon_offset=icon_offset,
        corner_radius=spec.style.corner_radius(spec.size),
        subject=subject,
        content=content_size,
        content_x=subject.box_width + gap,
        width=subject.box_width + content_size.box_width + extra_width,
    )


def render_spec(spec: BadgeSpec, content: Content = None, metrics: Optional[FontMetrics] = None) -> str:
    """Render one badge to an SVG document string."""
    if metrics is None:
        metrics = default_metrics()

    content = _visible_content(content)
    layout = compute_layout(spec, content, metrics)

    data_paths = None
    if isinstance(content, DataContent):
        data_paths = sparkline_d(content.values, layout.height, chart_width(layout.height))

    parts = BadgeParts(
        label=_accessible_label(spec, content),
        color=spec.color,
        subject=_visible(spec.subject),
        text=content.text if isinstance(content, TextContent) else None,
        data_paths=data_paths,
        icon=spec.icon,
        icon_color=spec.icon_color,
    )
    svg = render(spec.style, layout, parts)
    logger.debug("Rendered %s %s badge, %dx%d", spec.size, spec.style, layout.width, layout.height)
    return svg


class _Renderable:
    spec: BadgeSpec
    content: Content

    def render(self, metrics: Optional[FontMetrics] = None) -> str:
        return render_spec(self.spec, self.content, metrics)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class TextBadge(_Renderable):
    spec: BadgeSpec
    content: TextContent


@dataclass(frozen=True)
class DataBadge(_Renderable):
    spec: BadgeSpec
    content: DataContent


class Badge(_Renderable):
    """A badge whose content has not been chosen yet."""

    def __init__(self, spec: Optional[BadgeSpec] = None):
        self.spec = spec if spec is not None else BadgeSpec()
        self.content = None

    def __repr__(self) -> str:
        return f"Badge({self.spec!r})"

    def _update(self, **changes) -> "Badge":
        self.spec = dataclasses.replace(self.spec, **changes)
        return self

    def subject(self, subject: str) -> "Badge":
        return self._update(subject=subject)

    def color(self, color: str) -> "Badge":
        return self._update(color=color)

    def icon(self, icon: Icon) -> "Badge":
        return self._update(icon=icon)

    def icon_color(self, color: str) -> "Badge":
        # Only meaningful once there is an icon to paint
        if self.spec.icon is None:
            return self
        return self._update(icon_color=color)

    def size(self, size: Size) -> "Badge":
        return self._update(size=size)

    def style(self, style: Style) -> "Badge":
        return self._update(style=style)

    def text(self, text: str) -> TextBadge:
        return TextBadge(self.spec, TextContent(text))

    def data(self, values: Union[BadgeData, Iterable[float]]) -> DataBadge:
        return DataBadge(self.spec, DataContent(tuple(float(v) for v in values)))


def render_badge(
        subject: Optional[str] = None,
        content: Union[str, Sequence[float], BadgeData, None] = None,
        color: str = DEFAULT_BLUE,
        icon: Optional[Icon] = None,
        icon_color: Optional[str] = None,
        size: Size = Size.SMALL,
        style: Style = Style.CLASSIC,
        metrics: Optional[FontMetrics] = None,
) -> str:
    """
    One-call form of the builder.

    ``content`` is text when it is a ``str``, a sparkline series when it is any
    other sequence of numbers, and absent when ``None``.
    """
    spec = BadgeSpec(subject=subject, color=color, icon=icon, icon_color=icon_color, size=size, style=style)
    if content is None:
        badge_content: Content = None
    elif isinstance(content, str):
        badge_content = TextContent(content)
    else:
        badge_content = DataContent(tuple(float(v) for v in content))
    return render_spec(spec, badge_content, metrics)
