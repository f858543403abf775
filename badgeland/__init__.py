"""
Badge generator: text, icon and sparkline badges rendered to SVG.

    from badgeland import Badge

    Badge().subject("downloads").data([12, 34, 23, 56, 45]).render()
"""

from .badge import (
    Badge,
    BadgeSpec,
    DataBadge,
    DataContent,
    TextBadge,
    TextContent,
    compute_layout,
    render_badge,
    render_spec,
)
from .badge_data import BadgeData, parse_series
from .colors import DEFAULT_BLACK, DEFAULT_BLUE, DEFAULT_GRAY, DEFAULT_GRAY_DARK, DEFAULT_WHITE
from .errors import BadgeError, DataError, FontLoadError, SizeError, StyleError
from .fonts import FontMetrics, default_metrics
from .glyph_cache import GlyphWidthCache
from .icons import Icon
from .layout import Size
from .sparkline import build_path
from .styles import Style
from .text_width import text_width

__all__ = [
    "Badge",
    "BadgeData",
    "BadgeError",
    "BadgeSpec",
    "DataBadge",
    "DataContent",
    "DataError",
    "DEFAULT_BLACK",
    "DEFAULT_BLUE",
    "DEFAULT_GRAY",
    "DEFAULT_GRAY_DARK",
    "DEFAULT_WHITE",
    "FontLoadError",
    "FontMetrics",
    "GlyphWidthCache",
    "Icon",
    "Size",
    "SizeError",
    "Style",
    "StyleError",
    "TextBadge",
    "TextContent",
    "build_path",
    "compute_layout",
    "default_metrics",
    "parse_series",
    "render_badge",
    "render_spec",
    "text_width",
]
