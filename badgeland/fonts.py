"""
Font metrics for badge text.

One proportional TrueType font is read with fontTools and asked for the
horizontal extent of single glyphs at a pixel scale. The pixel scale follows
the usual "px height" convention: ``scale`` pixels span the font's
``hhea.ascent - hhea.descent``, not its em square.

The measured width is the glyph's layout bounds (advance plus left side
bearing) rather than the bare advance. Badge widths everywhere else are tuned
against that number together with the 1.12 correction in
:mod:`badgeland.text_width`, so it must not be swapped for the advance alone.
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from fontTools.ttLib import TTFont, TTLibError

from .errors import FontLoadError
from .glyph_cache import GlyphWidthCache

logger = logging.getLogger(__name__)

DEFAULT_FONT_PATH = Path(__file__).parent / "resources" / "Lato-Regular.ttf"
DEFAULT_FONT_FAMILY = "Lato,Verdana,DejaVu Sans,sans-serif"


class FontMetrics:
    """Glyph measurements for a single font, plus the width cache that serves them."""

    def __init__(
            self,
            font_path: Union[str, Path] = DEFAULT_FONT_PATH,
            cache: Optional[GlyphWidthCache] = None,
    ):
        self.font_path = Path(font_path)
        try:
            with TTFont(str(self.font_path)) as font:
                self._cmap: Dict[int, str] = dict(font.getBestCmap() or {})
                self._hmtx: Dict[str, Tuple[int, int]] = dict(font["hmtx"].metrics)
                ascent = font["hhea"].ascent
                descent = abs(font["hhea"].descent)
                self._notdef = font.getGlyphOrder()[0]
        except (OSError, TTLibError, KeyError) as error:
            raise FontLoadError(f"Could not load font '{self.font_path}': {error}") from error

        self._height_units = ascent + descent
        if self._height_units <= 0:
            raise FontLoadError(f"Font '{self.font_path}' reports a non-positive line height")

        self.cache = cache if cache is not None else GlyphWidthCache()
        # Widths of the 128 ASCII characters at scale 1.0
        self.ascii_widths: Tuple[float, ...] = tuple(
            self.advance_width(chr(code), 1.0) for code in range(128)
        )
        logger.debug("Loaded font %s (%d glyphs)", self.font_path, len(self._hmtx))

    def glyph_name(self, char: str) -> str:
        glyph_name = self._cmap.get(ord(char))
        if glyph_name is None:
            logger.debug("No glyph for U+%04X in %s, using %s", ord(char), self.font_path.name, self._notdef)
            return self._notdef
        return glyph_name

    def advance_width(self, char: str, scale: float) -> float:
        """Width in pixels of one character rendered ``scale`` pixels tall."""
        advance, left_side_bearing = self._hmtx[self.glyph_name(char)]
        return (advance + left_side_bearing) * scale / self._height_units

    def has_glyph(self, char: str) -> bool:
        return ord(char) in self._cmap


@functools.lru_cache(maxsize=None)
def default_metrics() -> FontMetrics:
    """The shared provider for callers that do not bring their own."""
    return FontMetrics()
