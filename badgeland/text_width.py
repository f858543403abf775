from __future__ import annotations

import math
import unicodedata
from typing import Optional

from .fonts import FontMetrics, default_metrics

# Empirical correction applied to every measured glyph width.
WIDTH_CORRECTION = 1.12


def text_width(text: str, height: float, metrics: Optional[FontMetrics] = None) -> int:
    """
    Pixel width of ``text`` set at font size ``height``, floored.

    Surrounding whitespace is ignored and the text is NFC normalised first, so
    a combining sequence measures the same as its precomposed character.
    """
    text = text.strip()
    if not text:
        return 0
    if metrics is None:
        metrics = default_metrics()

    text = unicodedata.normalize("NFC", text)

    if text.isascii():
        unit_width = sum(metrics.ascii_widths[ord(char)] for char in text)
        return math.floor(unit_width * height * WIDTH_CORRECTION)

    cache = metrics.cache
    total = 0.0
    for char in text:
        key = cache.key(char, height)
        width = cache.get(key)
        if width is None:
            width = cache.insert(key, metrics.advance_width(char, height))
        total += width * WIDTH_CORRECTION
    return math.floor(total)
