from __future__ import annotations

import logging
import threading
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

CacheKey = Tuple[int, int]


class GlyphWidthCache:
    """
    Glyph widths keyed by ``(codepoint, round(height * 10))``.

    Lookups never take the lock. Inserts do, and the first value stored for a
    key wins, so two threads measuring the same glyph at once both end up
    using the same number.
    """

    def __init__(self) -> None:
        self._widths: Dict[CacheKey, float] = {}
        self._insert_lock = threading.Lock()

    @staticmethod
    def key(char: str, height: float) -> CacheKey:
        return ord(char), int(round(height * 10.0))

    def get(self, key: CacheKey) -> Optional[float]:
        return self._widths.get(key)

    def insert(self, key: CacheKey, width: float) -> float:
        with self._insert_lock:
            stored = self._widths.setdefault(key, width)
        if stored is width:
            logger.debug("Cached glyph width U+%04X@%d = %.4f", key[0], key[1], width)
        return stored

    def clear(self) -> None:
        with self._insert_lock:
            self._widths.clear()

    def __len__(self) -> int:
        return len(self._widths)

    def __contains__(self, key: CacheKey) -> bool:
        return key in self._widths
