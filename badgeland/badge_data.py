from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from .errors import DataError


def parse_series(text: str) -> List[float]:
    """
    Parse ``"12,23, 23, 12"`` into ``[12.0, 23.0, 23.0, 12.0]``.

    Every comma separated element must be a finite number; an empty element
    (``"1,,2"``) or ``inf``/``nan`` is an error rather than something to skip.
    """
    values: List[float] = []
    for position, element in enumerate(text.split(",")):
        element = element.strip()
        if not element:
            raise DataError(text, position)
        try:
            value = float(element)
        except ValueError as error:
            raise DataError(text, position) from error
        if not math.isfinite(value):
            raise DataError(text, position)
        values.append(value)
    return values


@dataclass(frozen=True)
class BadgeData:
    values: Tuple[float, ...]

    @classmethod
    def from_str(cls, text: str) -> "BadgeData":
        return cls(tuple(parse_series(text)))

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "BadgeData":
        return cls(tuple(float(value) for value in values))

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)
