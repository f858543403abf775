from __future__ import annotations

import math
from typing import List, Sequence, Tuple

Point = Tuple[float, float]


def build_path(values: Sequence[float], height: int, width: int) -> List[Point]:
    """
    Map a series onto a ``width`` x ``height`` box, one vertex per value.

    x runs from 0 to ``width`` in equal steps. y is flipped so that larger
    values sit higher, with 0 on the bottom edge and the series maximum on the
    top edge. When the maximum is not positive every vertex lies on the bottom
    edge. A single value becomes a flat line across the whole box. Infinite
    and NaN values are drawn on the bottom edge and ignored for the maximum.
    """
    if len(values) == 0:
        raise ValueError("build_path needs at least one value")

    peak = max([0.0, *(value for value in values if math.isfinite(value))])
    y_scale = height / peak if peak > 0 else 0.0

    def y_of(value: float) -> float:
        if not math.isfinite(value):
            return float(height)
        return height - y_scale * value

    if len(values) == 1:
        y = y_of(values[0])
        return [(0.0, y), (float(width), y)]

    x_step = width / (len(values) - 1)
    return [(index * x_step, y_of(value)) for index, value in enumerate(values)]


def format_number(value: float) -> str:
    return f"{round(value, 3) + 0.0:g}"


def path_d(points: Sequence[Point]) -> str:
    """``M0 y0L0 y0Lx1 y1...`` for a vertex list from :func:`build_path`."""
    segments = [f"M0 {format_number(points[0][1])}"]
    segments.extend(f"L{format_number(x)} {format_number(y)}" for x, y in points)
    return "".join(segments)


def area_d(points: Sequence[Point], height: int) -> str:
    """The line from :func:`path_d` closed down to the baseline."""
    return f"{path_d(points)}V{height}H0Z"


def sparkline_d(values: Sequence[float], height: int, width: int) -> Tuple[str, str]:
    points = build_path(values, height, width)
    return path_d(points), area_d(points, height)
