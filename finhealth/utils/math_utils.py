"""Numeric helpers shared by indicator scoring"""

from typing import Sequence, Tuple


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Bound value to the closed interval [low, high]"""
    return max(low, min(high, value))


def safe_ratio(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide, returning default when the denominator is zero or negative"""
    if denominator <= 0:
        return default
    return numerator / denominator


def interpolate_piecewise(value: float, anchors: Sequence[Tuple[float, float]]) -> float:
    """
    Piecewise linear interpolation over (x, y) anchors.

    Anchors may be given in any order; they are sorted by x. Values outside
    the anchor range take the nearest endpoint's y. Result is clamped to
    [0, 100].
    """
    if not anchors:
        return 0.0

    pts = sorted(anchors, key=lambda a: a[0])

    if value <= pts[0][0]:
        return clamp(pts[0][1])
    if value >= pts[-1][0]:
        return clamp(pts[-1][1])

    for (x0, y0), (x1, y1) in zip(pts, pts[1:]):
        if x0 <= value <= x1:
            if x1 == x0:
                return clamp(y1)
            t = (value - x0) / (x1 - x0)
            return clamp(y0 + t * (y1 - y0))

    return clamp(pts[-1][1])
