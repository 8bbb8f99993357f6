"""Path interpolation for entities moving along piecewise-linear routes."""

import math
from typing import Sequence

from battlemap.models import GeoPoint


def interpolate(path: Sequence[GeoPoint], t: float) -> GeoPoint:
    """
    Return the point reached after progress ``t`` along ``path``.

    Each segment gets an equal share of [0, 1] regardless of its length, so
    an entity covers short segments slowly and long ones quickly. Progress at
    or past 1 holds the last point; progress at or before 0 holds the first.

    Precondition: ``path`` has at least one point. ``Entity`` enforces this,
    and a single-point path is the only case with zero segments.

    :param path: Ordered ``(lat, lon)`` points
    :type path: Sequence[GeoPoint]
    :param t: Normalized progress, nominally in [0, 1]
    :type t: float
    :return: Interpolated ``(lat, lon)``
    :rtype: GeoPoint
    """
    # NaN compares false, so it lands on the first point too.
    if not t > 0 or len(path) == 1:
        return path[0]

    segments = len(path) - 1
    seg_float = t * segments
    if seg_float >= segments:
        return path[-1]

    idx = math.floor(seg_float)
    frac = seg_float - idx
    p1 = path[idx]
    p2 = path[idx + 1]
    return (
        p1[0] + (p2[0] - p1[0]) * frac,
        p1[1] + (p2[1] - p1[1]) * frac,
    )
