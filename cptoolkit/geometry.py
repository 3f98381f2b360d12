"""Plane geometry on integer points: orientation, segments and polygon area."""

from enum import Enum


class Location(Enum):
    """Position of a point relative to a directed line."""

    LEFT = "LEFT"
    RIGHT = "RIGHT"
    TOUCH = "TOUCH"


def cross_product(p1, p2, p3):
    """Return the cross product of ``p1 -> p2`` and ``p1 -> p3``.

    The result is zero exactly when the three points are collinear.
    """
    (x1, y1), (x2, y2), (x3, y3) = p1, p2, p3
    return (x2 - x1) * (y3 - y1) - (y2 - y1) * (x3 - x1)


def _sign(value):
    return (value > 0) - (value < 0)


def _between(p1, p2, p3):
    """Tell whether ``p3`` lies between ``p1`` and ``p2`` in point order."""
    return sorted((tuple(p1), tuple(p2), tuple(p3)))[1] == tuple(p3)


def segments_intersect(a, b, c, d):
    """Tell whether segment ``a``-``b`` shares at least one point with ``c``-``d``."""
    c1 = cross_product(a, b, c)
    c2 = cross_product(a, b, d)
    c3 = cross_product(c, d, a)
    c4 = cross_product(c, d, b)
    if c1 == 0 and _between(a, b, c):
        return True
    if c2 == 0 and _between(a, b, d):
        return True
    if c3 == 0 and _between(c, d, a):
        return True
    if c4 == 0 and _between(c, d, b):
        return True
    return _sign(c1) != _sign(c2) and _sign(c3) != _sign(c4)


def point_location(p1, p2, point):
    """Return on which side of the line ``p1 -> p2`` the ``point`` lies."""
    value = cross_product(p1, p2, point)
    if value > 0:
        return Location.LEFT
    if value < 0:
        return Location.RIGHT
    return Location.TOUCH


def polygon_area(points):
    """Return twice the area of the simple polygon with the given vertices.

    Doubling keeps the result an integer for integer coordinates.
    """
    points = [tuple(p) for p in points]
    total = sum(
        x1 * y2 - y1 * x2
        for (x1, y1), (x2, y2) in zip(points, points[1:] + points[:1])
    )
    return abs(total)