"""
Integer points and half-open rectangles in image coordinates.

A :class:`Rectangle` contains the points with ``min.x <= x < max.x`` and
``min.y <= y < max.y``. It is well-formed when ``min.x <= max.x`` and
``min.y <= max.y``; :func:`rect` always builds a well-formed one.
"""

from __future__ import annotations
from typing import NamedTuple


class Point(NamedTuple):
    x: int = 0
    y: int = 0

    def add(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def sub(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def in_rect(self, r: Rectangle) -> bool:
        """Report whether the point lies inside ``r``."""
        return r.min.x <= self.x < r.max.x and r.min.y <= self.y < r.max.y

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


ZP = Point(0, 0)


class Rectangle(NamedTuple):
    min: Point = ZP
    max: Point = ZP

    @property
    def dx(self) -> int:
        return self.max.x - self.min.x

    @property
    def dy(self) -> int:
        return self.max.y - self.min.y

    @property
    def size(self) -> Point:
        return Point(self.dx, self.dy)

    def empty(self) -> bool:
        """Report whether the rectangle contains no points."""
        return self.min.x >= self.max.x or self.min.y >= self.max.y

    def eq(self, other: Rectangle) -> bool:
        """Same points, so every empty rectangle equals every other one."""
        return tuple(self) == tuple(other) or (self.empty() and other.empty())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.eq(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self) -> int:
        return hash(ZR_TUPLE) if self.empty() else hash(tuple(self))

    def contains(self, p: Point) -> bool:
        return Point(*p).in_rect(self)

    def __contains__(self, p: object) -> bool:
        if not isinstance(p, tuple) or len(p) != 2:
            return False
        return self.contains(Point(*p))

    def add(self, p: Point) -> Rectangle:
        return Rectangle(self.min.add(p), self.max.add(p))

    def sub(self, p: Point) -> Rectangle:
        return Rectangle(self.min.sub(p), self.max.sub(p))

    def intersect(self, other: Rectangle) -> Rectangle:
        """
        Largest rectangle contained by both.

        Returns ``ZR`` when the two do not overlap. The raw overlap of two
        disjoint rectangles is not guaranteed to lie inside either of them,
        so callers must not derive storage offsets from it.
        """
        x0 = max(self.min.x, other.min.x)
        y0 = max(self.min.y, other.min.y)
        x1 = min(self.max.x, other.max.x)
        y1 = min(self.max.y, other.max.y)
        if x0 >= x1 or y0 >= y1:
            return ZR
        return Rectangle(Point(x0, y0), Point(x1, y1))

    def union(self, other: Rectangle) -> Rectangle:
        """Smallest rectangle containing both."""
        if self.empty():
            return other
        if other.empty():
            return self
        return Rectangle(
            Point(min(self.min.x, other.min.x), min(self.min.y, other.min.y)),
            Point(max(self.max.x, other.max.x), max(self.max.y, other.max.y)),
        )

    def overlaps(self, other: Rectangle) -> bool:
        return not self.intersect(other).empty()

    def __str__(self) -> str:
        return f"{self.min}-{self.max}"


ZR = Rectangle(ZP, ZP)
ZR_TUPLE = (ZP, ZP)


def rect(x0: int, y0: int, x1: int, y1: int) -> Rectangle:
    """Shorthand for ``Rectangle(Point(x0, y0), Point(x1, y1))``, sorted."""
    if x0 > x1:
        x0, x1 = x1, x0
    if y0 > y1:
        y0, y1 = y1, y0
    return Rectangle(Point(x0, y0), Point(x1, y1))


def pt(x: int, y: int) -> Point:
    return Point(x, y)
