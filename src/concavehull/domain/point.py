"""Point type and input coercion."""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from concavehull.exceptions import InvalidPointError


@dataclass(frozen=True, slots=True)
class Point:
    """An immutable point in 2D space.

    Points are identified by their position in the caller's sequence, never
    by coordinate value, so two points comparing equal here says nothing
    about their identity inside a hull.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


def _coerce(index: int, item: Any) -> Point:
    if isinstance(item, Point):
        x, y = item.x, item.y
    else:
        try:
            x, y = item
        except (TypeError, ValueError):
            raise InvalidPointError(index, "expected an (x, y) pair") from None
        try:
            x, y = float(x), float(y)
        except (TypeError, ValueError):
            raise InvalidPointError(index, "coordinates must be real numbers") from None

    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidPointError(index, f"coordinates must be finite, got ({x}, {y})")

    if isinstance(item, Point):
        return item
    return Point(x, y)


def as_points(points: Iterable[Any]) -> list[Point]:
    """Coerce a sequence of points or (x, y) pairs into a list of Points.

    Accepts Point instances, tuples, lists and anything else that unpacks
    into two real numbers (numpy rows included). Order is preserved, so
    list positions match the caller's indices.

    Args:
        points: Points or coordinate pairs

    Returns:
        List of Point instances

    Raises:
        InvalidPointError: If an item is not a pair of finite real numbers
    """
    return [_coerce(i, item) for i, item in enumerate(points)]
