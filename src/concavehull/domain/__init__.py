"""Domain models for concavehull.

All models are immutable value types except Hull, a thin ordered container:

- Point: A 2D coordinate
- Edge: A directed segment between two point indices
- HullVertex: An (index, point) pair on a hull boundary
- Hull: An ordered, implicitly closed boundary
"""

from concavehull.domain.edge import Edge
from concavehull.domain.hull import Hull, HullVertex, WindingDirection
from concavehull.domain.point import Point, as_points

__all__: list[str] = [
    # Enums
    "WindingDirection",
    # Core types
    "Point",
    "Edge",
    "HullVertex",
    "Hull",
    # Helpers
    "as_points",
]
