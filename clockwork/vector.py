"""
Simple 2D Vector class for branch endpoints and pointer offsets.
"""

import math
import numpy as np


class Vector2D:
    __slots__ = ('x', 'y')

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = float(x)
        self.y = float(y)

    def __sub__(self, other: 'Vector2D') -> 'Vector2D':
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> 'Vector2D':
        return Vector2D(self.x * scalar, self.y * scalar)

    def __repr__(self) -> str:
        return f"Vector2D({self.x:.2f}, {self.y:.2f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return bool(np.isclose(self.x, other.x) and np.isclose(self.y, other.y))

    # Equality is approximate, so vectors are not hashable
    __hash__ = None

    @property
    def magnitude(self) -> float:
        return float(np.hypot(self.x, self.y))

    def distance_to(self, other: 'Vector2D') -> float:
        return (self - other).magnitude

    @classmethod
    def from_degrees(cls, degrees: float, length: float = 1.0) -> 'Vector2D':
        """Vector of the given length pointing along a heading in degrees (y down)."""
        radian = math.radians(degrees)
        return cls(math.cos(radian), math.sin(radian)) * length
