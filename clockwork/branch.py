"""
Branch - one rotating segment of the clockwork tree.
"""

from dataclasses import dataclass
from typing import Tuple

from .vector import Vector2D


@dataclass(frozen=True, repr=False)
class Branch:
    level: int
    length: float
    rotation: float
    rotation_change: float
    x: float = 0.0
    y: float = 0.0
    end_x: float = 0.0
    end_y: float = 0.0
    children: Tuple['Branch', ...] = ()

    @property
    def start_pos(self) -> Vector2D:
        return Vector2D(self.x, self.y)

    @property
    def end_pos(self) -> Vector2D:
        return Vector2D(self.end_x, self.end_y)

    @property
    def is_leaf(self) -> bool:
        return len(self.children) == 0

    def __repr__(self) -> str:
        return (f"Branch(level={self.level}, {self.start_pos} -> {self.end_pos}, "
                f"rotation={self.rotation:.1f}, children={len(self.children)})")
