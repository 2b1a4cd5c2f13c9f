"""
Configuration for the clockwork tree engine.
"""

import math
from dataclasses import dataclass
from typing import Optional


@dataclass
class ClockworkConfig:
    max_depth: int = 8        # Levels including the root
    branch_factor: int = 2    # Children per branch below max_depth

    # Branch length = (1 / level) * randint(min_length, max_length)
    min_length: int = 100
    max_length: int = 1500

    rotation_sides: int = 360       # Initial rotation is a die roll in [1, rotation_sides]
    max_rotation_change: int = 4    # Per-tick delta magnitude in [1, max_rotation_change]

    canvas_width: float = 2000.0
    initial_speed: float = 1.0
    build_speed: float = 1.0  # Speed used to position a freshly built tree

    random_seed: Optional[int] = None
    profile: bool = False

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")
        if self.branch_factor < 0:
            raise ValueError(f"branch_factor must be >= 0, got {self.branch_factor}")
        if self.min_length >= self.max_length:
            raise ValueError(
                f"empty length range [{self.min_length}, {self.max_length})"
            )
        if self.rotation_sides < 1 or self.max_rotation_change < 1:
            raise ValueError("rotation_sides and max_rotation_change must be >= 1")
        if self.canvas_width <= 0:
            raise ValueError(f"canvas_width must be positive, got {self.canvas_width}")
        if not (math.isfinite(self.initial_speed) and math.isfinite(self.build_speed)):
            raise ValueError("initial_speed and build_speed must be finite")

    @classmethod
    def from_app(cls, app_config) -> 'ClockworkConfig':
        """Create engine config from AppConfig."""
        return cls(
            max_depth=app_config.max_depth,
            branch_factor=app_config.branch_factor,
            min_length=app_config.min_length,
            max_length=app_config.max_length,
            rotation_sides=app_config.rotation_sides,
            max_rotation_change=app_config.max_rotation_change,
            canvas_width=app_config.canvas_width,
            initial_speed=app_config.initial_speed,
            build_speed=app_config.build_speed,
            random_seed=app_config.random_seed,
            profile=app_config.profile,
        )
