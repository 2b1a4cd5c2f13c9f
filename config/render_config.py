"""
Configuration for rendering module.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class ClockworkRenderConfig:
    output_width: int = 1000
    output_height: int = 1000
    background_color: Tuple[float, float, float, float] = (0.07, 0.05, 0.12, 1.0)

    # "hands": stroke alpha is half the level alpha
    hand_color: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    # "gears"
    gear_color: Tuple[float, float, float] = (248 / 255, 187 / 255, 208 / 255)

    hand_base_width: float = 50.0   # Line width at level 1, divided by level
    gear_divisor: float = 40.0      # Gear radius = length / gear_divisor

    antialiasing: bool = True
    workers: int = 0  # 0 = cpu_count - 1, 1 = render in-process

    def level_alpha(self, level: int) -> float:
        return 1 / (level + 1)

    def hand_width(self, level: int) -> float:
        return (1 / level) * self.hand_base_width

    def hand_rgba(self, level: int) -> Tuple[float, float, float, float]:
        r, g, b = self.hand_color
        return (r, g, b, self.level_alpha(level) / 2)

    def gear_rgba(self, level: int) -> Tuple[float, float, float, float]:
        r, g, b = self.gear_color
        return (r, g, b, self.level_alpha(level))

    @classmethod
    def from_app(cls, app_config) -> 'ClockworkRenderConfig':
        """Create render config from AppConfig."""
        return cls(
            output_width=app_config.render_size,
            output_height=app_config.render_size,
            background_color=tuple(app_config.background_color),
            workers=app_config.render_workers,
        )
