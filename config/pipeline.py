"""
Unified configuration for the clockwork viewer and offline renderer.

This is the single source of truth; the engine and render configs
are derived from it.
"""

from dataclasses import dataclass, asdict, fields
from typing import Optional, Tuple
from pathlib import Path
import json


@dataclass
class AppConfig:
    """
    Flat application configuration, stored as config/clockwork.json.
    """

    # ==================== ENGINE SETTINGS ====================
    max_depth: int = 8
    branch_factor: int = 2
    min_length: int = 100
    max_length: int = 1500
    rotation_sides: int = 360
    max_rotation_change: int = 4
    canvas_width: float = 2000.0
    initial_speed: float = 1.0
    build_speed: float = 1.0

    # ==================== VIEWER SETTINGS ====================
    fps: int = 60
    window_width: int = 1000
    window_height: int = 700
    background_color: Tuple[float, float, float, float] = (0.07, 0.05, 0.12, 1.0)

    # ==================== RENDERING SETTINGS ====================
    render_size: int = 1000
    render_frames: int = 240
    render_fps: int = 30
    render_workers: int = 0
    output_base: str = 'outputs'
    output_name: str = 'clockwork'

    # ==================== MISC ====================
    random_seed: Optional[int] = None
    profile: bool = False

    def __post_init__(self):
        if self.fps <= 0 or self.render_fps <= 0:
            raise ValueError("fps and render_fps must be positive")
        if self.window_width <= 0 or self.window_height <= 0:
            raise ValueError("window size must be positive")
        self.background_color = tuple(self.background_color)

    # ==================== DERIVED PATHS ====================
    @property
    def render_output_dir(self) -> Path:
        return Path(self.output_base) / 'rendering'

    @property
    def render_gif_path(self) -> Path:
        return self.render_output_dir / f'{self.output_name}.gif'

    @property
    def render_mp4_path(self) -> Path:
        return self.render_output_dir / f'{self.output_name}.mp4'

    def create_output_dirs(self):
        self.render_output_dir.mkdir(parents=True, exist_ok=True)


def load_config(path: str = 'config/clockwork.json') -> AppConfig:
    """Load config from JSON file, with defaults for missing fields."""
    config_path = Path(path)
    if not config_path.exists():
        return AppConfig()

    with open(config_path, 'r') as f:
        data = json.load(f)

    known = {f.name for f in fields(AppConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        print(f"Warning: ignoring unknown config keys in {config_path}: {', '.join(unknown)}")

    return AppConfig(**{k: v for k, v in data.items() if k in known})


def save_config(config: AppConfig, path: str = 'config/clockwork.json'):
    """Save config to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = asdict(config)
    data['background_color'] = list(config.background_color)

    with open(config_path, 'w') as f:
        json.dump(data, f, indent=2)

    print(f"Saved config to {config_path}")
