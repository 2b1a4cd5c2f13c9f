"""
Configuration module.
"""

from .pipeline import AppConfig, load_config, save_config
from .clockwork_config import ClockworkConfig
from .render_config import ClockworkRenderConfig

__all__ = [
    'AppConfig',
    'load_config',
    'save_config',
    'ClockworkConfig',
    'ClockworkRenderConfig'
]
