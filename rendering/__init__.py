"""
Rendering module for offline, high-resolution clockwork animations.
Uses Cairo for resolution-independent vector graphics.
"""

from config.render_config import ClockworkRenderConfig
from .base import Renderer
from .clockwork_renderer import ClockworkRenderer, collect_states
