"""
Clockwork tree renderer using Cairo.

Draws one SceneState per frame in the tree's logical canvas units,
scaled to the configured output size.
"""

import cairo
import numpy as np
import imageio
import math
import multiprocessing
from tqdm import tqdm
from typing import List, Optional
from pathlib import Path

from config.render_config import ClockworkRenderConfig
from clockwork.state import Store, SceneState, NextFrame
from clockwork.tree import iter_levels
from clockwork.profiling import profile_block
from .base import Renderer


def render_clockwork_frame_wrapper(args):
    config, state = args
    renderer = ClockworkRenderer(config)
    return renderer.render_frame(state)


def collect_states(store: Store, num_frames: int) -> List[SceneState]:
    """Advance the store frame by frame and keep every state."""
    if store.state is None:
        raise ValueError("store has no state; dispatch Init first")
    states = []
    for _ in range(num_frames):
        store.dispatch(NextFrame())
        states.append(store.state)
    return states


class ClockworkRenderer(Renderer):
    def __init__(self, config: Optional[ClockworkRenderConfig] = None):
        super().__init__(config or ClockworkRenderConfig())

    def _draw_level(self, ctx: cairo.Context, level: int, branches: list):
        cfg = self.config

        # "hands"
        ctx.set_source_rgba(*cfg.hand_rgba(level))
        ctx.set_line_width(cfg.hand_width(level))
        ctx.new_path()
        for b in branches:
            ctx.move_to(b.x, b.y)
            ctx.line_to(b.end_x, b.end_y)
        ctx.stroke()

        # "gears"
        ctx.set_source_rgba(*cfg.gear_rgba(level))
        ctx.new_path()
        for b in branches:
            ctx.move_to(b.x, b.y)
            ctx.arc(b.x, b.y, b.length / cfg.gear_divisor, 0, math.pi * 2)
        ctx.fill()

    def render_frame(self, state: SceneState) -> np.ndarray:
        surface, ctx = self._create_surface()

        scale_x, scale_y = self._compute_scale(state.width, state.height)
        ctx.scale(scale_x, scale_y)
        ctx.set_line_cap(cairo.LINE_CAP_ROUND)

        for level, branches in iter_levels(state.tree):
            self._draw_level(ctx, level, branches)

        return self._surface_to_numpy(surface)

    def save_frame(self, state: SceneState, output_path: str):
        frame = self.render_frame(state)
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        imageio.imwrite(output_path, frame)

    def _render_frames(self, states: List[SceneState]) -> List[np.ndarray]:
        tasks = [(self.config, state) for state in states]
        workers = self.config.workers or max(1, multiprocessing.cpu_count() - 1)

        if workers == 1:
            return [render_clockwork_frame_wrapper(t)
                    for t in tqdm(tasks, desc="Rendering clockwork frames")]

        print(f"Rendering with {workers} cores...")
        with multiprocessing.Pool(processes=workers) as pool:
            return list(tqdm(pool.imap(render_clockwork_frame_wrapper, tasks),
                             total=len(tasks), desc="Rendering clockwork frames (Parallel)"))

    def render_animation(self, store: Store, output_path: str,
                         num_frames: int = 240, fps: int = 30):
        """
        Step the store num_frames times and write the frames as .gif or .mp4.
        """
        suffix = Path(output_path).suffix.lower()
        if suffix not in ('.gif', '.mp4'):
            raise ValueError(f"unsupported animation format: {suffix or output_path}")

        with profile_block('ClockworkRenderer.collect_states'):
            states = collect_states(store, num_frames)
        with profile_block('ClockworkRenderer.render_frames'):
            frames = self._render_frames(states)

        rgb_frames = [f[:, :, :3] for f in frames]
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        if suffix == '.gif':
            imageio.mimsave(output_path, rgb_frames, duration=1000 / fps, loop=0)
        else:
            imageio.mimsave(output_path, rgb_frames, fps=fps)
        print(f"  Saved animation: {output_path}")
