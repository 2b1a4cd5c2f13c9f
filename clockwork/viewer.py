"""
Interactive matplotlib viewer for the clockwork tree.

FuncAnimation is the frame clock; pointer motion changes the speed and a
click regrows the tree. Drawing is batched per level: one LineCollection
for the hands and one EllipseCollection for the gears.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.collections import LineCollection, EllipseCollection
from typing import List, Optional, Tuple

from config.render_config import ClockworkRenderConfig
from .state import Store, SceneState, Init, NextFrame, Move
from .tree import iter_levels


class ClockworkViewer:
    def __init__(
        self,
        store: Store,
        render_config: Optional[ClockworkRenderConfig] = None,
        fps: int = 60,
        window_size: Tuple[int, int] = (1000, 700),
        dpi: int = 100,
        initial_speed: Optional[float] = None,
    ):
        self.store = store
        self.config = render_config or ClockworkRenderConfig()
        self.fps = fps
        self.initial_speed = initial_speed

        width, height = window_size
        self.fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        self.fig.patch.set_facecolor(self.config.background_color)
        self.ax = self.fig.add_axes([0, 0, 1, 1])
        self.ax.set_facecolor(self.config.background_color)
        self.ax.axis('off')

        self.anim: Optional[FuncAnimation] = None
        self._artists: List = []
        self._cids: List[int] = []
        self._unsubscribe = store.subscribe(self.draw)

    @property
    def window_size(self) -> Tuple[float, float]:
        w, h = self.fig.get_size_inches() * self.fig.dpi
        return float(w), float(h)

    def _points_per_unit(self, state: SceneState) -> float:
        return (state.window_width / state.width) * 72 / self.fig.dpi

    def draw(self, state: SceneState):
        for artist in self._artists:
            artist.remove()
        self._artists = []

        self.ax.set_xlim(0, state.width)
        self.ax.set_ylim(state.height, 0)
        scale = self._points_per_unit(state)
        cfg = self.config

        for level, branches in iter_levels(state.tree):
            # "hands"
            segments = [[(b.x, b.y), (b.end_x, b.end_y)] for b in branches]
            hands = LineCollection(
                segments,
                colors=[cfg.hand_rgba(level)],
                linewidths=cfg.hand_width(level) * scale,
                capstyle='round',
            )
            self.ax.add_collection(hands)

            # "gears"
            diameters = np.array([2 * b.length / cfg.gear_divisor for b in branches])
            gears = EllipseCollection(
                diameters, diameters, np.zeros(len(branches)),
                units='xy',
                offsets=np.array([[b.x, b.y] for b in branches]),
                offset_transform=self.ax.transData,
                facecolors=[cfg.gear_rgba(level)],
                edgecolors='none',
            )
            self.ax.add_collection(gears)
            self._artists.extend([hands, gears])

        self.fig.canvas.draw_idle()

    def _on_frame(self, frame):
        self.store.dispatch(NextFrame())
        return self._artists

    def _on_move(self, event):
        if event.x is None or event.y is None:
            return
        _, height = self.window_size
        # matplotlib pixels start bottom-left, the viewport convention is top-left
        self.store.dispatch(Move(event.x, height - event.y))

    def _on_click(self, event):
        width, height = self.window_size
        self.store.dispatch(Init(width, height))

    def start(self) -> FuncAnimation:
        width, height = self.window_size
        self.store.dispatch(Init(width, height, speed=self.initial_speed))

        canvas = self.fig.canvas
        self._cids = [
            canvas.mpl_connect('motion_notify_event', self._on_move),
            canvas.mpl_connect('button_press_event', self._on_click),
            canvas.mpl_connect('close_event', lambda event: self.stop()),
        ]
        self.anim = FuncAnimation(
            self.fig, self._on_frame,
            interval=1000 / self.fps,
            blit=False,
            cache_frame_data=False,
        )
        return self.anim

    def stop(self):
        if self.anim is not None and self.anim.event_source is not None:
            self.anim.event_source.stop()
        for cid in self._cids:
            self.fig.canvas.mpl_disconnect(cid)
        self._cids = []
        self._unsubscribe()

    def show(self):
        self.start()
        plt.show()
