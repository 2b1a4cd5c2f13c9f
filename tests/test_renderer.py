"""
Tests for the Cairo renderer.
"""

import imageio.v3
import numpy as np
import pytest

from config import ClockworkRenderConfig
from clockwork import Init
from clockwork.profiling import profiler
from rendering import ClockworkRenderer, collect_states


@pytest.fixture
def small_config():
    return ClockworkRenderConfig(output_width=64, output_height=48, workers=1)


@pytest.fixture
def ready_store(store):
    store.dispatch(Init(64, 48, speed=1.0))
    return store


class TestRenderFrame:
    def test_frame_shape_and_dtype(self, small_config, ready_store):
        frame = ClockworkRenderer(small_config).render_frame(ready_store.state)
        assert frame.shape == (48, 64, 4)
        assert frame.dtype == np.uint8

    def test_tree_is_drawn_over_background(self, small_config, ready_store):
        frame = ClockworkRenderer(small_config).render_frame(ready_store.state)
        assert len(np.unique(frame.reshape(-1, 4), axis=0)) > 1

    def test_save_frame(self, small_config, ready_store, tmp_path):
        path = tmp_path / 'frames' / 'frame.png'
        ClockworkRenderer(small_config).save_frame(ready_store.state, str(path))
        assert path.exists()


class TestRenderAnimation:
    def test_collect_states_advances_store(self, ready_store):
        states = collect_states(ready_store, 3)
        assert len(states) == 3
        assert states[-1] is ready_store.state
        assert states[0] is not states[1]

    def test_collect_states_requires_init(self, store):
        with pytest.raises(ValueError):
            collect_states(store, 2)

    def test_writes_gif(self, small_config, ready_store, tmp_path):
        path = tmp_path / 'spin.gif'
        ClockworkRenderer(small_config).render_animation(ready_store, str(path), num_frames=4, fps=10)
        assert path.exists()
        assert path.stat().st_size > 0

    def test_rejects_unknown_format(self, small_config, ready_store, tmp_path):
        with pytest.raises(ValueError):
            ClockworkRenderer(small_config).render_animation(ready_store, str(tmp_path / 'spin.avi'))

    def test_gif_frame_duration_is_in_milliseconds(self, small_config, ready_store, tmp_path):
        path = tmp_path / 'spin.gif'
        ClockworkRenderer(small_config).render_animation(ready_store, str(path), num_frames=3, fps=10)
        assert imageio.v3.immeta(path)['duration'] == 100

    def test_animation_stages_are_profiled(self, small_config, ready_store, tmp_path):
        profiler.reset()
        profiler.enabled = True
        try:
            ClockworkRenderer(small_config).render_animation(ready_store, str(tmp_path / 'spin.gif'), num_frames=2)
            names = {row[0] for row in profiler.summary()}
        finally:
            profiler.enabled = False
            profiler.reset()
        assert {'ClockworkRenderer.collect_states', 'ClockworkRenderer.render_frames'} <= names
