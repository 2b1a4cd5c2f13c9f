"""
Tests for the scene reducer and store.
"""

import math

import pytest

from config import ClockworkConfig
from clockwork import TreeBuilder, Store, Init, NextFrame, Move, reduce, pointer_speed, iter_branches


class TestPointerSpeed:
    """Speed from pointer distance to the viewport center."""

    def test_left_of_center_is_negative(self):
        assert pointer_speed(800 / 2 - 10, 300, 800, 600) < 0

    def test_right_of_center_is_positive(self):
        assert pointer_speed(800 / 2 + 10, 300, 800, 600) > 0

    def test_magnitude_is_distance_over_third_width(self):
        speed = pointer_speed(400 + 30, 300 + 40, 800, 600)
        assert speed == pytest.approx(50 / (800 / 3))

    def test_center_is_still(self):
        assert pointer_speed(400, 300, 800, 600) == 0


class TestInit:
    def test_canvas_follows_aspect_ratio(self, store):
        store.dispatch(Init(800, 600))
        state = store.state
        assert state.width == 2000
        assert state.height == pytest.approx(1500)
        assert (state.window_width, state.window_height) == (800, 600)

    def test_tree_is_rooted_at_canvas_center(self, store):
        store.dispatch(Init(800, 600))
        tree = store.state.tree
        assert (tree.x, tree.y) == (1000, pytest.approx(750))
        assert tree.level == 1

    def test_speed_defaults_then_persists(self, store):
        store.dispatch(Init(800, 600))
        assert store.state.speed == 1.0

        store.dispatch(Move(100, 300))
        moved_speed = store.state.speed
        store.dispatch(Init(800, 600))
        assert store.state.speed == moved_speed

        store.dispatch(Init(800, 600, speed=2.5))
        assert store.state.speed == 2.5

    def test_tree_is_positioned_with_build_speed(self, scripted_random_factory):
        # die(360) -> 10, die(4) -> 4, sign -> +1: initial rotation 10 + 4 * build_speed
        builder = TreeBuilder(ClockworkConfig(build_speed=3.0), scripted_random_factory())
        state = reduce(None, Init(800, 600, speed=0.5), builder)
        assert state.tree.rotation == 22
        assert state.speed == 0.5

    def test_click_regrows_tree(self, store):
        store.dispatch(Init(800, 600))
        first = store.state.tree
        store.dispatch(Init(800, 600))
        assert store.state.tree != first


class TestNextFrame:
    def test_updates_geometry_at_center(self, store):
        store.dispatch(Init(800, 600, speed=1.0))
        before = store.state.tree
        store.dispatch(NextFrame())
        after = store.state.tree

        assert (after.x, after.y) == (before.x, before.y)
        assert [b.level for b in iter_branches(after)] == [b.level for b in iter_branches(before)]
        assert any(a.rotation != b.rotation
                   for a, b in zip(iter_branches(after), iter_branches(before)))

    def test_uses_current_speed(self, seeded_builder):
        state = reduce(None, Init(800, 600, speed=0.0), seeded_builder)
        after = reduce(state, NextFrame(), seeded_builder)
        assert [b.rotation for b in iter_branches(after.tree)] == \
            [b.rotation for b in iter_branches(state.tree)]


class TestRejectedEvents:
    """Invalid events leave the previous state in place."""

    def test_reduce_before_init_raises(self, seeded_builder):
        with pytest.raises(ValueError):
            reduce(None, NextFrame(), seeded_builder)

    def test_store_ignores_frame_before_init(self, store):
        assert store.dispatch(NextFrame()) is False
        assert store.state is None

    def test_non_finite_pointer_keeps_state(self, store, capsys):
        store.dispatch(Init(800, 600))
        state = store.state
        assert store.dispatch(Move(math.nan, 10)) is False
        assert store.state is state
        assert "Warning" in capsys.readouterr().out

    def test_invalid_viewport_keeps_state(self, store):
        store.dispatch(Init(800, 600))
        state = store.state
        assert store.dispatch(Init(0, 600)) is False
        assert store.state is state

    @pytest.mark.parametrize("width,height", [
        (800, math.inf),
        (math.inf, 600),
        (math.nan, 600),
        (800, math.nan),
    ])
    def test_non_finite_viewport_keeps_state(self, store, width, height):
        store.dispatch(Init(800, 600))
        state = store.state
        assert store.dispatch(Init(width, height)) is False
        assert store.state is state

    def test_speed_stays_finite_after_rejected_viewport(self, store):
        store.dispatch(Init(800, 600))
        store.dispatch(Init(math.inf, 600))
        store.dispatch(Move(10, 10))
        assert math.isfinite(store.state.speed)
        assert store.state.window_width == 800
        assert store.dispatch(NextFrame()) is True

    def test_non_finite_speed_rejected(self, store):
        assert store.dispatch(Init(800, 600, speed=math.inf)) is False
        assert store.state is None

    def test_unknown_action_raises(self, store):
        store.dispatch(Init(800, 600))
        with pytest.raises(TypeError):
            store.dispatch(object())


class TestSubscribers:
    def test_notified_after_accepted_actions_only(self, store):
        seen = []
        store.subscribe(seen.append)
        store.dispatch(NextFrame())
        store.dispatch(Init(800, 600))
        store.dispatch(NextFrame())
        assert len(seen) == 2
        assert seen[-1] is store.state

    def test_unsubscribe(self, store):
        seen = []
        unsubscribe = store.subscribe(seen.append)
        store.dispatch(Init(800, 600))
        unsubscribe()
        store.dispatch(NextFrame())
        assert len(seen) == 1
