"""
Scene state and the reducer that drives it.

Every event (frame tick, pointer move, click) is an action. The reducer
maps (state, action) to a new SceneState; the Store owns the current state
and notifies subscribers after each accepted transition.
"""

import math
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Union

from .branch import Branch
from .geometry import check_finite
from .tree import TreeBuilder, update_tree
from .vector import Vector2D


@dataclass(frozen=True)
class SceneState:
    tree: Branch
    speed: float
    width: float
    height: float
    window_width: float
    window_height: float

    @property
    def center(self) -> Vector2D:
        return Vector2D(self.width / 2, self.height / 2)


@dataclass(frozen=True)
class Init:
    """Build a fresh tree sized to the viewport."""
    window_width: float
    window_height: float
    speed: Optional[float] = None


@dataclass(frozen=True)
class NextFrame:
    pass


@dataclass(frozen=True)
class Move:
    """Pointer position in viewport pixels, origin top-left."""
    x: float
    y: float


Action = Union[Init, NextFrame, Move]


def pointer_speed(x: float, y: float, window_width: float, window_height: float) -> float:
    """
    Speed for a pointer at (x, y): distance from the viewport center over a
    third of the viewport width, negative left of center.
    """
    offset = Vector2D(x, y) - Vector2D(window_width / 2, window_height / 2)
    factor = window_width / 3 * (-1 if offset.x < 0 else 1)
    return offset.magnitude / factor


def _init(state: Optional[SceneState], action: Init, builder: TreeBuilder) -> SceneState:
    check_finite(window_width=action.window_width, window_height=action.window_height)
    if action.window_width <= 0 or action.window_height <= 0:
        raise ValueError(f"invalid viewport {action.window_width}x{action.window_height}")

    cfg = builder.config
    aspect_ratio = action.window_width / action.window_height
    width = cfg.canvas_width
    height = cfg.canvas_width / aspect_ratio

    if action.speed is not None:
        speed = action.speed
    elif state is not None:
        speed = state.speed
    else:
        speed = cfg.initial_speed
    if not math.isfinite(speed):
        raise ValueError(f"speed must be finite, got {speed!r}")

    return SceneState(
        tree=builder.build(1, width / 2, height / 2, cfg.build_speed),
        speed=speed,
        width=width,
        height=height,
        window_width=action.window_width,
        window_height=action.window_height,
    )


def reduce(state: Optional[SceneState], action: Action, builder: TreeBuilder) -> SceneState:
    """Return the state after `action`. Raises ValueError for unusable events."""
    if isinstance(action, Init):
        return _init(state, action, builder)

    if state is None:
        raise ValueError(f"{type(action).__name__} received before Init")

    if isinstance(action, NextFrame):
        center = state.center
        return replace(state, tree=update_tree(state.tree, center.x, center.y, state.speed))

    if isinstance(action, Move):
        if not (math.isfinite(action.x) and math.isfinite(action.y)):
            raise ValueError(f"pointer position must be finite, got ({action.x}, {action.y})")
        return replace(state, speed=pointer_speed(
            action.x, action.y, state.window_width, state.window_height))

    raise TypeError(f"unknown action {action!r}")


class Store:
    """Owns the current SceneState; rejected events keep the previous state."""

    def __init__(self, builder: TreeBuilder, state: Optional[SceneState] = None):
        self.builder = builder
        self._state = state
        self._subscribers: List[Callable[[SceneState], None]] = []

    @property
    def state(self) -> Optional[SceneState]:
        return self._state

    def dispatch(self, action: Action) -> bool:
        """Apply an action. Returns False if it was rejected."""
        try:
            new_state = reduce(self._state, action, self.builder)
        except ValueError as e:
            print(f"Warning: ignoring {type(action).__name__}: {e}")
            return False

        self._state = new_state
        for callback in list(self._subscribers):
            callback(new_state)
        return True

    def subscribe(self, callback: Callable[[SceneState], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe
