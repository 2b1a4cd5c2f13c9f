"""
Clockwork tree engine.

A tree is built once (TreeBuilder.build) and then advanced every frame by
update_tree, which returns a new tree with the same topology and fresh
geometry. Each child hangs off its parent's endpoint, so moving one branch
carries its whole subtree along.
"""

from dataclasses import replace
from typing import Iterator, List, Optional, Tuple

from config.clockwork_config import ClockworkConfig
from .branch import Branch
from .geometry import next_rotation, end_point, check_finite
from .random_source import RandomSource, NumpyRandomSource
from .profiling import profile


def _update(branch: Branch, x: float, y: float, speed: float) -> Branch:
    rotation = next_rotation(branch.rotation, branch.rotation_change, speed)
    end_x, end_y = end_point(x, y, branch.length, rotation)
    return replace(
        branch,
        x=x,
        y=y,
        rotation=rotation,
        end_x=end_x,
        end_y=end_y,
        children=tuple(_update(c, end_x, end_y, speed) for c in branch.children),
    )


@profile
def update_tree(branch: Branch, x: float, y: float, speed: float) -> Branch:
    """
    Advance every branch by one tick with the root origin at (x, y).

    Only x, y, end_x, end_y and rotation change; the input is left untouched.
    """
    check_finite(x=x, y=y, speed=speed)
    return _update(branch, x, y, speed)


class TreeBuilder:
    def __init__(self, config: Optional[ClockworkConfig] = None,
                 random: Optional[RandomSource] = None):
        self.config = config or ClockworkConfig()
        self.random = random or NumpyRandomSource(self.config.random_seed)

    def _make_branch(self, level: int, x: float, y: float, speed: float) -> Branch:
        cfg = self.config
        # Draw order matters for scripted random sources: length, rotation, change, sign
        length = 0.0 if level == 1 else (1 / level) * self.random.integer(cfg.min_length, cfg.max_length)
        rotation = float(self.random.die(cfg.rotation_sides))
        rotation_change = float(self.random.die(cfg.max_rotation_change) * self.random.pick((1, -1)))

        branch = _update(Branch(level, length, rotation, rotation_change), x, y, speed)
        if level >= cfg.max_depth:
            return branch

        children = tuple(
            self._make_branch(level + 1, branch.end_x, branch.end_y, speed)
            for _ in range(cfg.branch_factor)
        )
        return replace(branch, children=children)

    @profile
    def build(self, level: int, x: float, y: float, speed: float) -> Branch:
        """Build a fresh random subtree rooted at `level`, positioned at (x, y)."""
        if level < 1:
            raise ValueError(f"level must be >= 1, got {level}")
        check_finite(x=x, y=y, speed=speed)
        return self._make_branch(level, x, y, speed)


def iter_levels(root: Branch) -> Iterator[Tuple[int, List[Branch]]]:
    """Yield (level, branches) breadth first, one batch per level."""
    level = root.level
    branches = [root]
    while branches:
        yield level, branches
        branches = [c for b in branches for c in b.children]
        level += 1


def iter_branches(root: Branch) -> Iterator[Branch]:
    for _, branches in iter_levels(root):
        yield from branches


def tree_depth(root: Branch) -> int:
    return sum(1 for _ in iter_levels(root))
