"""
Clockwork tree: a recursive tree of rotating branches.

Adapted from the "Space Clockwork" example in Matt Pearson's
"Generative Art" book.
"""

from .branch import Branch
from .vector import Vector2D
from .random_source import RandomSource, NumpyRandomSource
from .tree import TreeBuilder, update_tree, iter_levels, iter_branches, tree_depth
from .state import SceneState, Store, Init, NextFrame, Move, reduce, pointer_speed
from .viewer import ClockworkViewer

__all__ = [
    'Branch',
    'Vector2D',
    'RandomSource',
    'NumpyRandomSource',
    'TreeBuilder',
    'update_tree',
    'iter_levels',
    'iter_branches',
    'tree_depth',
    'SceneState',
    'Store',
    'Init',
    'NextFrame',
    'Move',
    'reduce',
    'pointer_speed',
    'ClockworkViewer'
]
