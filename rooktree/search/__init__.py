"""
Search Module

Bounded-depth negamax with alpha-beta pruning over a persistent search
tree. The tree memoizes move generation per node and keeps its children
sorted by their last score, which serves as move ordering for the next
iterative-deepening iteration and for the next real move of the game.

Key Components:
    - negamax: Core recursive search
    - find_best_move: Fixed-depth root search
    - choose_move: Iterative-deepening entry point
    - SearchTree / SearchNode: Memoized tree with re-rooting
    - SearchConfig: Depth ceiling and evaluation weights
    - SearchStats: Work counters owned by the caller
"""

from rooktree.search.config import SearchConfig
from rooktree.search.tree import SearchNode, SearchTree
from rooktree.search.negamax import (
    DEFAULT_MAX_DEPTH,
    SearchStats,
    choose_move,
    find_best_move,
    negamax,
)

__all__ = [
    'SearchConfig',
    'SearchNode',
    'SearchTree',
    'DEFAULT_MAX_DEPTH',
    'SearchStats',
    'choose_move',
    'find_best_move',
    'negamax',
]
