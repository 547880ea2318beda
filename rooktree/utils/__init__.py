"""
Utilities Module

Verification tools for the engine.

Key Components:
    - perft: Leaf-node counts of the legal-move tree
    - move_generation_diff: Legal moves compared against python-chess
    - run_suite: Short tactical positions with known solutions
"""

from rooktree.utils.testing import (
    MATE_IN_ONE_POSITIONS,
    move_generation_diff,
    perft,
    run_suite,
)

__all__ = [
    'MATE_IN_ONE_POSITIONS',
    'move_generation_diff',
    'perft',
    'run_suite',
]
