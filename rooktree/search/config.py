"""
Search configuration.
"""

import math
from dataclasses import dataclass

from rooktree.board.pieces import KING_VALUE
from rooktree.evaluation.base import Evaluator
from rooktree.evaluation.material import DEFAULT_CENTRAL_WEIGHT, MaterialEvaluator


@dataclass
class SearchConfig:
    """Configuration for move selection.

    Collects the search depth ceiling and evaluation weights in one place
    so a game session can be reproduced from its config alone.
    """

    max_depth: int = 6
    """Deepest iteration of iterative deepening, in plies"""

    central_weight: float = DEFAULT_CENTRAL_WEIGHT
    """Value of each occupied central square"""

    king_value: float = KING_VALUE
    """Material value of a king (must be finite)"""

    reorder_children: bool = True
    """Sort cached children by score after each visit (move ordering)"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")

        if self.central_weight < 0:
            raise ValueError(f"central_weight must be non-negative, got {self.central_weight}")

        if not math.isfinite(self.king_value) or self.king_value <= 0:
            raise ValueError(f"king_value must be finite and positive, got {self.king_value}")

    def make_evaluator(self) -> Evaluator:
        return MaterialEvaluator(central_weight=self.central_weight, king_value=self.king_value)
