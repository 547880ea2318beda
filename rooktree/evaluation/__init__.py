"""
Evaluation Module

Static position evaluation, called only at the search horizon. Evaluators
are SWAPPABLE: the search works with any evaluator implementing the base
interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - MaterialEvaluator: Material balance + central-control bonus (default)
    - PieceSquareEvaluator: Material + numpy piece-square tables

Data Flow:
    Position, Side → evaluator.evaluate() → float (pawns)
                                             Positive = good for Side
                                             Negative = good for its opponent
"""

from rooktree.evaluation.base import INFINITY, MATE_SCORE, Evaluator
from rooktree.evaluation.material import MaterialEvaluator
from rooktree.evaluation.classical import PieceSquareEvaluator

__all__ = ['INFINITY', 'MATE_SCORE', 'Evaluator', 'MaterialEvaluator', 'PieceSquareEvaluator']
