"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
The search only talks to this interface, so evaluators can be swapped
without modifying the search algorithm.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() returns a score from the perspective of the side passed in
    3. Positive = good for that side, negative = good for its opponent
    4. Scores are antisymmetric: evaluate(p, WHITE) == -evaluate(p, BLACK)

Convention:
    - Material values in pawns (pawn = 1, queen = 9)
    - Mate scores are large but finite so alpha-beta arithmetic stays ordered
"""

from abc import ABC, abstractmethod

from rooktree.board.pieces import Side
from rooktree.board.position import Position


# Evaluation constants
INFINITY = 100000.0  # Larger than any reachable score
MATE_SCORE = 50000.0  # Base score for checkmate


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    Methods:
        evaluate(position, side): Static score of a horizon position
        evaluate_terminal(position, side, ply): Score when ``side`` has no moves
    """

    @abstractmethod
    def evaluate(self, position: Position, side: Side) -> float:
        """
        Evaluate a position from ``side``'s perspective.

        Args:
            position: Position to evaluate
            side: Side whose point of view the score is expressed in

        Returns:
            float: Evaluation in pawns
        """
        pass

    def evaluate_terminal(self, position: Position, side: Side, ply_from_root: int = 0) -> float:
        """
        Score a position in which ``side`` has no legal moves.

        Checkmate scores -(MATE_SCORE - ply) so that faster mates are
        preferred by the winner and slower ones by the loser. Stalemate is
        a draw.

        Args:
            position: Position with no legal moves for ``side``
            side: Side to move
            ply_from_root: Distance from the search root
        """
        if position.is_in_check(side):
            return -(MATE_SCORE - ply_from_root)
        return 0.0

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
