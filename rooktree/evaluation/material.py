"""
Material + Central Control Evaluation

The default evaluator:

    score = (material(side) - material(opponent))
          + weight * (central(side) - central(opponent))

Both terms are antisymmetric, so the score for one side is exactly the
negation of the score for the other.
"""

from rooktree.board.pieces import KING_VALUE, Side
from rooktree.board.position import Position
from rooktree.evaluation.base import Evaluator

DEFAULT_CENTRAL_WEIGHT = 0.1


class MaterialEvaluator(Evaluator):
    """
    Material balance plus a small central-control bonus.

    Attributes:
        central_weight: Value of each occupied central square
        king_value: Finite material value of a king
    """

    def __init__(self, central_weight: float = DEFAULT_CENTRAL_WEIGHT, king_value: float = KING_VALUE):
        self.central_weight = central_weight
        self.king_value = king_value

    def material(self, position: Position, side: Side) -> float:
        return position.sum_material(position.get_pieces(side), self.king_value)

    def evaluate(self, position: Position, side: Side) -> float:
        opponent = side.opposite()
        material = self.material(position, side) - self.material(position, opponent)
        central = position.central_control(side) - position.central_control(opponent)
        return material + self.central_weight * central

    def __repr__(self) -> str:
        return f"MaterialEvaluator(central_weight={self.central_weight}, king_value={self.king_value})"
