"""
Unit Tests for Evaluation Module

Tests for position evaluation functions, focusing on:
    - Material counting accuracy
    - Central-control and piece-square terms
    - Antisymmetry (evaluate(p, WHITE) == -evaluate(p, BLACK))
    - Terminal scores (checkmate, stalemate)
"""

import pytest

from rooktree.board import EMPTY, Move, PieceKind, Position, Side, new_position
from rooktree.evaluation import (
    MATE_SCORE,
    Evaluator,
    MaterialEvaluator,
    PieceSquareEvaluator,
)
from rooktree.notation import position_from_fen

from tests.positions import (
    FOOLS_MATE_FEN,
    KIWIPETE_FEN,
    PROMOTION_FEN,
    REFERENCE_FENS,
    STALEMATE_FEN,
)


class TestMaterialEvaluator:
    """Tests for MaterialEvaluator."""

    def test_starting_position_is_equal(self, evaluator):
        position = new_position()

        assert evaluator.evaluate(position, Side.WHITE) == 0.0
        assert evaluator.evaluate(position, Side.BLACK) == 0.0

    def test_material_advantage(self, evaluator):
        """White missing the h1 rook: Black is five pawns up."""
        position = new_position()
        position.set_occupant(7, 0, EMPTY)

        assert evaluator.evaluate(position, Side.WHITE) == -5.0
        assert evaluator.evaluate(position, Side.BLACK) == 5.0

    def test_central_control_term(self, evaluator):
        position = new_position()
        position.make_move(Move(4, 1, 4, 3))  # e2e4

        assert evaluator.evaluate(position, Side.WHITE) == pytest.approx(0.1)

    def test_central_weight_is_configurable(self):
        position = new_position()
        position.make_move(Move(4, 1, 4, 3))

        assert MaterialEvaluator(central_weight=0.0).evaluate(position, Side.WHITE) == 0.0
        assert MaterialEvaluator(central_weight=0.5).evaluate(position, Side.WHITE) == 0.5

    @pytest.mark.parametrize("fen", REFERENCE_FENS + [FOOLS_MATE_FEN, STALEMATE_FEN])
    def test_antisymmetry(self, evaluator, fen):
        position, _ = position_from_fen(fen)

        assert evaluator.evaluate(position, Side.WHITE) == -evaluator.evaluate(position, Side.BLACK)

    def test_is_an_evaluator(self, evaluator):
        assert isinstance(evaluator, Evaluator)


class TestTerminalScores:
    """Tests for evaluate_terminal."""

    def test_checkmate(self, evaluator):
        position, side = position_from_fen(FOOLS_MATE_FEN)

        assert evaluator.evaluate_terminal(position, side) == -MATE_SCORE
        assert evaluator.evaluate_terminal(position, side, ply_from_root=3) == -(MATE_SCORE - 3)

    def test_stalemate(self, evaluator):
        position, side = position_from_fen(STALEMATE_FEN)

        assert evaluator.evaluate_terminal(position, side) == 0.0


class TestPieceSquareEvaluator:
    """Tests for PieceSquareEvaluator."""

    @pytest.fixture
    def pst_evaluator(self):
        return PieceSquareEvaluator()

    def test_starting_position_roughly_equal(self, pst_evaluator):
        score = pst_evaluator.evaluate(new_position(), Side.WHITE)
        assert score == pytest.approx(0.0, abs=1e-6)

    @pytest.mark.parametrize("fen", [KIWIPETE_FEN, PROMOTION_FEN])
    def test_antisymmetry(self, pst_evaluator, fen):
        position, _ = position_from_fen(fen)

        assert pst_evaluator.evaluate(position, Side.WHITE) == -pst_evaluator.evaluate(position, Side.BLACK)

    def test_central_knight_beats_corner_knight(self, pst_evaluator):
        edge = Position.empty()
        edge.place("h1", PieceKind.KING, Side.WHITE)
        edge.place("h8", PieceKind.KING, Side.BLACK)
        center = edge.copy()

        edge.place("a1", PieceKind.KNIGHT, Side.WHITE)
        center.place("e4", PieceKind.KNIGHT, Side.WHITE)

        assert pst_evaluator.evaluate(center, Side.WHITE) > pst_evaluator.evaluate(edge, Side.WHITE)

    def test_material_dominates(self, pst_evaluator):
        position = new_position()
        position.set_occupant(3, 7, EMPTY)  # remove black queen

        assert pst_evaluator.evaluate(position, Side.WHITE) > 8.0
