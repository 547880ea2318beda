"""
Piece-Square Table Evaluation

An alternative to MaterialEvaluator that rewards piece placement square by
square instead of counting central occupancy:
    1. Material counting (piece values, in pawns)
    2. Piece-Square Tables (positional bonuses/penalties)

The position is encoded with position_to_tensor() and scored in one
vectorised pass against a precomputed (12, 8, 8) weight stack.

Reference:
    Simplified Evaluation Function
    https://www.chessprogramming.org/Simplified_Evaluation_Function
"""

import numpy as np

from rooktree.board.pieces import KING_VALUE, PIECE_VALUES, PieceKind, Side
from rooktree.board.position import Position
from rooktree.board.representation import CHANNEL_KINDS, position_to_tensor
from rooktree.evaluation.base import Evaluator

#fmt: off
# ============================================================================
# Piece-Square Tables (centipawns)
# ============================================================================
# Values are from White's perspective (row 0 = rank 8, row 7 = rank 1).
# Black pieces read the table flipped vertically.
# ============================================================================

PAWN_TABLE = np.array([
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [ 50,  50,  50,  50,  50,  50,  50,  50],
    [ 10,  10,  20,  30,  30,  20,  10,  10],
    [  5,   5,  10,  25,  25,  10,   5,   5],
    [  0,   0,   0,  20,  20,   0,   0,   0],
    [  5,  -5, -10,   0,   0, -10,  -5,   5],
    [  5,  10,  10, -20, -20,  10,  10,   5],
    [  0,   0,   0,   0,   0,   0,   0,   0],
], dtype=np.float32)

# Knights on the rim are dim
KNIGHT_TABLE = np.array([
    [-50, -40, -30, -30, -30, -30, -40, -50],
    [-40, -20,   0,   0,   0,   0, -20, -40],
    [-30,   0,  10,  15,  15,  10,   0, -30],
    [-30,   5,  15,  20,  20,  15,   5, -30],
    [-30,   0,  15,  20,  20,  15,   0, -30],
    [-30,   5,  10,  15,  15,  10,   5, -30],
    [-40, -20,   0,   5,   5,   0, -20, -40],
    [-50, -40, -30, -30, -30, -30, -40, -50],
], dtype=np.float32)

BISHOP_TABLE = np.array([
    [-20, -10, -10, -10, -10, -10, -10, -20],
    [-10,   0,   0,   0,   0,   0,   0, -10],
    [-10,   0,   5,  10,  10,   5,   0, -10],
    [-10,   5,   5,  10,  10,   5,   5, -10],
    [-10,   0,  10,  10,  10,  10,   0, -10],
    [-10,  10,  10,  10,  10,  10,  10, -10],
    [-10,   5,   0,   0,   0,   0,   5, -10],
    [-20, -10, -10, -10, -10, -10, -10, -20],
], dtype=np.float32)

ROOK_TABLE = np.array([
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  5,  10,  10,  10,  10,  10,  10,   5],
    [ -5,   0,   0,   0,   0,   0,   0,  -5],
    [ -5,   0,   0,   0,   0,   0,   0,  -5],
    [ -5,   0,   0,   0,   0,   0,   0,  -5],
    [ -5,   0,   0,   0,   0,   0,   0,  -5],
    [ -5,   0,   0,   0,   0,   0,   0,  -5],
    [  0,   0,   0,   5,   5,   0,   0,   0],
], dtype=np.float32)

QUEEN_TABLE = np.array([
    [-20, -10, -10,  -5,  -5, -10, -10, -20],
    [-10,   0,   0,   0,   0,   0,   0, -10],
    [-10,   0,   5,   5,   5,   5,   0, -10],
    [ -5,   0,   5,   5,   5,   5,   0,  -5],
    [  0,   0,   5,   5,   5,   5,   0,  -5],
    [-10,   5,   5,   5,   5,   5,   0, -10],
    [-10,   0,   5,   0,   0,   0,   0, -10],
    [-20, -10, -10,  -5,  -5, -10, -10, -20],
], dtype=np.float32)

# No castling yet, so the king is simply kept home and away from the center
KING_TABLE = np.array([
    [-30, -40, -40, -50, -50, -40, -40, -30],
    [-30, -40, -40, -50, -50, -40, -40, -30],
    [-30, -40, -40, -50, -50, -40, -40, -30],
    [-30, -40, -40, -50, -50, -40, -40, -30],
    [-20, -30, -30, -40, -40, -30, -30, -20],
    [-10, -20, -20, -20, -20, -20, -20, -10],
    [ 20,  20,   0,   0,   0,   0,  20,  20],
    [ 20,  30,  10,   0,   0,  10,  30,  20],
], dtype=np.float32)
#fmt: on

PIECE_TABLES = {
    PieceKind.PAWN: PAWN_TABLE,
    PieceKind.KNIGHT: KNIGHT_TABLE,
    PieceKind.BISHOP: BISHOP_TABLE,
    PieceKind.ROOK: ROOK_TABLE,
    PieceKind.QUEEN: QUEEN_TABLE,
    PieceKind.KING: KING_TABLE,
}


class PieceSquareEvaluator(Evaluator):
    """
    Material plus piece-square table bonuses.

    Attributes:
        king_value: Finite material value of a king
        white_weights: (6, 8, 8) value + PST for White's channels, in pawns
        black_weights: (6, 8, 8) value + flipped PST for Black's channels
    """

    def __init__(self, king_value: float = KING_VALUE):
        self.king_value = king_value

        white = []
        black = []
        for kind in CHANNEL_KINDS:
            value = king_value if kind is PieceKind.KING else PIECE_VALUES[kind]
            table = PIECE_TABLES[kind] / 100.0
            white.append(table + value)
            black.append(np.flipud(table) + value)

        self.white_weights = np.stack(white).astype(np.float64)
        self.black_weights = np.stack(black).astype(np.float64)

    def evaluate(self, position: Position, side: Side) -> float:
        tensor = position_to_tensor(position)
        white_score = float(np.sum(tensor[:6] * self.white_weights))
        black_score = float(np.sum(tensor[6:] * self.black_weights))

        if side is Side.WHITE:
            return white_score - black_score
        return black_score - white_score

    def __repr__(self) -> str:
        return f"PieceSquareEvaluator(king_value={self.king_value})"
