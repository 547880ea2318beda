"""
Tensor Representation of a Position

Converts a Position into a 12-channel binary tensor so evaluators can score
piece placement with vectorised numpy operations.

12-Channel Representation:
    0: White Pawns      6: Black Pawns
    1: White Knights    7: Black Knights
    2: White Bishops    8: Black Bishops
    3: White Rooks      9: Black Rooks
    4: White Queens    10: Black Queens
    5: White Kings     11: Black Kings

Tensor Orientation:
    - Row 0 = Rank 8 (Black's back rank)
    - Row 7 = Rank 1 (White's back rank)
    - Column 0 = A-file
"""

from typing import Tuple

import numpy as np

from rooktree.board.pieces import PieceKind, Side
from rooktree.board.position import Position

CHANNEL_KINDS = (
    PieceKind.PAWN,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.ROOK,
    PieceKind.QUEEN,
    PieceKind.KING,
)

PIECE_TO_CHANNEL = {
    (kind, side): index + (0 if side is Side.WHITE else 6)
    for side in (Side.WHITE, Side.BLACK)
    for index, kind in enumerate(CHANNEL_KINDS)
}


def square_to_coordinates(file: int, rank: int) -> Tuple[int, int]:
    """
    Convert a (file, rank) square to tensor (row, col).

    Returns:
        Tuple of (row, col) where row 0 = rank 8 and col 0 = A-file
    """
    return 7 - rank, file


def position_to_tensor(position: Position) -> np.ndarray:
    """
    Convert a position to a 12-channel tensor.

    Returns:
        numpy array of shape (12, 8, 8), dtype float32, 1.0 where a piece stands
    """
    tensor = np.zeros((12, 8, 8), dtype=np.float32)
    for rank, row in enumerate(position.board):
        for file, occ in enumerate(row):
            if occ.is_empty:
                continue
            r, c = square_to_coordinates(file, rank)
            tensor[PIECE_TO_CHANNEL[(occ.kind, occ.side)], r, c] = 1.0
    return tensor
