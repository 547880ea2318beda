"""
Piece and Square Primitives

Sides, piece kinds and square occupants, plus the static material values
used by evaluation.

Board Orientation:
    - file 0 = A-file, file 7 = H-file
    - rank 0 = rank 1 (White's back rank), rank 7 = rank 8

Material Values (pawns):
    P=1, N=3, B=3, R=5, Q=9, K=KING_VALUE (large but finite)
"""

from enum import Enum
from typing import NamedTuple


# The king never leaves the board in legal play, so its value cancels out.
# It must stay finite so alpha-beta comparisons remain well ordered.
KING_VALUE = 1000.0


class Side(Enum):
    """Side to move / owner of a piece."""
    WHITE = 0
    BLACK = 1

    def opposite(self) -> "Side":
        return Side.BLACK if self is Side.WHITE else Side.WHITE

    @property
    def forward(self) -> int:
        """Rank increment of this side's pawns."""
        return 1 if self is Side.WHITE else -1

    @property
    def pawn_rank(self) -> int:
        """Rank this side's pawns start on."""
        return 1 if self is Side.WHITE else 6

    @property
    def last_rank(self) -> int:
        """Rank on which this side's pawns promote."""
        return 7 if self is Side.WHITE else 0


class PieceKind(Enum):
    """
    Kind of piece on a square.

    EMPTY marks an unoccupied square and carries no side semantics.
    """
    PAWN = 0
    ROOK = 1
    KNIGHT = 2
    BISHOP = 3
    QUEEN = 4
    KING = 5
    EMPTY = 6


PIECE_VALUES = {
    PieceKind.PAWN: 1.0,
    PieceKind.KNIGHT: 3.0,
    PieceKind.BISHOP: 3.0,
    PieceKind.ROOK: 5.0,
    PieceKind.QUEEN: 9.0,
    PieceKind.KING: KING_VALUE,
    PieceKind.EMPTY: 0.0,
}


class Occupant(NamedTuple):
    """
    A (kind, side) pair placed on a square.

    The side of an EMPTY occupant is never consulted: only ``kind`` decides
    emptiness. Positions store the shared ``EMPTY`` constant for every
    unoccupied square so that square-for-square comparison stays exact.
    """
    kind: PieceKind
    side: Side

    @property
    def is_empty(self) -> bool:
        return self.kind is PieceKind.EMPTY

    def belongs_to(self, side: Side) -> bool:
        """True if this is a real piece owned by ``side``."""
        return self.kind is not PieceKind.EMPTY and self.side is side

    def value(self, king_value: float = KING_VALUE) -> float:
        if self.kind is PieceKind.KING:
            return king_value
        return PIECE_VALUES[self.kind]


EMPTY = Occupant(PieceKind.EMPTY, Side.WHITE)


class Square(NamedTuple):
    """Board coordinate as (file, rank), both in [0, 7]."""
    file: int
    rank: int


def on_board(file: int, rank: int) -> bool:
    """Check that a coordinate lies inside the 8x8 board."""
    return 0 <= file < 8 and 0 <= rank < 8
