"""
Move Value Type

A Move is an immutable (origin, destination, promotion) record. It does not
know whether it is legal: legality is decided by the move generator.
"""

from dataclasses import dataclass
from typing import Optional

import chess

from rooktree.board.pieces import PieceKind, Square, on_board

PROMOTION_LETTERS = {
    PieceKind.QUEEN: "q",
    PieceKind.ROOK: "r",
    PieceKind.BISHOP: "b",
    PieceKind.KNIGHT: "n",
}


@dataclass(frozen=True)
class Move:
    """
    A move from one square to another.

    Attributes:
        origin_file: File of the moving piece (0-7)
        origin_rank: Rank of the moving piece (0-7)
        dest_file: Destination file (0-7)
        dest_rank: Destination rank (0-7)
        promotion: Kind a pawn turns into on the last rank, or None

    Equality is structural, so moves can be compared and used as keys.
    """
    origin_file: int
    origin_rank: int
    dest_file: int
    dest_rank: int
    promotion: Optional[PieceKind] = None

    @classmethod
    def from_coords(
        cls,
        origin_file: int,
        origin_rank: int,
        dest_file: int,
        dest_rank: int,
        promotion: Optional[PieceKind] = None,
    ) -> "Move":
        """
        Build a move, rejecting off-board coordinates.

        Raises:
            ValueError: If any coordinate is outside the board or the
                promotion kind is not a piece a pawn may become
        """
        if not (on_board(origin_file, origin_rank) and on_board(dest_file, dest_rank)):
            raise ValueError(
                f"Off-board move: ({origin_file}, {origin_rank}) -> ({dest_file}, {dest_rank})"
            )
        if promotion is not None and promotion not in PROMOTION_LETTERS:
            raise ValueError(f"Invalid promotion piece: {promotion}")
        return cls(origin_file, origin_rank, dest_file, dest_rank, promotion)

    @property
    def origin(self) -> Square:
        return Square(self.origin_file, self.origin_rank)

    @property
    def destination(self) -> Square:
        return Square(self.dest_file, self.dest_rank)

    def is_on_board(self) -> bool:
        return on_board(self.origin_file, self.origin_rank) and on_board(
            self.dest_file, self.dest_rank
        )

    def __str__(self) -> str:
        if not self.is_on_board():
            return repr(self)
        text = (
            f"{chess.FILE_NAMES[self.origin_file]}{self.origin_rank + 1}"
            f"{chess.FILE_NAMES[self.dest_file]}{self.dest_rank + 1}"
        )
        if self.promotion is not None:
            text += PROMOTION_LETTERS[self.promotion]
        return text
