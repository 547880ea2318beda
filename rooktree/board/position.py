"""
Position Representation

The Position owns the 8x8 grid of occupants and the four castling-rights
flags. It provides occupant queries, material and central-control
primitives, and the mechanical move-apply primitive used by the search.

Grid layout:
    board[rank][file], rank 0 = White's back rank

Apply/undo discipline:
    make_move() has no inverse. Callers snapshot the origin and destination
    occupants before applying and restore them afterwards. The applied()
    context manager does exactly that and restores on every exit path,
    including early returns from alpha-beta cutoffs.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence

from rooktree.board import attacks, movegen
from rooktree.board.moves import Move
from rooktree.board.pieces import (
    EMPTY,
    KING_VALUE,
    Occupant,
    PieceKind,
    Side,
    Square,
    on_board,
)

BACK_RANK = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)

# c3..e5, the 3x3 block used by the central-control heuristic
CENTER_SQUARES = tuple(Square(f, r) for r in range(2, 5) for f in range(2, 5))


class MissingKingError(RuntimeError):
    """Raised when a side has no king; chess semantics are undefined then."""


class Position:
    """
    A chess position: piece placement plus castling-rights flags.

    Castling flags are carried for future use and are not consumed by the
    move generator.

    Attributes:
        board: 8x8 grid of Occupant, indexed board[rank][file]
        white_kingside, white_queenside,
        black_kingside, black_queenside: Castling-rights flags
    """

    def __init__(
        self,
        board: Optional[Sequence[Sequence[Occupant]]] = None,
        white_kingside: bool = True,
        white_queenside: bool = True,
        black_kingside: bool = True,
        black_queenside: bool = True,
    ):
        if board is None:
            self.board = [[EMPTY] * 8 for _ in range(8)]
        else:
            if len(board) != 8 or any(len(row) != 8 for row in board):
                raise ValueError("Board must be an 8x8 grid")
            self.board = [
                [EMPTY if occ.is_empty else occ for occ in row] for row in board
            ]
        self.white_kingside = white_kingside
        self.white_queenside = white_queenside
        self.black_kingside = black_kingside
        self.black_queenside = black_queenside

    @classmethod
    def empty(cls) -> "Position":
        """An empty board with no castling rights."""
        return cls(
            white_kingside=False,
            white_queenside=False,
            black_kingside=False,
            black_queenside=False,
        )

    def reset(self) -> None:
        """Restore the standard starting arrangement."""
        for rank in range(8):
            for file in range(8):
                self.board[rank][file] = EMPTY
        for file, kind in enumerate(BACK_RANK):
            self.board[0][file] = Occupant(kind, Side.WHITE)
            self.board[1][file] = Occupant(PieceKind.PAWN, Side.WHITE)
            self.board[6][file] = Occupant(PieceKind.PAWN, Side.BLACK)
            self.board[7][file] = Occupant(kind, Side.BLACK)
        self.white_kingside = self.white_queenside = True
        self.black_kingside = self.black_queenside = True

    def copy(self) -> "Position":
        return Position(
            self.board,
            self.white_kingside,
            self.white_queenside,
            self.black_kingside,
            self.black_queenside,
        )

    # ------------------------------------------------------------------
    # Occupant queries
    # ------------------------------------------------------------------

    def occupant_at(self, file: int, rank: int) -> Occupant:
        """
        Get the occupant of a square.

        Raises:
            ValueError: If the coordinate is off the board
        """
        if not on_board(file, rank):
            raise ValueError(f"Off-board square: ({file}, {rank})")
        return self.board[rank][file]

    def set_occupant(self, file: int, rank: int, occupant: Occupant) -> None:
        if not on_board(file, rank):
            raise ValueError(f"Off-board square: ({file}, {rank})")
        self.board[rank][file] = EMPTY if occupant.is_empty else occupant

    def place(self, square_name: str, kind: PieceKind, side: Side) -> None:
        """Place a piece by algebraic square name, e.g. place("d4", ROOK, WHITE)."""
        if len(square_name) != 2 or square_name[0] not in "abcdefgh" or square_name[1] not in "12345678":
            raise ValueError(f"Invalid square name: {square_name!r}")
        self.set_occupant(ord(square_name[0]) - ord("a"), int(square_name[1]) - 1, Occupant(kind, side))

    def get_pieces(self, side: Side) -> List[Occupant]:
        """All non-empty occupants belonging to ``side``."""
        return [occ for row in self.board for occ in row if occ.belongs_to(side)]

    def sum_material(self, pieces: Sequence[Occupant], king_value: float = KING_VALUE) -> float:
        """Sum the static value of each non-empty occupant."""
        return sum(occ.value(king_value) for occ in pieces if not occ.is_empty)

    def central_control(self, side: Side) -> int:
        """Count the central squares occupied by ``side``'s pieces."""
        return sum(
            1 for sq in CENTER_SQUARES if self.board[sq.rank][sq.file].belongs_to(side)
        )

    def king_square(self, side: Side) -> Square:
        """
        Locate ``side``'s king.

        Raises:
            MissingKingError: If ``side`` has no king on the board
        """
        for rank, row in enumerate(self.board):
            for file, occ in enumerate(row):
                if occ.kind is PieceKind.KING and occ.side is side:
                    return Square(file, rank)
        raise MissingKingError(f"No {side.name.lower()} king on the board:\n{self!r}")

    # ------------------------------------------------------------------
    # Move application
    # ------------------------------------------------------------------

    def make_move(self, move: Move) -> bool:
        """
        Move the origin occupant to the destination and clear the origin.

        Capture is implicit: whatever stood on the destination is lost. A
        promotion tag on a pawn move replaces the pawn with the tagged kind.
        Chess legality is NOT checked here.

        Returns:
            bool: False (board unchanged) if any coordinate is off-board
        """
        if not move.is_on_board():
            return False

        occ = self.board[move.origin_rank][move.origin_file]
        if move.promotion is not None and occ.kind is PieceKind.PAWN:
            occ = Occupant(move.promotion, occ.side)

        self.board[move.origin_rank][move.origin_file] = EMPTY
        self.board[move.dest_rank][move.dest_file] = occ
        return True

    @contextmanager
    def applied(self, move: Move) -> Iterator[bool]:
        """
        Apply ``move`` for the duration of a ``with`` block.

        Yields the make_move() success flag. The origin and destination
        occupants are restored when the block exits, however it exits.
        """
        if not move.is_on_board():
            yield False
            return

        moved = self.board[move.origin_rank][move.origin_file]
        captured = self.board[move.dest_rank][move.dest_file]
        self.make_move(move)
        try:
            yield True
        finally:
            self.board[move.origin_rank][move.origin_file] = moved
            self.board[move.dest_rank][move.dest_file] = captured

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def get_moves(self, side: Side) -> List[Move]:
        """Every legal move for ``side`` (see movegen.legal_moves)."""
        return movegen.legal_moves(self, side)

    def is_attacked(self, square: Square, defending_side: Side) -> bool:
        return attacks.is_attacked(self, square, defending_side)

    def is_in_check(self, side: Side) -> bool:
        return attacks.is_attacked(self, self.king_square(side), side)

    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.board == other.board and self.castling_rights() == other.castling_rights()

    __hash__ = None  # mutable

    def castling_rights(self) -> tuple:
        return (
            self.white_kingside,
            self.white_queenside,
            self.black_kingside,
            self.black_queenside,
        )

    def __repr__(self) -> str:
        letters = {
            PieceKind.PAWN: "p",
            PieceKind.ROOK: "r",
            PieceKind.KNIGHT: "n",
            PieceKind.BISHOP: "b",
            PieceKind.QUEEN: "q",
            PieceKind.KING: "k",
        }
        rows = []
        for rank in range(7, -1, -1):
            row = ""
            for occ in self.board[rank]:
                if occ.is_empty:
                    row += "."
                else:
                    letter = letters[occ.kind]
                    row += letter.upper() if occ.side is Side.WHITE else letter
            rows.append(row)
        return "\n".join(rows)


def new_position() -> Position:
    """A Position in the standard starting arrangement."""
    position = Position()
    position.reset()
    return position
