"""
Move Generation

Legal moves are produced in two stages:
    1. Pseudo-legal moves per piece kind: ray casts for sliding pieces,
       offset tables for knight and king, pawn pushes and captures.
    2. Check filtering: each pseudo-legal move is applied on the live
       position, the mover's king is tested with the attack oracle, and
       the move is undone. Moves that leave the king attacked are dropped.

Not generated: castling, en passant, under-promotion. Pawns reaching the
last rank always carry a Queen promotion tag.

Complexity:
    Check filtering is O(moves * attack-query) and dominates generation.
"""

from typing import TYPE_CHECKING, Callable, Dict, List

from rooktree.board.attacks import (
    ALL_DIRECTIONS,
    DIAGONAL,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    ORTHOGONAL,
    cast_ray,
    is_attacked,
    offset_squares,
)
from rooktree.board.moves import Move
from rooktree.board.pieces import PieceKind, Side, on_board

if TYPE_CHECKING:
    from rooktree.board.position import Position


def can_move_to_square(position: "Position", file: int, rank: int, side: Side) -> bool:
    """A piece of ``side`` may land on a square that is empty or held by the opponent."""
    if not on_board(file, rank):
        return False
    occ = position.board[rank][file]
    return occ.is_empty or occ.side is not side


def pawn_moves(position: "Position", file: int, rank: int, side: Side) -> List[Move]:
    moves = []
    step = side.forward
    ahead = rank + step
    if not 0 <= ahead < 8:
        return moves

    promotion = PieceKind.QUEEN if ahead == side.last_rank else None

    # Pushes
    if position.board[ahead][file].is_empty:
        moves.append(Move(file, rank, file, ahead, promotion))
        two_ahead = ahead + step
        if rank == side.pawn_rank and position.board[two_ahead][file].is_empty:
            moves.append(Move(file, rank, file, two_ahead))

    # Captures
    for target in (file - 1, file + 1):
        if 0 <= target < 8:
            occ = position.board[ahead][target]
            if not occ.is_empty and occ.side is not side:
                moves.append(Move(file, rank, target, ahead, promotion))

    return moves


def _sliding_moves(position, file, rank, side, directions) -> List[Move]:
    moves = []
    for df, dr in directions:
        squares, blocker = cast_ray(position, file, rank, df, dr)
        if blocker is not None and blocker.side is side:
            # Own piece blocks: its square is not a destination
            squares = squares[:-1]
        moves.extend(Move(file, rank, sq.file, sq.rank) for sq in squares)
    return moves


def rook_moves(position: "Position", file: int, rank: int, side: Side) -> List[Move]:
    return _sliding_moves(position, file, rank, side, ORTHOGONAL)


def bishop_moves(position: "Position", file: int, rank: int, side: Side) -> List[Move]:
    return _sliding_moves(position, file, rank, side, DIAGONAL)


def queen_moves(position: "Position", file: int, rank: int, side: Side) -> List[Move]:
    return _sliding_moves(position, file, rank, side, ALL_DIRECTIONS)


def knight_moves(position: "Position", file: int, rank: int, side: Side) -> List[Move]:
    return [
        Move(file, rank, sq.file, sq.rank)
        for sq in offset_squares(file, rank, KNIGHT_OFFSETS)
        if can_move_to_square(position, sq.file, sq.rank, side)
    ]


def king_moves(position: "Position", file: int, rank: int, side: Side) -> List[Move]:
    # TODO: castling, once the castling-rights flags are maintained by make_move
    return [
        Move(file, rank, sq.file, sq.rank)
        for sq in offset_squares(file, rank, KING_OFFSETS)
        if can_move_to_square(position, sq.file, sq.rank, side)
    ]


MOVE_GENERATORS: Dict[PieceKind, Callable[["Position", int, int, Side], List[Move]]] = {
    PieceKind.PAWN: pawn_moves,
    PieceKind.ROOK: rook_moves,
    PieceKind.KNIGHT: knight_moves,
    PieceKind.BISHOP: bishop_moves,
    PieceKind.QUEEN: queen_moves,
    PieceKind.KING: king_moves,
}


def moves_at(position: "Position", file: int, rank: int) -> List[Move]:
    """Pseudo-legal moves for the piece standing on (file, rank)."""
    occ = position.board[rank][file]
    if occ.is_empty:
        return []
    return MOVE_GENERATORS[occ.kind](position, file, rank, occ.side)


def pseudo_legal_moves(position: "Position", side: Side) -> List[Move]:
    """Moves obeying piece-movement rules, ignoring the mover's king safety."""
    moves = []
    for rank, row in enumerate(position.board):
        for file, occ in enumerate(row):
            if occ.belongs_to(side):
                moves.extend(MOVE_GENERATORS[occ.kind](position, file, rank, side))
    return moves


def leaves_king_attacked(position: "Position", move: Move, side: Side) -> bool:
    """
    Apply ``move``, test ``side``'s king, and undo.

    Raises:
        MissingKingError: If ``side`` has no king after the move
    """
    with position.applied(move):
        return is_attacked(position, position.king_square(side), side)


def legal_moves(position: "Position", side: Side) -> List[Move]:
    """
    Every move for ``side`` that does not leave its own king attacked.

    An empty list means checkmate or stalemate; see Position.is_in_check.
    """
    return [
        move
        for move in pseudo_legal_moves(position, side)
        if not leaves_king_attacked(position, move, side)
    ]
