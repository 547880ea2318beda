"""
Attack Oracle

Determines whether a square is attacked by the side opposing its defender.
Used by the move generator to discard moves that leave the mover's own king
attacked, and by "is the king in check" queries.

Each attacker family is checked independently:
    - orthogonal rays: opposing Rook or Queen
    - diagonal rays: opposing Bishop or Queen
    - knight offsets: opposing Knight
    - adjacent squares: opposing King
    - pawn capture squares: opposing Pawn

A ray stops at the first occupied square, and that occupant alone decides
the result for the ray.
"""

from typing import TYPE_CHECKING, List, Optional, Tuple

from rooktree.board.pieces import Occupant, PieceKind, Side, Square, on_board

if TYPE_CHECKING:
    from rooktree.board.position import Position

ORTHOGONAL = ((1, 0), (-1, 0), (0, 1), (0, -1))
DIAGONAL = ((1, 1), (-1, 1), (1, -1), (-1, -1))
ALL_DIRECTIONS = ORTHOGONAL + DIAGONAL

KNIGHT_OFFSETS = (
    (2, 1), (2, -1), (-2, 1), (-2, -1),
    (1, 2), (-1, 2), (1, -2), (-1, -2),
)
KING_OFFSETS = ALL_DIRECTIONS

ORTHOGONAL_ATTACKERS = (PieceKind.ROOK, PieceKind.QUEEN)
DIAGONAL_ATTACKERS = (PieceKind.BISHOP, PieceKind.QUEEN)


def cast_ray(
    position: "Position", file: int, rank: int, df: int, dr: int
) -> Tuple[List[Square], Optional[Occupant]]:
    """
    Walk from (file, rank) in direction (df, dr) until the edge or a piece.

    Returns:
        Tuple of (squares, blocker)
            - squares: Squares traversed, including the blocker's square
            - blocker: First occupant met, or None if the ray hit the edge
    """
    squares = []
    f, r = file + df, rank + dr
    while 0 <= f < 8 and 0 <= r < 8:
        squares.append(Square(f, r))
        occ = position.board[r][f]
        if not occ.is_empty:
            return squares, occ
        f += df
        r += dr
    return squares, None


def offset_squares(file: int, rank: int, offsets) -> List[Square]:
    """On-board squares reached from (file, rank) by each offset."""
    return [
        Square(file + df, rank + dr)
        for df, dr in offsets
        if on_board(file + df, rank + dr)
    ]


def _ray_attacked(position, square, directions, kinds, attacker: Side) -> bool:
    for df, dr in directions:
        _, blocker = cast_ray(position, square.file, square.rank, df, dr)
        if blocker is not None and blocker.side is attacker and blocker.kind in kinds:
            return True
    return False


def _offset_attacked(position, square, offsets, kind: PieceKind, attacker: Side) -> bool:
    for sq in offset_squares(square.file, square.rank, offsets):
        occ = position.board[sq.rank][sq.file]
        if occ.kind is kind and occ.side is attacker:
            return True
    return False


def _pawn_attacked(position, square, attacker: Side) -> bool:
    # An attacking pawn sits one step behind the square from its own point of view
    rank = square.rank - attacker.forward
    for file in (square.file - 1, square.file + 1):
        if on_board(file, rank):
            occ = position.board[rank][file]
            if occ.kind is PieceKind.PAWN and occ.side is attacker:
                return True
    return False


def is_attacked(position: "Position", square: Square, defending_side: Side) -> bool:
    """
    Check whether ``square`` is attacked by the opponent of ``defending_side``.

    Args:
        position: Position to inspect
        square: Target square
        defending_side: Side that owns (or would own) the square

    Returns:
        bool: True if any opposing piece attacks the square
    """
    attacker = defending_side.opposite()
    return (
        _ray_attacked(position, square, ORTHOGONAL, ORTHOGONAL_ATTACKERS, attacker)
        or _ray_attacked(position, square, DIAGONAL, DIAGONAL_ATTACKERS, attacker)
        or _offset_attacked(position, square, KNIGHT_OFFSETS, PieceKind.KNIGHT, attacker)
        or _offset_attacked(position, square, KING_OFFSETS, PieceKind.KING, attacker)
        or _pawn_attacked(position, square, attacker)
    )
