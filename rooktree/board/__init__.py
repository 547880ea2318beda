"""
Board Module

Position representation, move generation and the attack oracle.

Key Components:
    - Position: 8x8 grid of occupants with a mechanical make_move and a
      scoped applied() context manager for apply/undo
    - legal_moves: pseudo-legal generation per piece kind + check filtering
    - is_attacked: attack oracle used for check detection
    - position_to_tensor: 12-channel numpy encoding for evaluators

Data Flow:
    Position + Side → legal_moves() → [Move] → Position.applied(move)
"""

from rooktree.board.pieces import (
    EMPTY,
    KING_VALUE,
    PIECE_VALUES,
    Occupant,
    PieceKind,
    Side,
    Square,
    on_board,
)
from rooktree.board.moves import Move
from rooktree.board.position import MissingKingError, Position, new_position
from rooktree.board.attacks import is_attacked
from rooktree.board.movegen import legal_moves, pseudo_legal_moves
from rooktree.board.representation import position_to_tensor

__all__ = [
    'EMPTY',
    'KING_VALUE',
    'PIECE_VALUES',
    'Occupant',
    'PieceKind',
    'Side',
    'Square',
    'on_board',
    'Move',
    'MissingKingError',
    'Position',
    'new_position',
    'is_attacked',
    'legal_moves',
    'pseudo_legal_moves',
    'position_to_tensor',
]
