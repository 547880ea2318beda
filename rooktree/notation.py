"""
Notation and FEN Interop

Thin adapters between the engine's types and python-chess, used by drivers
and tests. The search never calls into this module.

    - move_to_uci / move_from_uci: long algebraic text ("e2e4", "e7e8q")
    - position_from_fen / position_to_fen: FEN placement + side to move
    - render: text diagram of a position
"""

from typing import Tuple

import chess

from rooktree.board.moves import Move
from rooktree.board.pieces import Occupant, PieceKind, Side
from rooktree.board.position import Position

KIND_TO_CHESS = {
    PieceKind.PAWN: chess.PAWN,
    PieceKind.KNIGHT: chess.KNIGHT,
    PieceKind.BISHOP: chess.BISHOP,
    PieceKind.ROOK: chess.ROOK,
    PieceKind.QUEEN: chess.QUEEN,
    PieceKind.KING: chess.KING,
}
CHESS_TO_KIND = {v: k for k, v in KIND_TO_CHESS.items()}


def side_to_color(side: Side) -> chess.Color:
    return chess.WHITE if side is Side.WHITE else chess.BLACK


def color_to_side(color: chess.Color) -> Side:
    return Side.WHITE if color == chess.WHITE else Side.BLACK


def move_to_chess(move: Move) -> chess.Move:
    """
    Raises:
        ValueError: If the move has off-board coordinates
    """
    if not move.is_on_board():
        raise ValueError(f"Off-board move: {move!r}")
    promotion = KIND_TO_CHESS[move.promotion] if move.promotion is not None else None
    return chess.Move(
        chess.square(move.origin_file, move.origin_rank),
        chess.square(move.dest_file, move.dest_rank),
        promotion=promotion,
    )


def move_from_chess(move: chess.Move) -> Move:
    promotion = CHESS_TO_KIND[move.promotion] if move.promotion else None
    return Move.from_coords(
        chess.square_file(move.from_square),
        chess.square_rank(move.from_square),
        chess.square_file(move.to_square),
        chess.square_rank(move.to_square),
        promotion,
    )


def move_to_uci(move: Move) -> str:
    return move_to_chess(move).uci()


def move_from_uci(text: str) -> Move:
    """
    Parse long algebraic notation, e.g. "e2e4" or "e7e8q".

    Raises:
        ValueError: If the text is not a valid move
    """
    move = chess.Move.from_uci(text.strip().lower())
    if not move:
        raise ValueError(f"Null move is not a board move: {text!r}")
    return move_from_chess(move)


def position_from_board(board: chess.Board) -> Tuple[Position, Side]:
    """Copy piece placement and castling rights out of a python-chess board."""
    position = Position.empty()
    for square, piece in board.piece_map().items():
        position.set_occupant(
            chess.square_file(square),
            chess.square_rank(square),
            Occupant(CHESS_TO_KIND[piece.piece_type], color_to_side(piece.color)),
        )
    position.white_kingside = board.has_kingside_castling_rights(chess.WHITE)
    position.white_queenside = board.has_queenside_castling_rights(chess.WHITE)
    position.black_kingside = board.has_kingside_castling_rights(chess.BLACK)
    position.black_queenside = board.has_queenside_castling_rights(chess.BLACK)
    return position, color_to_side(board.turn)


def position_to_board(position: Position, side: Side = Side.WHITE) -> chess.Board:
    board = chess.Board(fen=None)
    for rank, row in enumerate(position.board):
        for file, occ in enumerate(row):
            if not occ.is_empty:
                board.set_piece_at(
                    chess.square(file, rank),
                    chess.Piece(KIND_TO_CHESS[occ.kind], side_to_color(occ.side)),
                )
    board.turn = side_to_color(side)

    fen_rights = ""
    if position.white_kingside:
        fen_rights += "K"
    if position.white_queenside:
        fen_rights += "Q"
    if position.black_kingside:
        fen_rights += "k"
    if position.black_queenside:
        fen_rights += "q"
    # python-chess drops rights that the placement cannot support
    board.set_castling_fen(fen_rights or "-")
    return board


def position_from_fen(fen: str) -> Tuple[Position, Side]:
    """
    Build a Position from FEN. En passant and move counters are ignored.

    Raises:
        ValueError: If the FEN is malformed
    """
    return position_from_board(chess.Board(fen))


def position_to_fen(position: Position, side: Side = Side.WHITE) -> str:
    return position_to_board(position, side).fen()


def render(position: Position) -> str:
    """Text diagram, rank 8 at the top."""
    return str(position_to_board(position))
