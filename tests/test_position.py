"""
Unit Tests for Position

Tests for the board representation:
    - Starting arrangement and occupant queries
    - Material and central-control primitives
    - make_move (capture, promotion, off-board rejection)
    - Apply/undo round trips
"""

import numpy as np
import pytest

from rooktree.board import (
    EMPTY,
    MissingKingError,
    Move,
    Occupant,
    PieceKind,
    Position,
    Side,
    Square,
    position_to_tensor,
    pseudo_legal_moves,
)
from rooktree.notation import position_from_fen

from tests.positions import KIWIPETE_FEN, PROMOTION_FEN


class TestStartingPosition:
    """Tests for new_position() and occupant queries."""

    def test_back_ranks(self, start_position):
        assert start_position.occupant_at(4, 0) == Occupant(PieceKind.KING, Side.WHITE)
        assert start_position.occupant_at(3, 7) == Occupant(PieceKind.QUEEN, Side.BLACK)
        assert start_position.occupant_at(0, 0) == Occupant(PieceKind.ROOK, Side.WHITE)
        assert start_position.occupant_at(6, 7) == Occupant(PieceKind.KNIGHT, Side.BLACK)

    def test_middle_is_empty(self, start_position):
        for rank in range(2, 6):
            for file in range(8):
                assert start_position.occupant_at(file, rank).is_empty

    def test_get_pieces(self, start_position):
        white = start_position.get_pieces(Side.WHITE)
        black = start_position.get_pieces(Side.BLACK)

        assert len(white) == 16
        assert len(black) == 16
        assert all(occ.side is Side.WHITE for occ in white)
        assert sum(1 for occ in black if occ.kind is PieceKind.PAWN) == 8

    def test_occupant_at_rejects_off_board(self, start_position):
        with pytest.raises(ValueError):
            start_position.occupant_at(8, 0)
        with pytest.raises(ValueError):
            start_position.occupant_at(0, -1)

    def test_castling_flags_start_true(self, start_position):
        assert start_position.castling_rights() == (True, True, True, True)

    def test_king_square(self, start_position):
        assert start_position.king_square(Side.WHITE) == Square(4, 0)
        assert start_position.king_square(Side.BLACK) == Square(4, 7)

    def test_missing_king_raises(self):
        position = Position.empty()
        position.place("a1", PieceKind.KING, Side.WHITE)

        with pytest.raises(MissingKingError):
            position.king_square(Side.BLACK)


class TestMaterial:
    """Tests for sum_material and central_control."""

    def test_sum_material_without_king(self):
        position = Position.empty()
        position.place("a1", PieceKind.PAWN, Side.WHITE)
        position.place("b1", PieceKind.KNIGHT, Side.WHITE)
        position.place("c1", PieceKind.BISHOP, Side.WHITE)
        position.place("d1", PieceKind.ROOK, Side.WHITE)
        position.place("e1", PieceKind.QUEEN, Side.WHITE)

        pieces = position.get_pieces(Side.WHITE)
        assert position.sum_material(pieces) == 1 + 3 + 3 + 5 + 9

    def test_king_value_is_finite(self, start_position):
        pieces = start_position.get_pieces(Side.WHITE)
        total = start_position.sum_material(pieces, king_value=500.0)

        assert total == 8 * 1 + 2 * 3 + 2 * 3 + 2 * 5 + 9 + 500.0

    def test_empty_occupants_are_excluded(self, start_position):
        assert start_position.sum_material([EMPTY, EMPTY]) == 0

    def test_central_control(self, start_position):
        assert start_position.central_control(Side.WHITE) == 0
        assert start_position.central_control(Side.BLACK) == 0

        start_position.make_move(Move(4, 1, 4, 3))  # e2e4
        start_position.make_move(Move(1, 7, 2, 5))  # b8c6

        assert start_position.central_control(Side.WHITE) == 1
        assert start_position.central_control(Side.BLACK) == 0

    def test_central_control_ignores_empty_squares(self):
        position = Position.empty()
        assert position.central_control(Side.WHITE) == 0
        assert position.central_control(Side.BLACK) == 0


class TestMakeMove:
    """Tests for the mechanical move primitive."""

    def test_simple_move(self, start_position):
        assert start_position.make_move(Move(6, 0, 5, 2))  # g1f3

        assert start_position.occupant_at(6, 0).is_empty
        assert start_position.occupant_at(5, 2) == Occupant(PieceKind.KNIGHT, Side.WHITE)

    def test_capture_overwrites_destination(self):
        position = Position.empty()
        position.place("d4", PieceKind.ROOK, Side.WHITE)
        position.place("d7", PieceKind.QUEEN, Side.BLACK)

        assert position.make_move(Move(3, 3, 3, 6))
        assert position.occupant_at(3, 6) == Occupant(PieceKind.ROOK, Side.WHITE)
        assert position.get_pieces(Side.BLACK) == []

    def test_off_board_move_fails_and_leaves_board(self, start_position):
        snapshot = start_position.copy()

        assert start_position.make_move(Move(4, 1, 4, 8)) is False
        assert start_position.make_move(Move(-1, 0, 0, 0)) is False
        assert start_position == snapshot

    def test_promotion_replaces_pawn(self):
        position = Position.empty()
        position.place("a7", PieceKind.PAWN, Side.WHITE)

        position.make_move(Move(0, 6, 0, 7, PieceKind.QUEEN))

        assert position.occupant_at(0, 7) == Occupant(PieceKind.QUEEN, Side.WHITE)

    def test_move_does_not_check_legality(self, start_position):
        # Rook jumps over its own pawn: mechanically fine
        assert start_position.make_move(Move(0, 0, 0, 4))
        assert start_position.occupant_at(0, 4) == Occupant(PieceKind.ROOK, Side.WHITE)


class TestApplyUndo:
    """Tests for snapshot-based undo and the applied() context manager."""

    @pytest.mark.parametrize("fen", [KIWIPETE_FEN, PROMOTION_FEN])
    def test_manual_snapshot_round_trip(self, fen):
        position, side = position_from_fen(fen)
        original = position.copy()

        for move in pseudo_legal_moves(position, side):
            moved = position.occupant_at(move.origin_file, move.origin_rank)
            captured = position.occupant_at(move.dest_file, move.dest_rank)

            position.make_move(move)
            position.set_occupant(move.origin_file, move.origin_rank, moved)
            position.set_occupant(move.dest_file, move.dest_rank, captured)

            assert position == original, f"Undo of {move} did not restore the board"

    @pytest.mark.parametrize("fen", [KIWIPETE_FEN, PROMOTION_FEN])
    def test_applied_round_trip(self, fen):
        position, side = position_from_fen(fen)
        original = position.copy()

        for move in pseudo_legal_moves(position, side):
            with position.applied(move) as ok:
                assert ok
                assert position != original
            assert position == original, f"applied({move}) did not restore the board"

    def test_applied_restores_on_exception(self, start_position):
        original = start_position.copy()

        with pytest.raises(RuntimeError):
            with start_position.applied(Move(4, 1, 4, 3)):
                raise RuntimeError("abort search")

        assert start_position == original

    def test_applied_off_board(self, start_position):
        original = start_position.copy()

        with start_position.applied(Move(0, 0, 0, 9)) as ok:
            assert ok is False

        assert start_position == original

    def test_copy_is_independent(self, start_position):
        clone = start_position.copy()
        clone.make_move(Move(4, 1, 4, 3))

        assert clone != start_position
        assert start_position.occupant_at(4, 1) == Occupant(PieceKind.PAWN, Side.WHITE)


class TestTensorRepresentation:
    """Tests for position_to_tensor."""

    def test_shape_and_count(self, start_position):
        tensor = position_to_tensor(start_position)

        assert tensor.shape == (12, 8, 8)
        assert tensor.dtype == np.float32
        assert tensor.sum() == 32

    def test_orientation(self, start_position):
        tensor = position_to_tensor(start_position)

        # White pawns on rank 2 → row 6
        assert np.all(tensor[0, 6, :] == 1.0)
        # White king on e1 → row 7, col 4
        assert tensor[5, 7, 4] == 1.0
        # Black king on e8 → row 0, col 4
        assert tensor[11, 0, 4] == 1.0
