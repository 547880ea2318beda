"""
Unit Tests for GameSession

Tests for committing moves, game status and search-tree reuse across turns.
"""

import logging

import pytest

from rooktree.board import Side
from rooktree.game import GameSession, GameStatus, IllegalMoveError
from rooktree.log import setup_logger
from rooktree.notation import move_from_uci, position_from_fen
from rooktree.search import SearchConfig, SearchStats, find_best_move

from tests.positions import FOOLS_MATE_FEN, STALEMATE_FEN


@pytest.fixture
def session():
    return GameSession(SearchConfig(max_depth=2))


class TestPlay:
    """Tests for committing moves."""

    def test_play_updates_state(self, session):
        move = move_from_uci("e2e4")
        session.play(move)

        assert session.side_to_move is Side.BLACK
        assert session.history == [move]
        assert session.position.occupant_at(4, 3).side is Side.WHITE

    def test_illegal_move_rejected(self, session):
        before = session.position.copy()

        with pytest.raises(IllegalMoveError):
            session.play(move_from_uci("e2e5"))

        assert session.position == before
        assert session.history == []
        assert session.side_to_move is Side.WHITE

    def test_wrong_side_rejected(self, session):
        with pytest.raises(IllegalMoveError):
            session.play(move_from_uci("e7e5"))

    def test_illegal_move_is_value_error(self, session):
        with pytest.raises(ValueError):
            session.play(move_from_uci("a1a5"))


class TestStatus:
    """Tests for checkmate and stalemate detection."""

    def test_ongoing(self, session):
        assert session.status() is GameStatus.ONGOING

    def test_checkmate(self):
        position, side = position_from_fen(FOOLS_MATE_FEN)
        session = GameSession(position=position, side_to_move=side)

        assert session.status() is GameStatus.CHECKMATE

    def test_stalemate(self):
        position, side = position_from_fen(STALEMATE_FEN)
        session = GameSession(position=position, side_to_move=side)

        assert session.status() is GameStatus.STALEMATE

    def test_engine_move_on_finished_game_raises(self):
        position, side = position_from_fen(FOOLS_MATE_FEN)
        session = GameSession(SearchConfig(max_depth=2), position=position, side_to_move=side)

        with pytest.raises(ValueError):
            session.engine_move()


class TestEngineTurns:
    """Tests for engine moves and tree reuse."""

    def test_engine_move_is_committed(self, session):
        move = session.engine_move()

        assert session.history == [move]
        assert session.side_to_move is Side.BLACK

    def test_tree_rerooted_on_engine_move(self, session):
        move = session.engine_move()

        assert session.tree.root.move == move
        assert session.tree.root.expanded
        assert len(session.tree.root.children) == 20

        stats = SearchStats()
        find_best_move(session.position, Side.BLACK, 1, session.evaluator, session.tree, stats)
        assert stats.expansions == 0

    def test_tree_rerooted_on_human_move(self, session):
        session.engine_move()
        reply = session.tree.root.children[-1]

        session.play(reply.move)

        assert session.tree.root is reply

    def test_unexplored_human_move_starts_fresh_tree(self, session):
        session.play(move_from_uci("e2e4"))

        assert session.tree.root.move == move_from_uci("e2e4")
        assert not session.tree.root.expanded

    def test_short_engine_game(self, session):
        for _ in range(6):
            if session.status() is not GameStatus.ONGOING:
                break
            side = session.side_to_move
            legal = session.legal_moves()

            move = session.engine_move(max_depth=2)

            assert move in legal
            assert session.side_to_move is side.opposite()

        assert len(session.history) == 6

    def test_logs_committed_moves(self, session, caplog):
        with caplog.at_level(logging.INFO, logger="rooktree"):
            session.play(move_from_uci("g1f3"))

        assert "g1f3" in caplog.text


class TestLoggerSetup:
    """Tests for setup_logger."""

    def test_file_logger(self, tmp_path):
        log_file = tmp_path / "engine.log"
        logger = setup_logger(debug=True, log_file=log_file)

        try:
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 1
            logger.debug("hello")
            logger.handlers[0].flush()
            assert "hello" in log_file.read_text()
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)
