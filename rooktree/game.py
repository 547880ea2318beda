"""
Game Session

Owns the live position, the side to move, the move history and the
persistent search tree. Both human and engine moves go through play(),
which applies the move and re-roots the tree so the engine's next search
reuses the subtree it already explored.
"""

import logging
from enum import Enum
from typing import List, Optional

from rooktree.board.moves import Move
from rooktree.board.pieces import Side
from rooktree.board.position import Position, new_position
from rooktree.evaluation.base import Evaluator
from rooktree.search.config import SearchConfig
from rooktree.search.negamax import SearchStats, choose_move
from rooktree.search.tree import SearchTree

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    ONGOING = 0
    CHECKMATE = 1
    STALEMATE = 2


class IllegalMoveError(ValueError):
    """Raised when a move is not legal for the side to move."""


class GameSession:
    """
    A game between two players, either of which may be the engine.

    Attributes:
        position: Current position
        side_to_move: Side whose turn it is
        history: Moves committed so far
        tree: Persistent search tree rooted at the current position
        config: Search configuration
        evaluator: Evaluation used by the engine
        stats: Work counters accumulated across engine moves
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        evaluator: Optional[Evaluator] = None,
        position: Optional[Position] = None,
        side_to_move: Side = Side.WHITE,
    ):
        self.config = config if config else SearchConfig()
        self.evaluator = evaluator if evaluator else self.config.make_evaluator()
        self.position = position if position is not None else new_position()
        self.side_to_move = side_to_move
        self.history: List[Move] = []
        self.tree = SearchTree()
        self.stats = SearchStats()

    def legal_moves(self) -> List[Move]:
        return self.position.get_moves(self.side_to_move)

    def status(self) -> GameStatus:
        """Checkmate or stalemate when the side to move has no legal moves."""
        if self.legal_moves():
            return GameStatus.ONGOING
        if self.position.is_in_check(self.side_to_move):
            return GameStatus.CHECKMATE
        return GameStatus.STALEMATE

    def play(self, move: Move) -> None:
        """
        Commit a move for the side to move and re-root the search tree.

        Raises:
            IllegalMoveError: If ``move`` is not legal in the current position
        """
        if move not in self.legal_moves():
            raise IllegalMoveError(f"Illegal move for {self.side_to_move.name.lower()}: {move}")

        self.position.make_move(move)
        self.history.append(move)
        reused = self.tree.reroot(move)
        logger.info(
            f"{self.side_to_move.name.lower()} played {move} "
            f"({'reused' if reused else 'fresh'} search tree)"
        )
        self.side_to_move = self.side_to_move.opposite()

    def engine_move(self, max_depth: Optional[int] = None) -> Move:
        """
        Let the engine choose and play a move for the side to move.

        Raises:
            ValueError: If the side to move has no legal moves
        """
        move = choose_move(
            self.position,
            self.side_to_move,
            max_depth if max_depth is not None else self.config.max_depth,
            self.evaluator,
            self.tree,
            self.stats,
            self.config.reorder_children,
        )
        self.play(move)
        return move
