"""
Move Generation Verification and Tactical Checks

Tools for checking the engine against known results.

    1. Perft: Counts leaf nodes of the legal-move tree to a fixed depth.
       Any disagreement with a trusted count points at a move-generation bug.

    2. Reference comparison: Compares legal_moves() for a FEN against
       python-chess, restricted to the rules this engine implements
       (no castling, no en passant, queen-only promotion).

    3. Tactical suite: Short forced mates with known solutions.

References:
    - Perft: https://www.chessprogramming.org/Perft
"""

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

import chess

from rooktree.board.movegen import legal_moves
from rooktree.board.pieces import Side
from rooktree.board.position import Position
from rooktree.evaluation.base import Evaluator
from rooktree.notation import move_to_uci, position_from_fen
from rooktree.search.negamax import SearchStats, find_best_move

logger = logging.getLogger(__name__)


def perft(position: Position, side: Side, depth: int) -> int:
    """
    Count the leaf nodes of the legal-move tree.

    Args:
        position: Starting position (restored before returning)
        side: Side to move
        depth: Depth in plies

    Returns:
        int: Number of move sequences of length ``depth``
    """
    if depth == 0:
        return 1

    moves = legal_moves(position, side)
    if depth == 1:
        return len(moves)

    total = 0
    for move in moves:
        with position.applied(move):
            total += perft(position, side.opposite(), depth - 1)
    return total


def reference_moves(fen: str) -> Set[str]:
    """python-chess legal moves for ``fen``, limited to the engine's rule set."""
    board = chess.Board(fen)
    return {
        move.uci()
        for move in board.legal_moves
        if not board.is_castling(move)
        and not board.is_en_passant(move)
        and move.promotion in (None, chess.QUEEN)
    }


def engine_moves(fen: str) -> Set[str]:
    position, side = position_from_fen(fen)
    return {move_to_uci(move) for move in legal_moves(position, side)}


def move_generation_diff(fen: str) -> Tuple[Set[str], Set[str]]:
    """
    Compare the engine's legal moves with python-chess.

    Returns:
        Tuple of (missing, extra)
            - missing: Moves python-chess allows that the engine lacks
            - extra: Moves the engine generates that python-chess rejects
    """
    reference = reference_moves(fen)
    ours = engine_moves(fen)
    return reference - ours, ours - reference


@dataclass
class SuitePosition:
    """
    A test position with expected best move(s).

    Attributes:
        fen: Board position in FEN notation
        best_moves: Acceptable best moves (UCI format)
        description: Human-readable description of the position
        id: Position identifier
    """
    fen: str
    best_moves: List[str]
    description: str = ""
    id: str = ""


@dataclass
class SuiteResult:
    """
    Result of searching a single suite position.

    Attributes:
        position: The suite position
        found_move: Move the engine found (UCI format)
        score: Score of the move for the side to move
        correct: Whether the engine found a best move
        time_taken: Time spent searching (seconds)
        nodes_searched: Nodes visited
        depth: Search depth used
    """
    position: SuitePosition
    found_move: str
    score: float
    correct: bool
    time_taken: float
    nodes_searched: int = 0
    depth: int = 0


MATE_IN_ONE_POSITIONS = [
    SuitePosition(
        id="M1.01",
        fen="6k1/5ppp/8/8/8/8/8/R6K w - - 0 1",
        best_moves=["a1a8"],
        description="Back-rank mate with the rook",
    ),
    SuitePosition(
        id="M1.02",
        fen="rnbqkbnr/pppp1ppp/8/4p3/6P1/5P2/PPPPP2P/RNBQKBNR b KQkq - 0 2",
        best_moves=["d8h4"],
        description="Fool's mate",
    ),
]


def run_suite(
    positions: List[SuitePosition],
    depth: int = 2,
    evaluator: Optional[Evaluator] = None,
) -> List[SuiteResult]:
    """
    Search every suite position and record whether a best move was found.

    A mate in one needs depth 2: the mated side's empty move list is only
    seen when its node is expanded.
    """
    results = []
    for suite_position in positions:
        position, side = position_from_fen(suite_position.fen)
        stats = SearchStats()

        start_time = time.time()
        move, score = find_best_move(position, side, depth, evaluator, stats=stats)
        elapsed = time.time() - start_time

        found = move_to_uci(move)
        result = SuiteResult(
            position=suite_position,
            found_move=found,
            score=score,
            correct=found in suite_position.best_moves,
            time_taken=elapsed,
            nodes_searched=stats.nodes,
            depth=depth,
        )
        logger.info(
            f"{suite_position.id}: found={found} expected={suite_position.best_moves} "
            f"{'OK' if result.correct else 'FAIL'} ({elapsed:.2f}s, {stats.nodes} nodes)"
        )
        results.append(result)
    return results
