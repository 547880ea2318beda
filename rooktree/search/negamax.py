"""
Negamax Search with Alpha-Beta Pruning

This module implements the core search algorithm for the engine. Negamax
explores the game tree to find the best move, and alpha-beta pruning
dramatically reduces the number of nodes evaluated.

Key Concepts:
    - Negamax: Minimax where each call negates its child's score instead of
      branching on maximizing/minimizing player
    - Alpha-Beta: Stop visiting a node's children once alpha >= beta; the
      opponent already has a reply that makes the branch irrelevant
    - Move Ordering: After each visit, cached children are sorted by score
      so the next iteration searches the previously-best move first
    - Iterative Deepening: Search depth 1, 2, ... max_depth, keeping the
      result of the deepest completed iteration

Sign Convention:
    Every recursive call flips the side to move and negates both the window
    and the returned score. A score is always from the perspective of the
    side to move at the node being searched.

Position Handling:
    Moves are applied in place and undone through Position.applied(), so
    exactly one line of moves is applied on the board at any instant and
    cutoffs cannot leave a half-applied move behind.

References:
    - Negamax: https://www.chessprogramming.org/Negamax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional, Tuple

from rooktree.board.moves import Move
from rooktree.board.movegen import legal_moves
from rooktree.board.pieces import Side
from rooktree.board.position import Position
from rooktree.evaluation.base import Evaluator
from rooktree.evaluation.material import MaterialEvaluator
from rooktree.search.tree import SearchNode, SearchTree

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 6


@dataclass
class SearchStats:
    """
    Work counters for one or more searches.

    Owned by the caller and threaded through the search; nothing is kept
    in module-level state.

    Attributes:
        nodes: Nodes visited (including horizon nodes)
        evaluations: Static evaluations performed
        expansions: Nodes whose move list had to be generated
        cutoffs: Beta cutoffs taken
    """
    nodes: int = 0
    evaluations: int = 0
    expansions: int = 0
    cutoffs: int = 0

    def reset(self) -> None:
        self.nodes = 0
        self.evaluations = 0
        self.expansions = 0
        self.cutoffs = 0


def _expand(node: SearchNode, position: Position, side: Side, stats: SearchStats) -> None:
    if not node.expanded:
        node.expand(legal_moves(position, side))
        stats.expansions += 1


def negamax(
    position: Position,
    side: Side,
    depth: int,
    alpha: float,
    beta: float,
    node: SearchNode,
    evaluator: Evaluator,
    stats: Optional[SearchStats] = None,
    ply_from_root: int = 0,
    reorder: bool = True,
) -> float:
    """
    Negamax search with alpha-beta pruning over the cached search tree.

    Args:
        position: Position reached at ``node``; restored before returning
        side: Side to move at ``node``
        depth: Remaining search depth in plies
        alpha: Score ``side`` is already assured of elsewhere
        beta: Score the opponent is already assured of elsewhere (negated)
        node: Tree node for this position; its children are memoized
        evaluator: Static evaluation used at depth 0
        stats: Optional counters to update
        ply_from_root: Distance from the root (for mate distance)
        reorder: Sort the node's children by score after visiting them

    Returns:
        float: Score of the position for ``side``

    Algorithm:
        1. depth == 0 → static evaluation
        2. Expand the node once (children are cached)
        3. No children → checkmate or stalemate score
        4. For each child: apply, recurse with (-beta, -alpha), negate, undo
        5. alpha = max(alpha, best); stop once alpha >= beta
        6. Sort children by descending score for the next visit
    """
    if stats is None:
        stats = SearchStats()
    stats.nodes += 1

    # Base case: Reached horizon
    if depth == 0:
        stats.evaluations += 1
        return evaluator.evaluate(position, side)

    _expand(node, position, side, stats)
    if not node.children:
        return evaluator.evaluate_terminal(position, side, ply_from_root)

    opponent = side.opposite()
    best = -float("inf")
    for child in node.children:
        with position.applied(child.move):
            child.score = -negamax(
                position,
                opponent,
                depth - 1,
                -beta,
                -alpha,
                child,
                evaluator,
                stats,
                ply_from_root + 1,
                reorder,
            )

        best = max(best, child.score)
        alpha = max(alpha, best)

        # Beta cutoff: opponent won't allow this branch
        if alpha >= beta:
            stats.cutoffs += 1
            break

    if reorder:
        node.sort_children()
    return best


def find_best_move(
    position: Position,
    side: Side,
    depth: int,
    evaluator: Optional[Evaluator] = None,
    tree: Optional[SearchTree] = None,
    stats: Optional[SearchStats] = None,
    reorder: bool = True,
) -> Tuple[Move, float]:
    """
    Search the root position to a fixed depth.

    Ties are broken by visiting order: the first move reaching the best
    score wins.

    Args:
        position: Current position (restored before returning)
        side: Side to move
        depth: Search depth in plies (at least 1)
        evaluator: Position evaluation function (default: MaterialEvaluator)
        tree: Search tree whose root is ``position`` (default: a fresh tree)
        stats: Optional counters to update
        reorder: Sort cached children by score after visiting them

    Returns:
        Tuple of (best_move, score)

    Raises:
        ValueError: If depth < 1 or ``side`` has no legal moves
    """
    if depth < 1:
        raise ValueError(f"depth must be at least 1, got {depth}")
    if evaluator is None:
        evaluator = MaterialEvaluator()
    if tree is None:
        tree = SearchTree()
    if stats is None:
        stats = SearchStats()

    root = tree.root
    stats.nodes += 1
    _expand(root, position, side, stats)
    if not root.children:
        raise ValueError("No legal moves available")

    opponent = side.opposite()
    alpha = -float("inf")
    beta = float("inf")
    best_move = None
    best_score = -float("inf")

    for child in root.children:
        with position.applied(child.move):
            child.score = -negamax(
                position,
                opponent,
                depth - 1,
                -beta,
                -alpha,
                child,
                evaluator,
                stats,
                ply_from_root=1,
                reorder=reorder,
            )

        if child.score > best_score:
            best_score = child.score
            best_move = child.move
        alpha = max(alpha, best_score)

    if reorder:
        root.sort_children()
    return best_move, best_score


def choose_move(
    position: Position,
    side: Side,
    max_depth: int = DEFAULT_MAX_DEPTH,
    evaluator: Optional[Evaluator] = None,
    tree: Optional[SearchTree] = None,
    stats: Optional[SearchStats] = None,
    reorder: bool = True,
) -> Move:
    """
    Pick a move by iterative deepening.

    Searches depth 1, 2, ... ``max_depth`` over the same tree. Only the
    deepest result is returned; shallower iterations pay off through the
    move ordering they leave in the cached tree.

    Raises:
        ValueError: If max_depth < 1 or ``side`` has no legal moves
    """
    if max_depth < 1:
        raise ValueError(f"max_depth must be at least 1, got {max_depth}")
    if evaluator is None:
        evaluator = MaterialEvaluator()
    if tree is None:
        tree = SearchTree()
    if stats is None:
        stats = SearchStats()

    best_move = None
    start_time = time.time()
    for depth in range(1, max_depth + 1):
        best_move, score = find_best_move(
            position, side, depth, evaluator, tree, stats, reorder
        )
        elapsed_ms = int((time.time() - start_time) * 1000)
        logger.info(
            f"depth={depth} best_move={best_move} score={score:.2f} "
            f"nodes={stats.nodes} evals={stats.evaluations} time={elapsed_ms}ms"
        )

    return best_move
