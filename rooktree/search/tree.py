"""
Persistent Search Tree

Memoizes explored positions across iterative-deepening iterations and
across real moves played in a game.

Structure:
    - Each SearchNode holds the move that produced it, its last score and
      the list of child nodes, one per legal reply.
    - Children are materialised once, the first time the node is expanded,
      and reused by every later visit.
    - Nodes own their children and hold no reference to their parent, so
      the tree is a strict forest with no ownership cycles.

Re-rooting:
    When a real move is committed, the matching child becomes the new root
    and every sibling subtree (and the old root) is dropped.
"""

import logging
from typing import Iterable, List, Optional

from rooktree.board.moves import Move

logger = logging.getLogger(__name__)


class SearchNode:
    """
    A node of the search tree.

    Attributes:
        move: Move leading to this node from its parent (None at a fresh root)
        score: Last computed score, from the perspective of the side that
            made ``move`` (i.e. already negated back into the parent's view)
        children: Child nodes in the order they will next be visited
        expanded: True once the children have been generated
    """

    __slots__ = ("move", "score", "children", "expanded")

    def __init__(self, move: Optional[Move] = None, score: float = 0.0):
        self.move = move
        self.score = score
        self.children: List["SearchNode"] = []
        self.expanded = False

    def expand(self, moves: Iterable[Move]) -> None:
        """Materialise one child per move. A no-op on an expanded node."""
        if self.expanded:
            return
        self.children = [SearchNode(move) for move in moves]
        self.expanded = True

    def child_for(self, move: Move) -> Optional["SearchNode"]:
        for child in self.children:
            if child.move == move:
                return child
        return None

    def sort_children(self) -> None:
        """Order children by descending score; equal scores keep their order."""
        self.children.sort(key=lambda child: child.score, reverse=True)

    def count(self) -> int:
        """Number of nodes in this subtree, including this one."""
        total = 0
        stack = [self]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.children)
        return total

    def __repr__(self) -> str:
        return f"SearchNode(move={self.move}, score={self.score}, children={len(self.children)})"


class SearchTree:
    """
    The tree of explored positions rooted at the current game position.

    Owned by a game session and mutated only by the single search thread.
    """

    def __init__(self):
        self.root = SearchNode()

    def reroot(self, move: Move) -> bool:
        """
        Make the child reached by ``move`` the new root.

        Returns:
            bool: True if a cached subtree was kept, False if the move had
                not been explored and the tree starts over empty
        """
        child = self.root.child_for(move)
        if child is None:
            logger.debug(f"Re-root on unexplored move {move}, starting a fresh tree")
            self.root = SearchNode(move)
            return False

        logger.debug(f"Re-rooted on {move}, kept {child.count()} cached nodes")
        self.root = child
        return True

    def clear(self) -> None:
        self.root = SearchNode()

    def __len__(self) -> int:
        return self.root.count()
