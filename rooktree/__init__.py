"""
RookTree Chess Engine

A two-player chess search engine: given a position and a side to move, it
chooses a move with bounded-depth negamax, alpha-beta pruning and a
persistent, move-ordered search tree.

## Architecture

1. **board**: Position representation and rules
   - 8x8 grid of occupants with mechanical make_move and scoped apply/undo
   - Pseudo-legal move generation per piece kind + check filtering
   - Attack oracle for check detection

2. **evaluation**: Static evaluation at the search horizon
   - Abstract Evaluator interface (swappable design)
   - MaterialEvaluator: material balance + central control
   - PieceSquareEvaluator: material + piece-square tables

3. **search**: Negamax with alpha-beta pruning
   - SearchTree memoizing move generation and move ordering
   - Iterative deepening entry point (choose_move)
   - Re-rooting on committed moves

4. **game**: GameSession owning the live position and the search tree

5. **notation**: UCI move text and FEN conversion (python-chess)

6. **utils**: Perft and reference move-generation checks

Not implemented: castling, en passant, under-promotion, repetition and
fifty-move draws, opening books, transposition tables, parallel search.

## Quick Start

```python
from rooktree import GameSession, SearchConfig

session = GameSession(SearchConfig(max_depth=4))
move = session.engine_move()
print(f"Engine played {move}")
```
"""

__version__ = "0.1.0"
__license__ = "MIT"

from rooktree.board import Move, PieceKind, Position, Side, new_position
from rooktree.evaluation import Evaluator, MaterialEvaluator, PieceSquareEvaluator
from rooktree.search import SearchConfig, SearchTree, choose_move, find_best_move
from rooktree.game import GameSession, GameStatus, IllegalMoveError
from rooktree.log import setup_logger

__all__ = [
    'Move',
    'PieceKind',
    'Position',
    'Side',
    'new_position',
    'Evaluator',
    'MaterialEvaluator',
    'PieceSquareEvaluator',
    'SearchConfig',
    'SearchTree',
    'choose_move',
    'find_best_move',
    'GameSession',
    'GameStatus',
    'IllegalMoveError',
    'setup_logger',
]
