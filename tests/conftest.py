"""Shared fixtures."""

import pytest

from rooktree.board.position import new_position
from rooktree.evaluation import MaterialEvaluator


@pytest.fixture
def start_position():
    """Position in the standard starting arrangement."""
    return new_position()


@pytest.fixture
def evaluator():
    """Create evaluator for testing."""
    return MaterialEvaluator()
