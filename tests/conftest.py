"""
Shared fixtures for the test suite.
"""
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure project root is importable
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def oracle():
    """A learnability oracle that denies everything unless told otherwise."""
    mock = MagicMock()
    mock.can_know_move.return_value = False
    return mock


@pytest.fixture
def learnset_oracle():
    """An empty table-backed oracle."""
    from legality.learnsets import LearnsetOracle
    return LearnsetOracle()
