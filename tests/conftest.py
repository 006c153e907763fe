"""Shared fixtures for the rules tests."""

import random

import pytest

from backgammon_rules.core.state import BoardState
from backgammon_rules.variants.bg_casual import BgCasualRule


@pytest.fixture
def rule():
    """Casual rule variant with a seeded dice generator."""
    return BgCasualRule(rng=random.Random(1234))


@pytest.fixture
def state(rule):
    """Board in the starting position, with invariant checks enabled."""
    board = BoardState(debug=True)
    rule.reset_state(board)
    return board


@pytest.fixture
def make_state():
    """Build a debug board from (point, count) lists for WHITE and BLACK."""
    def _make(white, black):
        return BoardState.from_positions([white, black], debug=True)
    return _make
