"""Tests for the individual rule checks."""

from backgammon_rules.core.board import BAR, OFF, Color
from backgammon_rules.core.rules import (
    AllHomeRule,
    BarPriorityRule,
    BearOffTargetRule,
    OpenPointRule,
    RuleChecks,
    SingleHitRule,
)

WHITE, BLACK = Color.WHITE, Color.BLACK


def test_bar_priority_start_points(state, make_state):
    assert BarPriorityRule().start_points(state, WHITE) == [5, 7, 12, 23]
    assert BarPriorityRule().start_points(state, BLACK) == [0, 11, 16, 18]

    board = make_state([(BAR, 2), (12, 13)], [(18, 15)])
    assert BarPriorityRule().start_points(board, WHITE) == [BAR]
    assert BarPriorityRule().check(board, WHITE, BAR)
    assert not BarPriorityRule().check(board, WHITE, 12)


def test_furthest_point(state, make_state):
    assert AllHomeRule().furthest_point(state, WHITE) == 23
    assert AllHomeRule().furthest_point(state, BLACK) == 23
    assert AllHomeRule().furthest_point(make_state([(OFF, 15)], [(18, 15)]), WHITE) == -1
    assert AllHomeRule().furthest_point(make_state([(5, 15)], [(20, 15)]), BLACK) == 3


def test_bear_off_target(make_state):
    board = make_state([(1, 1), (4, 1), (OFF, 13)], [(18, 15)])
    rule = BearOffTargetRule()
    assert rule.check(board, WHITE, 4, 4)       # exact
    assert rule.check(board, WHITE, 4, 6)       # furthest stone
    assert not rule.check(board, WHITE, 1, 6)   # stone behind on 4
    assert not rule.check(board, WHITE, 4, 2)   # stays on the board


def test_single_hit_and_open_point(make_state):
    board = make_state([(12, 15)], [(10, 1), (9, 2), (18, 12)])
    assert SingleHitRule().check(board, WHITE, 10)
    assert not SingleHitRule().check(board, WHITE, 9)
    assert OpenPointRule().check(board, WHITE, 10)
    assert not OpenPointRule().check(board, WHITE, 9)


def test_open_point_bounds(state):
    """Targets off either edge are never open."""
    rule = OpenPointRule()
    assert not rule.check(state, WHITE, -1)
    assert not rule.check(state, BLACK, 24)
    assert rule.check(state, WHITE, 1)


def test_bearing_off_allowed(make_state):
    checks = RuleChecks()
    assert checks.bearing_off_allowed(make_state([(2, 15)], [(18, 15)]), WHITE)
    assert not checks.bearing_off_allowed(make_state([(2, 14), (BAR, 1)], [(18, 15)]), WHITE)


def test_debug_rule_returns_result(state):
    checks = RuleChecks()
    assert checks.debug_rule(checks.R4, state, WHITE, 10) is False
