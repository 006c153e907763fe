"""Tests for single move and turn generation."""

from backgammon_rules.core.board import BAR, Color
from backgammon_rules.core.dice import DiceRoll
from backgammon_rules.core.generator import TurnMoveGenerator
from backgammon_rules.core.moves import MoveType, SingleMove, TurnMove
from backgammon_rules.core.rules import FilterTurnMovesRule

WHITE, BLACK = Color.WHITE, Color.BLACK


def test_single_moves_from_start_position(rule, state):
    moves = rule.generate_moves(state, WHITE, 1)
    assert sorted(m.from_point for m in moves) == [5, 7, 23]
    assert all(m.move_type == MoveType.NORMAL for m in moves)


def test_single_moves_from_bar(rule, make_state):
    board = make_state([(BAR, 1), (12, 14)], [(18, 15)])
    assert rule.generate_moves(board, WHITE, 3) == [SingleMove(WHITE, BAR, 2, MoveType.ENTER, 3)]


def test_turns_use_both_dice(rule, state):
    snapshot = state.copy()
    turns = rule.generate_turns(state, WHITE, DiceRoll.from_values(1, 2))
    assert turns
    for turn in turns:
        assert len(turn) == 2
        assert sorted(turn.dice) == [1, 2]
    assert state == snapshot


def test_doubles_turns_have_four_legs(rule, state):
    snapshot = state.copy()
    turns = rule.generate_turns(state, BLACK, DiceRoll.from_values(6, 6))
    assert turns
    assert all(len(turn) == 4 for turn in turns)
    assert state == snapshot


def test_turn_moves_replay_legally(rule, state):
    """Each generated turn can be replayed leg by leg through validation."""
    turns = rule.generate_turns(state, WHITE, DiceRoll.from_values(3, 5))
    for turn in turns[:20]:
        board = state.copy()
        for smove in turn:
            assert rule.play(board, smove.from_point, smove.color, smove.die) == smove


def test_no_turns_when_every_entry_is_blocked(rule, make_state):
    board = make_state(
        [(BAR, 1), (12, 14)],
        [(0, 2), (1, 2), (2, 2), (3, 2), (4, 2), (5, 2), (18, 3)],
    )
    for d1 in range(1, 7):
        roll = DiceRoll.from_values(d1, 7 - d1)
        assert rule.generate_turns(board, WHITE, roll) == []
    assert not TurnMoveGenerator().any_move_left(rule, board, WHITE, [1, 2, 3, 4, 5, 6])


def _turn(*dice):
    return TurnMove(tuple(SingleMove(WHITE, 12, 12 - d, MoveType.NORMAL, d) for d in dice))


def test_filter_keeps_longest_turns():
    turns = [_turn(2), _turn(5), _turn(2, 5)]
    assert FilterTurnMovesRule().check(turns, [2, 5]) == [_turn(2, 5)]


def test_filter_prefers_larger_die():
    turns = [_turn(2), _turn(5)]
    assert FilterTurnMovesRule().check(turns, [2, 5]) == [_turn(5)]


def test_filter_empty():
    assert FilterTurnMovesRule().check([], [1, 2]) == []
