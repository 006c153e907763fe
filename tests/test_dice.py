"""Tests for dice rolls and doubles expansion."""

import random

import pytest

from backgammon_rules.core.dice import DiceRoll
from backgammon_rules.core.rules import DiceHelperRule
from backgammon_rules.variants.bg_casual import BgCasualRule


class FixedDice:
    """Stand-in RNG returning preset faces."""

    def __init__(self, faces):
        self.faces = list(faces)

    def randint(self, a, b):
        return self.faces.pop(0)


def test_doubles_give_four_legs():
    roll = DiceRoll.from_values(3, 3)
    assert roll.is_double
    assert roll.moves == (3, 3, 3, 3)
    assert len(roll) == 4


def test_non_doubles_give_two_legs():
    roll = DiceRoll.from_values(2, 5)
    assert not roll.is_double
    assert roll.moves == (2, 5)
    assert list(roll) == [2, 5]
    assert str(roll) == "2-5"


@pytest.mark.parametrize("faces", [(0, 3), (3, 7), (-1, -1)])
def test_invalid_faces_raise(faces):
    with pytest.raises(ValueError):
        DiceRoll.from_values(*faces)


def test_roll_dice_uses_injected_rng():
    """The variant draws both faces from its own generator."""
    rule = BgCasualRule(rng=FixedDice([4, 4]))
    roll = rule.roll_dice()
    assert roll.values == (4, 4)
    assert roll.moves == (4, 4, 4, 4)

    rule = BgCasualRule(rng=FixedDice([6, 1]))
    assert rule.roll_dice().moves == (6, 1)


def test_roll_dice_leg_count():
    """Rolled faces stay in 1-6; doubles always give 4 legs, others 2."""
    rule = BgCasualRule(rng=random.Random(99))
    seen_double = False
    for _ in range(500):
        roll = rule.roll_dice()
        d1, d2 = roll.values
        assert 1 <= d1 <= 6 and 1 <= d2 <= 6
        if d1 == d2:
            seen_double = True
            assert len(roll.moves) == 4
        else:
            assert len(roll.moves) == 2
    assert seen_double


def test_seeded_rolls_are_reproducible():
    first = BgCasualRule(rng=random.Random(5))
    second = BgCasualRule(rng=random.Random(5))
    assert [first.roll_dice() for _ in range(20)] == [second.roll_dice() for _ in range(20)]


def test_dice_helper_rule():
    helper = DiceHelperRule()
    assert helper.check([6, 6]) == [6, 6, 6, 6]
    assert helper.check([1, 2]) == [1, 2]


class ReversedDiceRule(DiceHelperRule):
    def check(self, dice):
        return list(reversed(super().check(dice)))


def test_roll_dice_expands_through_variant_checks():
    """The legs of a roll come from the variant's own dice helper."""
    rule = BgCasualRule(rng=FixedDice([2, 5]))
    rule.checks.R6 = ReversedDiceRule()
    roll = rule.roll_dice()
    assert roll.values == (2, 5)
    assert roll.moves == (5, 2)


def test_from_values_keeps_given_moves():
    roll = DiceRoll.from_values(2, 2, [2, 2, 2, 2])
    assert roll.moves == (2, 2, 2, 2)
    assert roll.is_double
