# =========================================================
# --- core_rules.py ---
# =========================================================

import logging
from typing import List, Sequence, Union

from .board import BAR, BOARD_END, HOME_LAST, Color
from .moves import TurnMove
from .positions import advance, denormalize, is_on_board, normalize
from .state import BoardState

from ..utils.bitmask import indices_from_bits

# =========================================================

logger = logging.getLogger(__name__)


class Rule:
    """Base class for a single backgammon rule check."""

    def __init__(self, rule_id: str, description: str) -> None:
        """
        Initialize a rule.

        Args:
            rule_id: Unique identifier for the rule.
            description: Human-readable description.
        """
        self.id: str = rule_id
        self.description: str = description

    def check(self, *args, **kwargs) -> Union[bool, List[int], List[TurnMove]]:
        """
        Evaluate the rule.

        Raises:
            NotImplementedError: Must be implemented in subclasses.
        """
        raise NotImplementedError


# --- Specific Rules ---

class BarPriorityRule(Rule):
    """R1: Stones on the bar must re-enter before any other stone moves."""

    def __init__(self) -> None:
        super().__init__("R1", "Player must re-enter stones from the bar before moving any other stones.")

    def check(self, state: BoardState, color: Color, position: int) -> bool:
        """
        Check that `position` is an allowed start for `color`.

        Returns:
            True if the bar is occupied and the move starts from the bar,
            or the bar is empty and the move starts from a point.
        """
        if state.count_on_bar(color) > 0:
            return position == BAR
        return position != BAR

    def start_points(self, state: BoardState, color: Color) -> List[int]:
        """Return the positions a stone of `color` may currently start from."""
        if state.count_on_bar(color) > 0:
            return [BAR]
        return indices_from_bits(state.occupied_mask(color))


class AllHomeRule(Rule):
    """R2: Bearing off is possible only once every stone is in the home quadrant."""

    def __init__(self) -> None:
        super().__init__("R2", "Player may bear off only if all stones are in their home board.")

    def furthest_point(self, state: BoardState, color: Color) -> int:
        """
        Return the highest normalized position holding a stone of `color`,
        or -1 if no stone of that color stands on the board.
        """
        for norm in range(BOARD_END, -1, -1):
            if state.count_at(denormalize(norm, color), color) > 0:
                return norm
        return -1

    def check(self, state: BoardState, color: Color) -> bool:
        """
        Check if all stones of `color` standing on points are inside the home quadrant.

        Stones on the bar are not looked at; see `RuleChecks.bearing_off_allowed`.

        Returns:
            True if the furthest stone is on normalized point 5 or closer.
        """
        return self.furthest_point(state, color) <= HOME_LAST


class BearOffTargetRule(Rule):
    """R3: Checks if a move bears off, including 'overshoot' logic."""

    def __init__(self) -> None:
        super().__init__("R3", "Checks if a move can bear off including overshoot logic.")

    def check(self, state: BoardState, color: Color, start: int, die: int) -> bool:
        """
        Determine if the stone on `start` bears off with `die`.

        A roll that brings the stone exactly to normalized point 0 bears it
        off. A larger roll bears it off only when it is the furthest stone
        left: every stone behind it would need a larger exact roll.

        Args:
            state: Current board state.
            color: Color making the move.
            start: Absolute starting point.
            die: Die used for the move.

        Returns:
            True if the move bears off, False otherwise.
        """
        target = normalize(advance(start, color, die), color)

        if target == 0:
            return True

        if target < 0:
            return AllHomeRule().furthest_point(state, color) <= normalize(start, color)

        return False


class SingleHitRule(Rule):
    """R4: Target with exactly one opponent stone may be hit."""

    def __init__(self) -> None:
        super().__init__("R4", "Target point with exactly one opponent stone may be hit.")

    def check(self, state: BoardState, color: Color, point: int) -> bool:
        return state.count_at(point, color.opponent) == 1


class OpenPointRule(Rule):
    """R5: Target must be on the board and not held by two or more opponent stones."""

    def __init__(self) -> None:
        super().__init__("R5", "Target point must be inside the board and not blocked.")

    def check(self, state: BoardState, color: Color, point: int) -> bool:
        """
        Check whether a stone of `color` may land on `point`.

        Returns:
            True if 0 <= point <= 23 and the opponent holds fewer than two stones there.
        """
        if not is_on_board(point):
            return False
        return not state.is_blocked(point, color)


class DiceHelperRule(Rule):
    """R6: Process dice (expand doubles)."""

    def __init__(self) -> None:
        super().__init__("R6", "Process dice, expand doubles to four moves.")

    def check(self, dice: Sequence[int]) -> List[int]:
        """
        Expand doubles to four dice values.

        Args:
            dice: Current dice rolled.

        Returns:
            List of dice values (expanded if double).
        """
        if len(dice) == 2 and dice[0] == dice[1]:
            return [dice[0]] * 4
        return list(dice)


class FilterTurnMovesRule(Rule):
    """R7: Filter turn moves to enforce maximum moves and highest die usage."""

    def __init__(self) -> None:
        super().__init__("R7", "Filter turn moves to enforce maximum moves and highest die usage.")

    def check(self, turn_moves: List[TurnMove], dice: Sequence[int]) -> List[TurnMove]:
        """
        Filter turn moves according to game rules.

        Args:
            turn_moves: List of possible TurnMove sequences.
            dice: Current dice values.

        Returns:
            Filtered list of TurnMoves.
        """
        if not turn_moves:
            return []

        max_len = max(len(tmove) for tmove in turn_moves)
        turn_moves = [tmove for tmove in turn_moves if len(tmove) == max_len]

        if max_len == 1:
            big = max(smove.die for tmove in turn_moves for smove in tmove)
            turn_moves = [tmove for tmove in turn_moves if tmove.single_moves[0].die == big]

        return turn_moves


class RuleChecks:
    """Aggregates all rule checks and provides a convenient interface for variants."""

    def __init__(self) -> None:
        """Initialize all rule instances."""
        self.R1 = BarPriorityRule()
        self.R2 = AllHomeRule()
        self.R3 = BearOffTargetRule()
        self.R4 = SingleHitRule()
        self.R5 = OpenPointRule()
        self.R6 = DiceHelperRule()
        self.R7 = FilterTurnMovesRule()

        self.rules = [self.R1, self.R2, self.R3, self.R4, self.R5, self.R6, self.R7]

    def start_allowed(self, state: BoardState, color: Color, position: int) -> bool:
        """Return True if a move may start from `position` (bar priority)."""
        return self.R1.check(state, color, position)

    def start_points(self, state: BoardState, color: Color) -> List[int]:
        """Return all positions a move may start from."""
        return self.R1.start_points(state, color)

    def bearing_off_allowed(self, state: BoardState, color: Color) -> bool:
        """Return True if `color` may bear off: bar empty and every stone home."""
        return state.count_on_bar(color) == 0 and self.R2.check(state, color)

    def bear_off_target(self, state: BoardState, color: Color, start: int, die: int) -> bool:
        """Return True if the stone on `start` bears off with `die`."""
        return self.R3.check(state, color, start, die)

    def hittable_target(self, state: BoardState, color: Color, point: int) -> bool:
        """Return True if the target point may be hit."""
        return self.R4.check(state, color, point)

    def open_target(self, state: BoardState, color: Color, point: int) -> bool:
        """Return True if a stone may land on `point`."""
        return self.R5.check(state, color, point)

    def process_dice(self, dice: Sequence[int]) -> List[int]:
        """Process dice roll and expand doubles."""
        return self.R6.check(dice)

    def filter_turn_moves(self, turn_moves: List[TurnMove], dice: Sequence[int]) -> List[TurnMove]:
        """Filter generated turn moves according to rules."""
        return self.R7.check(turn_moves, dice)

    # Debug / Logging
    def debug_rule(self, rule: Rule, *args, **kwargs):
        """Evaluate a rule and log the outcome."""
        result = rule.check(*args, **kwargs)
        logger.debug("Rule %s: %s -> %s", rule.id, rule.description, result)
        return result
