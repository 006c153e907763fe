# =========================================================
# --- variants_bg_casual.py ---
# =========================================================

import logging
from typing import Optional

from ..core.board import BAR, DEFAULT_POSITIONS, OFF, Color
from ..core.moves import MoveType, SingleMove
from ..core.positions import advance, entry_point, normalize
from ..core.state import BoardState
from ..core.variant import RuleVariant

# =========================================================

logger = logging.getLogger(__name__)


class BgCasualRule(RuleVariant):
    """
    Most popular variant played in Bulgaria, called casual.

    The only specific when rolling dice is that doubles result in four
    moves instead of two, which the base class already does.
    """

    name = "bg_casual"
    title = "General"
    description = "Most popular variant of backgammon played in Bulgaria."
    country = "Bulgaria"
    country_code = "bg"

    def reset_state(self, state: BoardState) -> None:
        """
        Move stones to the initial positions of both colors.

        Position: |12 13 14 15 16 17| |18 19 20 21 22 23|
                  |5w          3b   | |5b             2w|
                  |                 | |                 |
                  |5b          3w   | |5w             2b|
        Position: |11 10 09 08 07 06| |05 04 03 02 01 00|

        WHITE moves toward 0, BLACK toward 23.
        """
        state.clear()
        for color in Color:
            for point, count in DEFAULT_POSITIONS[color]:
                state.place(point, color, count)
        logger.info("Board reset to the %s starting position", self.name)

    def _reject(self, reason: str, position: int, color: Color, steps: int) -> None:
        logger.debug("Rejected %s move from %s by %d: %s", color.name, position, steps, reason)
        return None

    def resolve_move(self, state: BoardState, position: int, color: Color, steps: int) -> Optional[SingleMove]:
        """
        Decide whether a stone of `color` may move from `position` by `steps`.

        The checks run in this order:
        1. Stones on the bar: only a bar entry is allowed, on the entry
           point for the roll, if that point is not blocked.
        2. All stones home: a stone reaching normalized point 0 is borne
           off; a larger roll bears off the furthest stone only. Shorter
           moves fall through to the normal checks.
        3. Normal move: the start point must hold a stone of `color`, the
           target must lie on the board and not be blocked.

        The state is never modified.

        Args:
            state: Board state.
            position: Absolute start point, or BAR.
            color: Color making the move.
            steps: Number of steps toward the first home point.

        Returns:
            The resolved move, or None if the move is illegal.

        Raises:
            ValueError: If the request itself is malformed.
        """
        if not super().validate_move(state, position, color, steps):
            return None

        if not self.checks.start_allowed(state, color, position):
            if position == BAR:
                return self._reject("no stone on the bar", position, color, steps)
            return self._reject("stones on the bar must enter first", position, color, steps)

        if position == BAR:
            target = entry_point(color, steps)
            if not self.checks.open_target(state, color, target):
                return self._reject(f"entry point {target} is blocked", position, color, steps)
            hit = self.checks.hittable_target(state, color, target)
            return SingleMove(color, BAR, target, MoveType.ENTER_HIT if hit else MoveType.ENTER, steps)

        if state.count_at(position, color) == 0:
            return self._reject(f"no {color.name} stone on point {position}", position, color, steps)

        target = advance(position, color, steps)

        if normalize(target, color) <= 0 and self.checks.bearing_off_allowed(state, color):
            if self.checks.bear_off_target(state, color, position, steps):
                return SingleMove(color, position, OFF, MoveType.BEAR_OFF, steps)
            return self._reject("a stone further from home must use this roll", position, color, steps)

        if not self.checks.open_target(state, color, target):
            return self._reject(f"target {target} is outside the board or blocked", position, color, steps)

        hit = self.checks.hittable_target(state, color, target)
        return SingleMove(color, position, target, MoveType.HIT if hit else MoveType.NORMAL, steps)

    def validate_move(self, state: BoardState, position: int, color: Color, steps: int) -> bool:
        """
        Validate a stone move according to the casual rules.

        Returns:
            True if the move is legal and may be applied.
        """
        return self.resolve_move(state, position, color, steps) is not None

    def apply_move(self, state: BoardState, move: SingleMove) -> None:
        """
        Commit an already resolved move.

        Takes the stone from its point (or the bar), sends a hit stone to
        its owner's bar and places the stone on the target or bears it off.
        Legality is not re-derived here.
        """
        state.apply_move(move)
        logger.debug("Applied %s move %s", move.color.name, move)
