# =========================================================
# --- core_variant.py ---
# =========================================================

import logging
import random
from abc import ABC, abstractmethod
from typing import List, Optional

from .board import BAR, Color
from .dice import DIE_FACES, DiceRoll
from .generator import SingleMovesGenerator, TurnMoveGenerator
from .moves import SingleMove, TurnMove
from .positions import is_on_board
from .rules import RuleChecks
from .state import BoardState

# =========================================================

logger = logging.getLogger(__name__)


class RuleVariant(ABC):
    """
    Base contract of a backgammon rule variant.

    A variant supplies the starting layout and the move legality state
    machine; dice interpretation and the shared board queries live here.

    Attributes:
        name (str): Stable identifier used by the registry.
        title (str): Short title describing rule specifics.
        description (str): Full description of the rule.
        country (str): Country (or pipe separated countries) where it is played.
        country_code (str): Two letter ISO code(s), same order as `country`.
        rng (random.Random): Random number generator for dice rolls.
        checks (RuleChecks): Individual rule checks shared by variants.
    """

    name: str = ""
    title: str = ""
    description: str = ""
    country: str = ""
    country_code: str = ""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng: random.Random = rng or random.Random()
        self.checks: RuleChecks = RuleChecks()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"

    # ---------- Dice ----------
    def roll_dice(self) -> DiceRoll:
        """
        Roll two dice and list the move-legs to play.

        Doubles result in four legs instead of two; the expansion goes
        through the variant's dice helper check.
        """
        d1, d2 = self.rng.randint(1, 6), self.rng.randint(1, 6)
        return DiceRoll.from_values(d1, d2, self.checks.process_dice((d1, d2)))

    # ---------- Setup ----------
    @abstractmethod
    def reset_state(self, state: BoardState) -> None:
        """Reset state to the initial position of this variant."""

    # ---------- Validation ----------
    def validate_move(self, state: BoardState, position: int, color: Color, steps: int) -> bool:
        """
        Check that a move request is structurally sound.

        Variants call this first and layer their own legality checks on top;
        here every well-formed request is provisionally acceptable.

        Args:
            state: Board state.
            position: Absolute start point, or BAR.
            color: Color making the move.
            steps: Number of steps toward the first home point (1-6).

        Returns:
            True for any well-formed request.

        Raises:
            ValueError: If the request is malformed.
        """
        if state is None:
            raise ValueError("A board state is required")
        if not isinstance(color, Color):
            raise ValueError(f"Unknown color: {color!r}")
        if not isinstance(steps, int) or isinstance(steps, bool) or steps not in DIE_FACES:
            raise ValueError(f"Invalid number of steps: {steps!r}")
        if position != BAR and not is_on_board(position):
            raise ValueError(f"Position {position!r} is neither the bar nor a point")
        return True

    @abstractmethod
    def resolve_move(self, state: BoardState, position: int, color: Color, steps: int) -> Optional[SingleMove]:
        """
        Work out the move a request stands for without touching the state.

        Returns:
            The resolved SingleMove, or None if the move is illegal.
        """

    @abstractmethod
    def apply_move(self, state: BoardState, move: SingleMove) -> None:
        """Commit an already resolved move to the state."""

    def move_by(self, state: BoardState, position: int, color: Color, steps: int) -> bool:
        """
        Validate a move and, if legal, apply it.

        Returns:
            True if a stone was moved, entered or borne off.
        """
        return self.play(state, position, color, steps) is not None

    def play(self, state: BoardState, position: int, color: Color, steps: int) -> Optional[SingleMove]:
        """Same as `move_by` but return the applied move (None if rejected)."""
        move = self.resolve_move(state, position, color, steps)
        if move is None:
            return None
        self.apply_move(state, move)
        return move

    # ---------- Queries ----------
    def have_pieces_on_bar(self, state: BoardState, color: Color) -> bool:
        """Check if there are any stones of `color` on the bar."""
        return state.count_on_bar(color) > 0

    def all_pieces_are_home(self, state: BoardState, color: Color) -> bool:
        """Check if every stone of `color` left on the points is in the home quadrant."""
        return self.checks.R2.check(state, color)

    # ---------- Generation ----------
    def generate_moves(self, state: BoardState, color: Color, die: int) -> List[SingleMove]:
        """Return every legal single move of `color` for one die."""
        return SingleMovesGenerator().generate_moves(self, state, color, die)

    def generate_turns(self, state: BoardState, color: Color, dice: DiceRoll) -> List[TurnMove]:
        """Return the legal turn moves of `color` for a roll."""
        return TurnMoveGenerator().generate_legal_moves(self, state, color, list(dice.moves))
