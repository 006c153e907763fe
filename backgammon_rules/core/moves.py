# =========================================================
# --- core_moves.py ---
# =========================================================

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

from .board import BAR, OFF, Color

# =========================================================

class MoveType(Enum):
    """
    Enumeration of possible move types.

    Attributes:
        NORMAL: Standard move from one point to another.
        HIT: Move that captures a single opposing stone.
        ENTER: Move that brings a stone back from the bar.
        ENTER_HIT: Bar entry that captures a single opposing stone.
        BEAR_OFF: Move that takes a stone off the board.
    """
    NORMAL = 1
    HIT = 2
    ENTER = 3
    ENTER_HIT = 4
    BEAR_OFF = 5


@dataclass(frozen=True)
class SingleMove:
    """
    A single resolved move-leg.

    Attributes:
        color (Color): The color making the move.
        from_point (int): Absolute start point, or BAR for bar entries.
        to_point (int): Absolute target point, or OFF for bear offs.
        move_type (MoveType): Type of the move.
        die (int): Die value used for the move.
    """
    color: Color
    from_point: int
    to_point: int
    move_type: MoveType
    die: int

    def __str__(self) -> str:
        """Return a human-readable string representation of the move."""
        start = "bar" if self.from_point == BAR else f"{self.from_point}"
        target = "off" if self.to_point == OFF else f"{self.to_point}"
        return start.rjust(3) + " > " + target.rjust(3) + f" ({self.die}, {self.move_type.name})"

    def __repr__(self) -> str:
        return str(self)


@dataclass(frozen=True)
class TurnMove:
    """
    A full turn consisting of one or more single moves.

    Attributes:
        single_moves (Tuple[SingleMove, ...]): Ordered moves executed during the turn.
    """
    single_moves: Tuple[SingleMove, ...]

    def __iter__(self) -> Iterator[SingleMove]:
        return iter(self.single_moves)

    def __len__(self) -> int:
        return len(self.single_moves)

    @property
    def dice(self) -> List[int]:
        """Dice consumed by this turn, in play order."""
        return [smove.die for smove in self.single_moves]

    def __str__(self) -> str:
        """Moves of the turn separated by ' | '."""
        return " | ".join(str(smove) for smove in self.single_moves)

    def __repr__(self) -> str:
        return str(self)
