# =========================================================
# --- core_dice.py ---
# =========================================================

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .rules import DiceHelperRule

# =========================================================

DIE_FACES = (1, 2, 3, 4, 5, 6)


@dataclass(frozen=True)
class DiceRoll:
    """
    Result of one throw of two dice.

    Attributes:
        values (Tuple[int, int]): The two face values (1-6 each).
        moves (Tuple[int, ...]): Move-legs to play this turn, in order.
            Four legs for doubles, otherwise one per die.
    """
    values: Tuple[int, int]
    moves: Tuple[int, ...]

    @classmethod
    def from_values(cls, d1: int, d2: int, moves: Optional[Sequence[int]] = None) -> "DiceRoll":
        """
        Build a roll from two face values.

        `moves` are the already expanded legs; when omitted doubles are
        expanded here.

        Raises:
            ValueError: If a face value is outside 1-6.
        """
        for die in (d1, d2):
            if die not in DIE_FACES:
                raise ValueError(f"Invalid die value: {die}")
        if moves is None:
            moves = DiceHelperRule().check([d1, d2])
        return cls((d1, d2), tuple(moves))

    @property
    def is_double(self) -> bool:
        return self.values[0] == self.values[1]

    def __iter__(self):
        return iter(self.moves)

    def __len__(self) -> int:
        return len(self.moves)

    def __str__(self) -> str:
        return f"{self.values[0]}-{self.values[1]}"
