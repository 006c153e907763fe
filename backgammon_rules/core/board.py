# =========================================================
# --- core_board.py ---
# =========================================================

from dataclasses import dataclass
from enum import IntEnum

# =========================================================

"""
Board-related constants and piece representation for the casual ruleset.

This module defines:
- Colors and pieces
- Board point range and sentinel positions for bar and bear-off
- Home quadrant size (in normalized coordinates)
- Stone signs and movement directions per color
- Default starting positions (absolute indices)
"""


class Color(IntEnum):
    """Closed two-valued tag distinguishing the players."""
    WHITE = 0
    BLACK = 1

    @property
    def opponent(self) -> "Color":
        """Return the other color."""
        return Color(1 - self)


@dataclass(frozen=True)
class Piece:
    """A single checker. Pieces of one color are interchangeable."""
    color: Color


#: Number of points and their absolute index range (0-23)
NUM_POINTS = 24
BOARD_START = 0
BOARD_END = NUM_POINTS - 1

#: Sentinel "position" of a piece waiting on the bar
BAR = -1
#: Sentinel "target" of a piece that is borne off
OFF = NUM_POINTS

#: Home quadrant in normalized coordinates: 0 (first home point) .. 5
HOME_SIZE = 6
HOME_LAST = HOME_SIZE - 1

#: Total number of stones per color
NUM_OF_ALL_STONES = 15

#: A point holding this many opposing stones is blocked
BLOCK_SIZE = 2

#: Stone representation on the board
#: Negative for WHITE, positive for BLACK
STONE = (-1, 1)

#: Movement directions in absolute coordinates
#: WHITE moves "down" (-1), BLACK moves "up" (+1)
DIRECTION = (-1, 1)

#: Default starting positions
#: Each entry: list of (point, number_of_stones) for that color
#: WHITE: 5 on 5, 3 on 7, 5 on 12, 2 on 23
#: BLACK: 5 on 18, 3 on 16, 5 on 11, 2 on 0
DEFAULT_POSITIONS = (
    ((5, 5), (7, 3), (12, 5), (23, 2)),
    ((18, 5), (16, 3), (11, 5), (0, 2)),
)
