# =========================================================
# --- core_positions.py ---
# =========================================================

from .board import BOARD_START, BOARD_END, DIRECTION, Color

# =========================================================

"""
Conversion between absolute board indices and player-relative positions.

Normalized positions run from 0 (first home point) to 23 (furthest point,
inside the opponent's home) with the same meaning for both colors. For
WHITE both frames coincide; for BLACK the board is mirrored. All "how close
to home" reasoning is written once against the normalized frame.
"""


def normalize(position: int, color: Color) -> int:
    """
    Convert an absolute (denormalized) position into the normalized frame.

    Args:
        position: Absolute position (0 to 23; values off the board are
            mirrored the same way).
        color: Color whose frame is used.

    Returns:
        Normalized position (0 to 23 for both colors).
    """
    if color == Color.BLACK:
        return BOARD_END - position
    return position


def denormalize(position: int, color: Color) -> int:
    """
    Convert a normalized position back to the absolute board index.

    Args:
        position: Normalized position (0 to 23 for both colors).
        color: Color whose frame is used.

    Returns:
        Absolute position (0 to 23 for WHITE, 23 to 0 for BLACK).
    """
    if color == Color.BLACK:
        return BOARD_END - position
    return position


def advance(position: int, color: Color, steps: int) -> int:
    """
    Move `steps` toward the color's home in absolute coordinates.

    The result is not clamped; it may fall outside the board.
    """
    return position + steps * DIRECTION[color]


def entry_point(color: Color, steps: int) -> int:
    """Absolute point where a piece from the bar enters with `steps`."""
    return denormalize(steps - 1, color)


def is_on_board(position: int) -> bool:
    """Check if an absolute index addresses one of the 24 points."""
    return BOARD_START <= position <= BOARD_END
