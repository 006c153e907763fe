# =========================================================
# --- core_state_invariants.py ---
# =========================================================

from typing import Any

import numpy as np

from .board import NUM_POINTS, NUM_OF_ALL_STONES, STONE, Color

# =========================================================

def assert_stone_invariant(state: Any, where: str = "") -> None:
    """
    Check that the total number of stones for each color is consistent.

    This includes stones on the points, on the bar, and borne off stones.

    Args:
        state: The BoardState object to check.
        where: Optional description of where the check is performed (for debugging).

    Raises:
        AssertionError: If the total stones for a color do not equal NUM_OF_ALL_STONES.
    """
    for color in Color:
        board = int(np.clip(state.points * STONE[color], 0, None).sum())
        bar = int(state.bar[color])
        home = int(state.home[color])
        total = board + bar + home

        if total != NUM_OF_ALL_STONES:
            raise AssertionError(
                f"[STONE LOST] {color.name}: {total}/{NUM_OF_ALL_STONES} at {where}\n"
                f"Board={board}, Bar={bar}, Home={home}"
            )


def assert_container_invariant(state: Any, where: str = "") -> None:
    """
    Check the shape of the containers and that no counter went negative.

    The signed encoding of `points` already rules out mixed points; a point
    array of the wrong length would let an index escape the 0-23 range.

    Raises:
        AssertionError: If a container has the wrong shape or a negative count.
    """
    if state.points.shape != (NUM_POINTS,):
        raise AssertionError(
            f"[BOARD SHAPE] point array has shape {state.points.shape} at {where}"
        )

    for name in ("bar", "home"):
        counts = getattr(state, name)
        if (counts < 0).any():
            raise AssertionError(
                f"[NEGATIVE COUNT] {name}={counts.tolist()} at {where}"
            )


def assert_state_invariant(state: Any, where: str = "") -> None:
    """
    Perform full invariant check for a board state.

    This includes:
    - Container shape and non-negative counters
    - Stone count consistency

    Args:
        state: The BoardState object to check.
        where: Optional description of where the check is performed (for debugging).

    Raises:
        AssertionError: If any invariant fails.
    """
    assert_container_invariant(state, where)
    assert_stone_invariant(state, where)
