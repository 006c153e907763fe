# =========================================================
# --- core_state.py ---
# =========================================================

import copy
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from .board import BAR, OFF, BLOCK_SIZE, NUM_POINTS, NUM_OF_ALL_STONES, STONE, Color, Piece
from .moves import MoveType, SingleMove
from .positions import is_on_board
from .state_invariants import assert_state_invariant

from ..utils.bitmask import bits_from_indices

# =========================================================

class BoardMovesMixin:
    """
    Mixin class providing all stone-moving operations:
    - moving, hitting, entering and bearing off stones
    - applying and undoing single moves

    None of these operations check legality; they only keep the
    containers consistent.
    """

    def move_stone(self, start: int, target: int, color: Color) -> None:
        """Move a stone from start to target for the given color."""
        self.push(target, self.pop(start, color))
        self._assert("move_stone")

    def undo_stone_move(self, start: int, target: int, color: Color) -> None:
        """Undo a previously executed stone move."""
        self.move_stone(target, start, color)

    def hit_stone(self, start: int, target: int, color: Color) -> None:
        """Send the single opposing stone at target to its bar, then move there."""
        self.push_bar(self.pop(target, color.opponent))
        self.move_stone(start, target, color)

    def undo_hit_stone(self, start: int, target: int, color: Color) -> None:
        """Undo a previously executed hit move."""
        self.push(start, self.pop(target, color))
        self.push(target, self.pop_bar(color.opponent))
        self._assert("undo_hit_stone")

    def enter_stone(self, target: int, color: Color, hit: bool = False) -> None:
        """Bring a stone from the bar onto target, hitting a single opposing stone if asked."""
        if hit:
            self.push_bar(self.pop(target, color.opponent))
        self.push(target, self.pop_bar(color))
        self._assert("enter_stone")

    def undo_enter_stone(self, target: int, color: Color, hit: bool = False) -> None:
        """Undo a previously executed bar entry."""
        self.push_bar(self.pop(target, color))
        if hit:
            self.push(target, self.pop_bar(color.opponent))
        self._assert("undo_enter_stone")

    def bear_off(self, point: int, color: Color) -> None:
        """Bear off a stone from the board for the given color."""
        self.pop(point, color)
        self.home[color] += 1
        self._assert("bear_off")

    def undo_bear_off(self, point: int, color: Color) -> None:
        """Undo a previously executed bear-off move."""
        if self.home[color] == 0:
            raise ValueError(f"No borne off stone of {color.name} to restore")
        self.home[color] -= 1
        self.push(point, Piece(color))
        self._assert("undo_bear_off")

    def apply_move(self, move: SingleMove) -> bool:
        """
        Apply a single resolved move to the state.

        Args:
            move (SingleMove): The move to apply.

        Returns:
            bool: True if move applied successfully, False if move is None.
        """
        if not move:
            return False

        if move.move_type == MoveType.NORMAL:
            self.move_stone(move.from_point, move.to_point, move.color)
        elif move.move_type == MoveType.HIT:
            self.hit_stone(move.from_point, move.to_point, move.color)
        elif move.move_type == MoveType.ENTER:
            self.enter_stone(move.to_point, move.color)
        elif move.move_type == MoveType.ENTER_HIT:
            self.enter_stone(move.to_point, move.color, hit=True)
        elif move.move_type == MoveType.BEAR_OFF:
            self.bear_off(move.from_point, move.color)

        return True

    def undo_move(self, move: SingleMove) -> None:
        """
        Undo a previously applied move.

        Args:
            move (SingleMove): The move to undo.
        """
        assert move is not None

        if move.move_type == MoveType.NORMAL:
            self.undo_stone_move(move.from_point, move.to_point, move.color)
        elif move.move_type == MoveType.HIT:
            self.undo_hit_stone(move.from_point, move.to_point, move.color)
        elif move.move_type == MoveType.ENTER:
            self.undo_enter_stone(move.to_point, move.color)
        elif move.move_type == MoveType.ENTER_HIT:
            self.undo_enter_stone(move.to_point, move.color, hit=True)
        elif move.move_type == MoveType.BEAR_OFF:
            self.undo_bear_off(move.from_point, move.color)


# =========================================================

class BoardState(BoardMovesMixin):
    """
    Complete mutable board of one game.

    Attributes:
        points (np.ndarray): 24 signed counts, negative for WHITE, positive for BLACK.
        bar (np.ndarray): Stones waiting on the bar, indexed by color.
        home (np.ndarray): Stones borne off, indexed by color.
        debug (bool): Enable state invariant assertions after every mutation.
    """

    def __init__(self, debug: bool = False):
        self.debug: bool = debug

        self.points: np.ndarray = np.zeros(NUM_POINTS, dtype=np.int8)
        self.bar: np.ndarray = np.zeros(2, dtype=np.int8)
        self.home: np.ndarray = np.zeros(2, dtype=np.int8)

    # ---------- Setup / Copy ----------
    def copy(self) -> "BoardState":
        """Return a deep copy of the current board."""
        new_state = BoardState(debug=self.debug)
        new_state.points = copy.deepcopy(self.points)
        new_state.bar = copy.deepcopy(self.bar)
        new_state.home = copy.deepcopy(self.home)
        return new_state

    def clear(self) -> None:
        """Empty all points, both bars and both home counters."""
        self.points[:] = 0
        self.bar[:] = 0
        self.home[:] = 0

    def place(self, point: int, color: Color, count: int) -> None:
        """Put `count` new stones of `color` on a point (setup only)."""
        for _ in range(count):
            self.push(point, Piece(color))

    # ---------- Queries ----------
    def _check_point(self, point: int) -> None:
        if not is_on_board(point):
            raise IndexError(f"Point {point} is outside the board")

    def count_at(self, point: int, color: Color) -> int:
        """
        Return the number of stones of `color` on a point.

        Raises:
            IndexError: If the point is outside 0-23.
        """
        self._check_point(point)
        val = int(self.points[point]) * STONE[color]
        return val if val > 0 else 0

    def color_at(self, point: int) -> Optional[Color]:
        """Return the color occupying a point, or None if it is empty."""
        self._check_point(point)
        val = int(self.points[point])
        if val == 0:
            return None
        return Color.WHITE if val * STONE[Color.WHITE] > 0 else Color.BLACK

    def is_blocked(self, point: int, color: Color) -> bool:
        """True if the opponent of `color` holds the point with two or more stones."""
        return self.count_at(point, color.opponent) >= BLOCK_SIZE

    def count_on_bar(self, color: Color) -> int:
        return int(self.bar[color])

    def count_home(self, color: Color) -> int:
        return int(self.home[color])

    def count_on_board(self, color: Color) -> int:
        """Return the number of stones of `color` standing on points."""
        return int(np.clip(self.points * STONE[color], 0, None).sum())

    def occupied_mask(self, color: Color) -> int:
        """Bitmask of the points holding at least one stone of `color`."""
        return bits_from_indices(np.flatnonzero(self.points * STONE[color] > 0))

    # ---------- Stack primitives ----------
    def peek(self, point: int) -> Optional[Piece]:
        """Return the top stone of a point without removing it."""
        color = self.color_at(point)
        return Piece(color) if color is not None else None

    def push(self, point: int, piece: Piece) -> None:
        """
        Put a stone on a point.

        Raises:
            IndexError: If the point is outside 0-23.
            ValueError: If the point holds stones of the other color.
        """
        if self.count_at(point, piece.color.opponent) > 0:
            raise ValueError(f"Cannot put {piece.color.name} stone on point {point} held by {piece.color.opponent.name}")
        self.points[point] += STONE[piece.color]

    def pop(self, point: int, color: Optional[Color] = None) -> Piece:
        """
        Remove the top stone of a point.

        Args:
            point: Absolute point index.
            color: If given, the color the stone must have.

        Raises:
            IndexError: If the point is outside 0-23.
            ValueError: If the point is empty or holds the other color.
        """
        owner = self.color_at(point)
        if owner is None or (color is not None and owner != color):
            raise ValueError(f"No matching stone to take from point {point}")
        self.points[point] -= STONE[owner]
        return Piece(owner)

    def push_bar(self, piece: Piece) -> None:
        self.bar[piece.color] += 1

    def pop_bar(self, color: Color) -> Piece:
        """
        Remove one stone of `color` from the bar.

        Raises:
            ValueError: If the bar of that color is empty.
        """
        if self.bar[color] == 0:
            raise ValueError(f"No {color.name} stone on the bar")
        self.bar[color] -= 1
        return Piece(color)

    # ---------- Serialization ----------
    @classmethod
    def from_positions(cls, positions: Sequence[Sequence[Tuple[int, int]]], debug: bool = False) -> "BoardState":
        """
        Build a board from a position list per color.

        Each entry is a (point, count) pair; the point may be BAR for stones
        on the bar or OFF for stones already borne off.

        Raises:
            ValueError: If a color does not add up to 15 stones.
        """
        state = cls(debug=debug)
        for color in Color:
            for point, count in positions[color]:
                if point == BAR:
                    state.bar[color] += count
                elif point == OFF:
                    state.home[color] += count
                else:
                    state.place(point, color, count)
            total = state.count_on_board(color) + state.count_on_bar(color) + state.count_home(color)
            if total != NUM_OF_ALL_STONES:
                raise ValueError(f"Invalid number of stones for {color.name}: {total}")
        state._assert("from_positions")
        return state

    def to_positions(self) -> List[List[Tuple[int, int]]]:
        """Serialize the board into a position list per color."""
        positions: List[List[Tuple[int, int]]] = [[], []]
        for point, stones in enumerate(self.points):
            if stones < 0:
                positions[Color.WHITE].append((point, -int(stones)))
            elif stones > 0:
                positions[Color.BLACK].append((point, int(stones)))
        for color in Color:
            if self.bar[color] > 0:
                positions[color].append((BAR, int(self.bar[color])))
            if self.home[color] > 0:
                positions[color].append((OFF, int(self.home[color])))
        return positions

    def key(self) -> Tuple[bytes, Tuple[int, ...], Tuple[int, ...]]:
        """Hashable snapshot of the board contents."""
        return self.points.tobytes(), tuple(int(v) for v in self.bar), tuple(int(v) for v in self.home)

    def __eq__(self, other: Any) -> bool:
        """Check equality with another BoardState."""
        if not isinstance(other, BoardState):
            return NotImplemented
        return (
            np.array_equal(self.points, other.points) and
            np.array_equal(self.bar, other.bar) and
            np.array_equal(self.home, other.home)
        )

    __hash__ = None

    def __str__(self) -> str:
        white, black = self.to_positions()

        def fmt(entries):
            return " ".join(f"{'bar' if p == BAR else 'off' if p == OFF else p}x{n}" for p, n in entries)

        return f"WHITE: {fmt(white)} | BLACK: {fmt(black)}"

    # ---------- Debug / Assertions ----------
    def _assert(self, where: str = "") -> None:
        """Assert state invariants if debug mode is active."""
        if self.debug:
            assert_state_invariant(self, where)
