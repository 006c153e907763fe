# =========================================================
# --- core_generator.py ---
# =========================================================

from typing import Any, List, Set, Tuple

from .board import Color
from .moves import SingleMove, TurnMove
from .state import BoardState

# =========================================================

class SingleMovesGenerator:
    """Generates legal single moves for a given die and state."""

    def generate_moves(self, variant: Any, state: BoardState, color: Color, die: int) -> List[SingleMove]:
        """
        Generate all legal single moves of `color` with a given die.

        Args:
            variant: Rule variant deciding legality.
            state: Current board state.
            color: Color to move.
            die: The die value to move.

        Returns:
            List of legal SingleMove instances.
        """
        single_moves: List[SingleMove] = []

        for start in variant.checks.start_points(state, color):
            smove = variant.resolve_move(state, start, color, die)
            if smove is not None:
                single_moves.append(smove)

        return single_moves


class TurnMoveGenerator:
    """Generates legal sequences of moves (TurnMove) for a given dice roll."""

    def any_move_left(self, variant: Any, state: BoardState, color: Color, dice: List[int]) -> bool:
        """
        Check if any legal move is possible with the remaining dice.

        Returns:
            True if at least one move is possible, False otherwise.
        """
        for die in set(dice):
            if SingleMovesGenerator().generate_moves(variant, state, color, die):
                return True
        return False

    def generate_all_turn_moves(self, variant: Any, state: BoardState, color: Color, dice: List[int]) -> List[TurnMove]:
        """
        Generate all sequences of moves for a dice roll.

        Moves are applied to `state` while searching and undone afterwards,
        so the state is unchanged on return.

        Args:
            variant: Rule variant deciding legality.
            state: Current board state.
            color: Color to move.
            dice: List of dice values (already expanded for doubles).

        Returns:
            List of TurnMove sequences.
        """
        turn_moves: List[TurnMove] = []
        visited_states: Set[Tuple[Any, Tuple[int, ...]]] = set()

        def dfs(dice_left: List[int], path: List[SingleMove]) -> None:
            if not self.any_move_left(variant, state, color, dice_left):
                if path:
                    turn_moves.append(TurnMove(single_moves=tuple(path)))
                return

            state_key = (state.key(), tuple(sorted(dice_left)))
            if state_key in visited_states:
                return
            visited_states.add(state_key)

            for idx, die in enumerate(dice_left):
                if die in dice_left[:idx]:
                    continue
                single_moves = SingleMovesGenerator().generate_moves(variant, state, color, die)
                remaining = dice_left[:idx] + dice_left[idx + 1:]
                for smove in single_moves:
                    state.apply_move(smove)
                    try:
                        dfs(remaining, path + [smove])
                    finally:
                        state.undo_move(smove)

        dfs(list(dice), [])
        return turn_moves

    def generate_legal_moves(self, variant: Any, state: BoardState, color: Color, dice: List[int]) -> List[TurnMove]:
        """
        Generate all legal turn moves after filtering according to rules.

        Returns:
            Filtered list of legal TurnMove sequences.
        """
        all_moves = self.generate_all_turn_moves(variant, state, color, dice)
        return variant.checks.filter_turn_moves(all_moves, dice)
