"""
Rules engine: move legality, safe squares, enumeration of legal dice usage
and whole-turn validation.

Every speculative check runs on a clone of the state and applies moves with
the same MoveExecutor used for real play.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from loguru import logger

from .config import GameConfig, layout
from .executor import MoveExecutor
from .player import Player
from .positions import (
    calculate_new_position,
    finish_threshold,
    is_ring_position,
    starting_position,
)
from .state import GameState
from .types import Color, DiceRoll, Move, TurnMove, TurnStep


class RulesEngine:
    def __init__(self, executor: Optional[MoveExecutor] = None):
        self.executor = executor or MoveExecutor()

    # --- Single moves ---
    def is_valid_move(self, state: GameState, move: Move, dice_roll: DiceRoll) -> bool:
        """
        Check a single move against the current state.

        ``move.steps`` must match one individual die of ``dice_roll``; the sum
        of two dice is never a legal step count on its own.
        """
        player = state.get_player(move.player_id)
        if player is None:
            return False

        token = player.get_token(move.token_id)
        if token is None:
            return False

        if move.steps not in dice_roll.values:
            return False

        if token.is_finished():
            return False

        if token.is_in_home():
            if not dice_roll.has_valid_six or move.steps != layout.EXIT_HOME_ROLL:
                return False
            start = starting_position(player.color)
            if not state.config.allow_token_stacking and self._has_own_token_at(
                state, start, player.id
            ):
                return False
            return True

        new_position = calculate_new_position(token.position, move.steps, player.color)

        if token.is_in_home_column() and new_position > finish_threshold(player.color):
            return False

        if is_ring_position(new_position):
            for occupant_id in state.board[new_position]:
                found = state.find_token(occupant_id)
                if found is None:
                    continue
                owner, _ = found
                if owner.id == player.id:
                    if not state.config.allow_token_stacking:
                        return False
                elif self.is_safe_square(new_position, owner.color, state.config):
                    return False

        return True

    @staticmethod
    def is_safe_square(position: int, color: Color, config: GameConfig) -> bool:
        """Whether a token of ``color`` sitting on ``position`` is protected from capture."""
        if position in layout.STAR_SQUARES:
            return True
        return config.safe_starting_squares and position == starting_position(color)

    def can_capture_at(self, state: GameState, position: int, player_id: str) -> bool:
        if not is_ring_position(position):
            return False
        for occupant_id in state.board[position]:
            found = state.find_token(occupant_id)
            if found is None:
                continue
            owner, _ = found
            if owner.id != player_id:
                return not self.is_safe_square(position, owner.color, state.config)
        return False

    def get_available_moves(
        self, state: GameState, player_id: str, dice_roll: DiceRoll
    ) -> List[Move]:
        """All single moves the player could make with any one die of the roll."""
        player = state.get_player(player_id)
        if player is None:
            return []

        moves: List[Move] = []
        for value in dict.fromkeys(dice_roll.values):
            for token in player.tokens:
                move = Move(player_id=player_id, token_id=token.id, steps=value)
                if self.is_valid_move(state, move, dice_roll):
                    moves.append(move)
        return moves

    @staticmethod
    def has_player_won(player: Player) -> bool:
        return player.has_won()

    # --- Combinations ---
    def get_all_valid_move_combinations(
        self,
        state: GameState,
        player_id: str,
        dice_values: Sequence[int],
    ) -> List[List[TurnStep]]:
        """
        Enumerate every legal way to spend the dice, die by die from left to right.

        A die that no token can use at its point in the sequence is skipped.
        Only non-empty sequences are returned.
        """
        if state.get_player(player_id) is None:
            return []
        results: List[List[TurnStep]] = []
        self._search(state, player_id, list(dice_values), 0, [], results)
        return results

    def max_dice_usable(
        self, state: GameState, player_id: str, dice_values: Sequence[int]
    ) -> int:
        """Largest number of dice any legal left-to-right sequence uses."""
        combinations = self.get_all_valid_move_combinations(state, player_id, dice_values)
        return max((len(c) for c in combinations), default=0)

    def _search(
        self,
        state: GameState,
        player_id: str,
        dice_values: Sequence[int],
        die_index: int,
        sequence: List[TurnStep],
        results: List[List[TurnStep]],
    ) -> None:
        if die_index == len(dice_values):
            if sequence:
                results.append(sequence)
            return

        value = dice_values[die_index]
        roll = DiceRoll.for_die(value)
        player = state.get_player(player_id)

        usable = False
        for token in player.tokens:
            move = Move(player_id=player_id, token_id=token.id, steps=value)
            if not self.is_valid_move(state, move, roll):
                continue
            usable = True
            branch = state.clone()
            self.executor.execute_move(branch, move)
            step = TurnStep(token_id=token.id, steps=value, die_index=die_index)
            self._search(
                branch, player_id, dice_values, die_index + 1, sequence + [step], results
            )

        if not usable:
            self._search(state, player_id, dice_values, die_index + 1, sequence, results)

    def _any_die_usable(
        self, state: GameState, player: Player, dice_values: Sequence[int]
    ) -> bool:
        for value in dice_values:
            roll = DiceRoll.for_die(value)
            for token in player.tokens:
                if self.is_valid_move(
                    state, Move(player_id=player.id, token_id=token.id, steps=value), roll
                ):
                    return True
        return False

    # --- Whole turns ---
    def validate_turn_move(self, state: GameState, turn_move: TurnMove) -> bool:
        """
        Authoritative check of a complete turn.

        The turn is replayed on a scratch clone, move by move, so later moves
        see the effects of earlier ones. With full dice usage enforced, a turn
        that leaves a die unused is refused whenever some legal sequence
        spends more dice.
        """
        player = state.get_player(turn_move.player_id)
        if player is None:
            logger.debug(f"Turn rejected: unknown player '{turn_move.player_id}'")
            return False

        dice_values = list(turn_move.dice_values)
        enforce = state.config.enforce_full_dice_usage

        if not turn_move.moves:
            if enforce and self._any_die_usable(state, player, dice_values):
                logger.debug(f"Turn rejected: {player.id} passed with usable dice {dice_values}")
                return False
            return True

        used = turn_move.used_die_indices()
        if enforce and len(used) < len(dice_values):
            if self.max_dice_usable(state, player.id, dice_values) > len(used):
                logger.debug(
                    f"Turn rejected: {player.id} used {len(used)} of {dice_values} "
                    "while a fuller sequence exists"
                )
                return False

        scratch = state.clone()
        seen: set[int] = set()
        for step in turn_move.moves:
            if not 0 <= step.die_index < len(dice_values) or step.die_index in seen:
                logger.debug(f"Turn rejected: bad die index {step.die_index}")
                return False
            if step.steps != dice_values[step.die_index]:
                logger.debug(
                    f"Turn rejected: {step.steps} steps claimed for die "
                    f"{step.die_index} showing {dice_values[step.die_index]}"
                )
                return False
            seen.add(step.die_index)

            move = Move(player_id=player.id, token_id=step.token_id, steps=step.steps)
            if not self.is_valid_move(scratch, move, DiceRoll.for_die(step.steps)):
                logger.debug(f"Turn rejected: illegal move {step}")
                return False
            self.executor.execute_move(scratch, move)

        return True

    @staticmethod
    def _has_own_token_at(state: GameState, position: int, player_id: str) -> bool:
        for occupant_id in state.board[position]:
            found = state.find_token(occupant_id)
            if found is not None and found[0].id == player_id:
                return True
        return False
