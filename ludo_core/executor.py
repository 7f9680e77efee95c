from __future__ import annotations

from loguru import logger

from .positions import (
    calculate_new_position,
    has_token_finished,
    is_home_column_position,
    is_ring_position,
    starting_position,
)
from .state import GameState
from .token import Token
from .types import CaptureMode, Move, MoveOutcome, TokenState


class MoveExecutor:
    """Applies single moves with all side effects.

    Shared by real execution (ActionHandler) and by speculative simulation
    (RulesEngine).
    """

    def execute_move(self, state: GameState, move: Move) -> MoveOutcome:
        player = state.get_player(move.player_id)
        if player is None:
            logger.warning(f"execute_move: unknown player '{move.player_id}'")
            return MoveOutcome(resolved=False)

        token = player.get_token(move.token_id)
        if token is None:
            logger.warning(
                f"execute_move: player '{player.id}' has no token '{move.token_id}'"
            )
            return MoveOutcome(resolved=False)

        old_position = token.position
        new_position = calculate_new_position(old_position, move.steps, player.color)

        outcome = MoveOutcome()
        if is_ring_position(new_position):
            victim = self._first_opponent_at(state, new_position, player.id)
            if victim is not None:
                state.board.remove_token(victim.id, new_position)
                victim.send_home()
                outcome.captured = True
                outcome.captured_token_id = victim.id
                logger.debug(f"{token.id} captured {victim.id} on square {new_position}")

        if is_ring_position(old_position):
            state.board.remove_token(token.id, old_position)

        if token.is_in_home():
            token.position = starting_position(player.color)
            token.state = TokenState.IN_PLAY
        else:
            token.position = new_position

        if outcome.captured and state.config.capture_mode == CaptureMode.FINISH:
            token.finish()
        elif has_token_finished(new_position, player.color):
            token.finish()
        elif is_home_column_position(new_position, player.color):
            token.state = TokenState.HOME_COLUMN
        else:
            token.state = TokenState.IN_PLAY
            state.board.add_token(token.id, new_position)

        return outcome

    @staticmethod
    def find_token(state: GameState, token_id: str) -> Token | None:
        found = state.find_token(token_id)
        return found[1] if found is not None else None

    @staticmethod
    def _first_opponent_at(state: GameState, position: int, player_id: str) -> Token | None:
        for occupant_id in state.board.get_tokens_at_position(position):
            found = state.find_token(occupant_id)
            if found is not None and found[0].id != player_id:
                return found[1]
        return None
