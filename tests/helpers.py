from __future__ import annotations

from typing import Sequence

from ludo_core.config import GameConfig
from ludo_core.player import Player
from ludo_core.state import GameState
from ludo_core.types import GameStatus, PlayerStatus, TokenState


def make_config(**overrides) -> GameConfig:
    values = dict(
        dice_mode="double",
        capture_mode="stay",
        max_consecutive_sixes=3,
        safe_starting_squares=True,
        allow_token_stacking=False,
        enforce_full_dice_usage=True,
    )
    values.update(overrides)
    return GameConfig(**values)


def place(state: GameState, token_id: str, position: int) -> None:
    """Put a token at ``position`` and keep the board in sync."""
    _, token = state.find_token(token_id)
    if 0 <= token.position < 52:
        state.board.remove_token(token.id, token.position)
    token.position = position
    if position == -1:
        token.state = TokenState.HOME
    elif position == 99:
        token.state = TokenState.FINISHED
    elif position >= 52:
        token.state = TokenState.HOME_COLUMN
    else:
        token.state = TokenState.IN_PLAY
        state.board.add_token(token.id, position)


def make_state(
    seats: Sequence[tuple[str, str, Sequence[int]]],
    config: GameConfig | None = None,
) -> GameState:
    """
    Build an in-progress game from ``(player_id, color, positions)`` seats.

    Token ids are ``<player_id>-token-<n>``; positions list the four tokens in order.
    """
    players = [Player.create(player_id, color) for player_id, color, _ in seats]
    state = GameState(
        id="test-game",
        config=config if config is not None else make_config(),
        players=players,
        status=GameStatus.IN_PROGRESS,
    )
    players[0].status = PlayerStatus.ACTIVE
    for player, (_, _, positions) in zip(players, seats):
        for token, position in zip(player.tokens, positions):
            place(state, token.id, position)
    return state
