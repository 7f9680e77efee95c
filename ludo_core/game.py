from __future__ import annotations

import time
import uuid
from typing import Iterable, Optional, Tuple

from loguru import logger

from .board import Board
from .config import GameConfig, layout
from .player import Player
from .positions import is_ring_position
from .rules import RulesEngine
from .state import GameState
from .types import Color, GameStatus, PlayerStatus


class GameStateManager:
    """Game lifecycle: creation, start, turn rotation and win detection."""

    def __init__(self, rules: Optional[RulesEngine] = None):
        self.rules = rules or RulesEngine()

    def create_game(
        self,
        player_configs: Iterable[Tuple[str, Color | str]],
        config: Optional[GameConfig] = None,
    ) -> GameState:
        """
        Create a waiting game with every token at home.

        :param player_configs: ``(player_id, color)`` pairs in turn order.
        :param config: Rule variant; defaults to a config built from the environment.
        :raises ValueError: on a player count outside 2..4 or repeated ids/colors.
        """
        seats = list(player_configs)
        if not layout.MIN_PLAYERS <= len(seats) <= layout.MAX_PLAYERS:
            raise ValueError(
                f"A game needs {layout.MIN_PLAYERS}-{layout.MAX_PLAYERS} players, got {len(seats)}"
            )

        players = [Player.create(player_id, color) for player_id, color in seats]
        if len({p.id for p in players}) != len(players):
            raise ValueError("Player ids must be unique")
        if len({p.color for p in players}) != len(players):
            raise ValueError("Player colors must be unique")

        state = GameState(
            id=f"game-{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}",
            config=config if config is not None else GameConfig(),
            players=players,
        )
        logger.info(
            f"Created {state.id} with players {[f'{p.id}:{p.color.value}' for p in players]}"
        )
        return state

    def start_game(self, state: GameState) -> None:
        state.status = GameStatus.IN_PROGRESS
        state.current_player.status = PlayerStatus.ACTIVE
        logger.info(f"{state.id} started, {state.current_player.id} to move")

    def next_turn(self, state: GameState, extra_turn: bool) -> None:
        """
        Hand the turn on, or keep it for an extra turn.

        At most ``max_consecutive_sixes - 1`` extra turns are granted in a row;
        the next one forces rotation.
        """
        if extra_turn and state.consecutive_sixes < state.config.max_consecutive_sixes - 1:
            state.consecutive_sixes += 1
            logger.debug(
                f"{state.current_player.id} keeps the turn ({state.consecutive_sixes} in a row)"
            )
            return

        state.consecutive_sixes = 0
        current = state.current_player
        if current.status == PlayerStatus.ACTIVE:
            current.status = PlayerStatus.WAITING

        state.current_player_index = (state.current_player_index + 1) % len(state.players)
        upcoming = state.current_player
        if upcoming.status != PlayerStatus.FINISHED:
            upcoming.status = PlayerStatus.ACTIVE

    def check_game_end(self, state: GameState) -> None:
        for player in state.players:
            if self.rules.has_player_won(player):
                state.status = GameStatus.FINISHED
                state.winner = player.id
                player.status = PlayerStatus.FINISHED
                logger.info(f"{state.id} finished, winner {player.id}")
                break

    def is_valid_game_state(self, state: GameState) -> bool:
        if not layout.MIN_PLAYERS <= len(state.players) <= layout.MAX_PLAYERS:
            return False
        if not 0 <= state.current_player_index < len(state.players):
            return False
        if len(state.board) != layout.MAIN_TRACK_SIZE:
            return False

        # every ring token is listed on its square, and nothing else is
        expected = Board()
        for player in state.players:
            if len(player.tokens) != layout.TOKENS_PER_PLAYER:
                return False
            for token in player.tokens:
                if token.is_in_play() and is_ring_position(token.position):
                    expected.add_token(token.id, token.position)
        return all(
            sorted(state.board[idx]) == sorted(expected[idx])
            for idx in range(layout.MAIN_TRACK_SIZE)
        )
