from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import Board
from .config import GameConfig
from .player import Player
from .token import Token
from .types import GameStatus


@dataclass(slots=True)
class GameState:
    id: str
    config: GameConfig
    players: List[Player]
    current_player_index: int = 0
    board: Board = field(default_factory=Board)
    status: GameStatus = GameStatus.WAITING
    winner: Optional[str] = None
    consecutive_sixes: int = 0

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    def get_player(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def find_token(self, token_id: str) -> Optional[Tuple[Player, Token]]:
        """Locate a token across all players, returning its owner as well."""
        for player in self.players:
            token = player.get_token(token_id)
            if token is not None:
                return player, token
        return None

    def clone(self) -> GameState:
        """Deep value copy; simulations on the clone never touch this state."""
        return copy.deepcopy(self)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "config": self.config.to_dict(),
            "players": [player.to_dict() for player in self.players],
            "current_player_index": self.current_player_index,
            "board": self.board.to_list(),
            "status": self.status.value,
            "winner": self.winner,
            "consecutive_sixes": self.consecutive_sixes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> GameState:
        return cls(
            id=data["id"],
            config=GameConfig(**data["config"]),
            players=[Player.from_dict(p) for p in data["players"]],
            current_player_index=int(data.get("current_player_index", 0)),
            board=Board.from_list(data["board"]),
            status=GameStatus(data.get("status", GameStatus.WAITING.value)),
            winner=data.get("winner"),
            consecutive_sixes=int(data.get("consecutive_sixes", 0)),
        )
