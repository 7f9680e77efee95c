"""
Player representation for the Ludo rules core.
Each player has a color and controls 4 tokens.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .config import layout
from .token import Token
from .types import Color, PlayerStatus


@dataclass(slots=True)
class Player:
    id: str
    color: Color
    tokens: List[Token] = field(default_factory=list)
    status: PlayerStatus = PlayerStatus.WAITING

    @classmethod
    def create(cls, player_id: str, color: Color | str) -> Player:
        """
        Build a player with a fresh set of tokens, all at home.

        Token ids follow ``<player_id>-token-<n>`` with n in 1..4.
        """
        tokens = [
            Token(id=f"{player_id}-token-{i + 1}", player_id=player_id)
            for i in range(layout.TOKENS_PER_PLAYER)
        ]
        return cls(id=player_id, color=Color(color), tokens=tokens)

    def get_token(self, token_id: str) -> Optional[Token]:
        for token in self.tokens:
            if token.id == token_id:
                return token
        return None

    def get_finished_tokens_count(self) -> int:
        return sum(1 for token in self.tokens if token.is_finished())

    def has_won(self) -> bool:
        """All 4 tokens have finished."""
        return (
            len(self.tokens) == layout.TOKENS_PER_PLAYER
            and self.get_finished_tokens_count() == layout.TOKENS_PER_PLAYER
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "color": self.color.value,
            "status": self.status.value,
            "tokens": [token.to_dict() for token in self.tokens],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Player:
        return cls(
            id=data["id"],
            color=Color(data["color"]),
            tokens=[Token.from_dict(t) for t in data["tokens"]],
            status=PlayerStatus(data.get("status", PlayerStatus.WAITING.value)),
        )

    def __str__(self) -> str:
        return f"Player({self.id}, {self.color.value}, tokens: {[str(t) for t in self.tokens]})"
