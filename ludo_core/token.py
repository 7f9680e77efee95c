"""
Token representation for the Ludo rules core.
Each player owns 4 tokens that travel home -> ring -> home column -> finished.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import layout
from .types import TokenState


@dataclass(slots=True)
class Token:
    """
    A single token. Holds state only.

    Rule logic (destinations, captures, finishing) lives in the executor and
    rules engine; the token only knows how to report and reset itself.
    """

    id: str
    player_id: str
    position: int = layout.HOME_POSITION  # -1 home; 0..51 ring; 52..75 columns; 99 finished
    state: TokenState = TokenState.HOME

    def is_in_home(self) -> bool:
        return self.state == TokenState.HOME

    def is_in_play(self) -> bool:
        return self.state == TokenState.IN_PLAY

    def is_in_home_column(self) -> bool:
        return self.state == TokenState.HOME_COLUMN

    def is_finished(self) -> bool:
        return self.state == TokenState.FINISHED

    def send_home(self) -> None:
        self.position = layout.HOME_POSITION
        self.state = TokenState.HOME

    def finish(self) -> None:
        self.position = layout.FINISHED_POSITION
        self.state = TokenState.FINISHED

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "player_id": self.player_id,
            "position": self.position,
            "state": self.state.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Token:
        return cls(
            id=data["id"],
            player_id=data["player_id"],
            position=int(data["position"]),
            state=TokenState(data["state"]),
        )

    def __str__(self) -> str:
        return f"Token({self.id}: {self.state.value} at {self.position})"
