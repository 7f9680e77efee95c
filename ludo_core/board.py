"""
Board representation for the Ludo rules core.
Tracks which token ids occupy each of the 52 ring squares.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .config import layout as constants


@dataclass(slots=True)
class Board:
    """Owns ring occupancy only (no rule logic).

    Each square is an ordered list of token ids; stacking lets several tokens
    share a square, and capture order follows list order.
    """

    squares: List[List[str]] = field(
        default_factory=lambda: [[] for _ in range(constants.MAIN_TRACK_SIZE)]
    )

    def __len__(self) -> int:
        return len(self.squares)

    def __getitem__(self, position: int) -> List[str]:
        return self.squares[position]

    def add_token(self, token_id: str, position: int) -> None:
        self.squares[position].append(token_id)

    def remove_token(self, token_id: str, position: int) -> None:
        square = self.squares[position]
        if token_id in square:
            square.remove(token_id)

    def get_tokens_at_position(self, position: int) -> List[str]:
        if not 0 <= position < len(self.squares):
            return []
        return self.squares[position]

    def occupied_positions(self) -> List[int]:
        return [idx for idx, square in enumerate(self.squares) if square]

    def to_list(self) -> List[List[str]]:
        return [list(square) for square in self.squares]

    @classmethod
    def from_list(cls, squares: List[List[str]]) -> Board:
        if len(squares) != constants.MAIN_TRACK_SIZE:
            raise ValueError(
                f"Board must have {constants.MAIN_TRACK_SIZE} squares, got {len(squares)}"
            )
        return cls(squares=[list(square or []) for square in squares])

    def __str__(self) -> str:
        result = "Board State:\n"
        for position in self.occupied_positions():
            result += f"Position {position}: {self.squares[position]}\n"
        return result
