from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Color(Enum):
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"


class TokenState(Enum):
    HOME = "home"
    IN_PLAY = "in-play"
    HOME_COLUMN = "home-column"
    FINISHED = "finished"


class GameStatus(Enum):
    WAITING = "waiting"
    IN_PROGRESS = "in-progress"
    FINISHED = "finished"


class PlayerStatus(Enum):
    WAITING = "waiting"
    ACTIVE = "active"
    FINISHED = "finished"


class DiceMode(Enum):
    SINGLE = "single"
    DOUBLE = "double"


class CaptureMode(Enum):
    STAY = "stay"  # classic: captor stays where it landed
    FINISH = "finish"  # captor goes straight to finished


@dataclass(slots=True)
class DiceRoll:
    values: List[int]
    sum: int
    can_move_again: bool
    has_valid_six: bool

    @classmethod
    def for_die(cls, value: int) -> DiceRoll:
        """Roll view of a single die, used when checking one move at a time."""
        return cls(
            values=[value],
            sum=value,
            can_move_again=False,
            has_valid_six=value == 6,
        )


@dataclass(slots=True)
class Move:
    player_id: str
    token_id: str
    steps: int


@dataclass(slots=True)
class TurnStep:
    token_id: str
    steps: int
    die_index: int

    def to_dict(self) -> dict:
        return {
            "token_id": self.token_id,
            "steps": self.steps,
            "die_index": self.die_index,
        }


@dataclass(slots=True)
class TurnMove:
    player_id: str
    dice_values: List[int]
    moves: List[TurnStep] = field(default_factory=list)

    def used_die_indices(self) -> set[int]:
        return {step.die_index for step in self.moves}

    def to_dict(self) -> dict:
        return {
            "player_id": self.player_id,
            "dice_values": list(self.dice_values),
            "moves": [step.to_dict() for step in self.moves],
        }

    @classmethod
    def from_dict(cls, data: dict) -> TurnMove:
        return cls(
            player_id=data["player_id"],
            dice_values=list(data["dice_values"]),
            moves=[TurnStep(**step) for step in data.get("moves", [])],
        )


@dataclass(slots=True)
class MoveOutcome:
    captured: bool = False
    captured_token_id: Optional[str] = None
    resolved: bool = True


@dataclass(slots=True)
class TurnOutcome:
    captured: bool = False
    captured_token_ids: List[str] = field(default_factory=list)
    moves_executed: int = 0
