"""
Ludo rules core.
Move legality, dice-usage enumeration, move execution and game lifecycle.
"""

from .actions import ActionHandler
from .board import Board
from .config import BoardConstants, GameConfig, config, layout
from .executor import MoveExecutor
from .game import GameStateManager
from .player import Player
from .rules import RulesEngine
from .state import GameState
from .token import Token
from .types import (
    CaptureMode,
    Color,
    DiceMode,
    DiceRoll,
    GameStatus,
    Move,
    MoveOutcome,
    PlayerStatus,
    TokenState,
    TurnMove,
    TurnOutcome,
    TurnStep,
)

__all__ = [
    "ActionHandler",
    "Board",
    "BoardConstants",
    "CaptureMode",
    "Color",
    "DiceMode",
    "DiceRoll",
    "GameConfig",
    "GameState",
    "GameStateManager",
    "GameStatus",
    "Move",
    "MoveExecutor",
    "MoveOutcome",
    "Player",
    "PlayerStatus",
    "RulesEngine",
    "Token",
    "TokenState",
    "TurnMove",
    "TurnOutcome",
    "TurnStep",
    "layout",
    "config",
]
