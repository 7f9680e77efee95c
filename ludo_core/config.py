import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .types import CaptureMode, Color, DiceMode

load_dotenv()


def _env_flag(name: str, default: int) -> bool:
    return bool(int(os.getenv(name, default)))


@dataclass(slots=True)
class BoardConstants:
    # --- Geometry ---
    MAIN_TRACK_SIZE: int = 52
    HOME_COLUMN_SIZE: int = 6
    TOKENS_PER_PLAYER: int = 4
    MIN_PLAYERS: int = 2
    MAX_PLAYERS: int = 4

    # --- Sentinels ---
    HOME_POSITION: int = -1
    FINISHED_POSITION: int = 99

    # --- Dice ---
    DICE_MIN: int = 1
    DICE_MAX: int = 6
    EXIT_HOME_ROLL: int = 6

    # Absolute ring offsets, keyed by color
    START_SQUARES: dict[Color, int] = field(
        default_factory=lambda: {
            Color.RED: 0,
            Color.BLUE: 13,
            Color.GREEN: 26,
            Color.YELLOW: 39,
        }
    )
    # Last ring square before the color turns into its home column
    HOME_ENTRIES: dict[Color, int] = field(
        default_factory=lambda: {
            Color.RED: 51,
            Color.BLUE: 12,
            Color.GREEN: 25,
            Color.YELLOW: 38,
        }
    )
    HOME_COLUMN_STARTS: dict[Color, int] = field(
        default_factory=lambda: {
            Color.RED: 52,
            Color.BLUE: 58,
            Color.GREEN: 64,
            Color.YELLOW: 70,
        }
    )
    # Star squares are safe for every color
    STAR_SQUARES: tuple[int, ...] = (8, 21, 34, 47)


@dataclass(slots=True)
class GameConfig:
    dice_mode: DiceMode | str = os.getenv("LUDO_DICE_MODE", "single")
    capture_mode: CaptureMode | str = os.getenv("LUDO_CAPTURE_MODE", "stay")
    max_consecutive_sixes: int = int(os.getenv("LUDO_MAX_CONSECUTIVE_SIXES", 3))
    safe_starting_squares: bool = _env_flag("LUDO_SAFE_STARTING_SQUARES", 1)
    allow_token_stacking: bool = _env_flag("LUDO_ALLOW_TOKEN_STACKING", 0)
    enforce_full_dice_usage: bool = _env_flag("LUDO_ENFORCE_FULL_DICE_USAGE", 1)

    def __post_init__(self):
        self.dice_mode = DiceMode(self.dice_mode)
        self.capture_mode = CaptureMode(self.capture_mode)

        if self.max_consecutive_sixes < 1:
            raise ValueError("max_consecutive_sixes must be at least 1")

    @property
    def dice_count(self) -> int:
        return 2 if self.dice_mode == DiceMode.DOUBLE else 1

    def to_dict(self) -> dict:
        return {
            "dice_mode": self.dice_mode.value,
            "capture_mode": self.capture_mode.value,
            "max_consecutive_sixes": self.max_consecutive_sixes,
            "safe_starting_squares": self.safe_starting_squares,
            "allow_token_stacking": self.allow_token_stacking,
            "enforce_full_dice_usage": self.enforce_full_dice_usage,
        }


layout = BoardConstants()
config = GameConfig()
