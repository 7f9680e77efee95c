from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Sequence

from loguru import logger

from .config import GameConfig, layout
from .executor import MoveExecutor
from .positions import calculate_new_position, home_column_start, starting_position
from .rules import RulesEngine
from .state import GameState
from .types import Color, DiceMode, DiceRoll, Move, MoveOutcome, TurnMove, TurnOutcome


@dataclass(slots=True)
class ActionHandler:
    rng: random.Random = field(default_factory=random.Random)
    executor: MoveExecutor = field(default_factory=MoveExecutor)
    rules: RulesEngine = field(init=False)

    def __post_init__(self) -> None:
        self.rules = RulesEngine(executor=self.executor)

    # --- Dice ---
    def roll_dice(self, config: GameConfig) -> DiceRoll:
        values = [
            self.rng.randint(layout.DICE_MIN, layout.DICE_MAX)
            for _ in range(config.dice_count)
        ]
        if config.dice_mode == DiceMode.SINGLE:
            # single six grants another roll
            can_move_again = values[0] == layout.EXIT_HOME_ROLL
        else:
            # only a double six grants another roll
            can_move_again = all(v == layout.EXIT_HOME_ROLL for v in values)

        return DiceRoll(
            values=values,
            sum=sum(values),
            can_move_again=can_move_again,
            has_valid_six=layout.EXIT_HOME_ROLL in values,
        )

    # --- Execution ---
    def execute_move(self, state: GameState, move: Move) -> MoveOutcome:
        return self.executor.execute_move(state, move)

    def execute_turn_move(self, state: GameState, turn_move: TurnMove) -> TurnOutcome:
        """
        Apply every move of a turn in order.

        No legality check happens here; call ``RulesEngine.validate_turn_move``
        first.
        """
        outcome = TurnOutcome()
        for step in turn_move.moves:
            result = self.execute_move(
                state,
                Move(player_id=turn_move.player_id, token_id=step.token_id, steps=step.steps),
            )
            outcome.moves_executed += 1
            if result.captured:
                outcome.captured = True
                if result.captured_token_id is not None:
                    outcome.captured_token_ids.append(result.captured_token_id)

        logger.debug(
            f"{turn_move.player_id} executed {outcome.moves_executed} move(s), "
            f"captured={outcome.captured_token_ids}"
        )
        return outcome

    def get_valid_turn_moves(
        self, state: GameState, player_id: str, dice_values: Sequence[int]
    ) -> List[TurnMove]:
        """Legal whole turns for the roll, ready to be shown to a player."""
        turn_moves: List[TurnMove] = []
        for combination in self.rules.get_all_valid_move_combinations(
            state, player_id, dice_values
        ):
            turn_move = TurnMove(
                player_id=player_id, dice_values=list(dice_values), moves=combination
            )
            if self.rules.validate_turn_move(state, turn_move):
                turn_moves.append(turn_move)
        return turn_moves

    # --- Position helpers for callers ---
    @staticmethod
    def starting_position(color: Color) -> int:
        return starting_position(color)

    @staticmethod
    def home_column_start(color: Color) -> int:
        return home_column_start(color)

    @staticmethod
    def calculate_new_position(position: int, steps: int, color: Color) -> int:
        return calculate_new_position(position, steps, color)
