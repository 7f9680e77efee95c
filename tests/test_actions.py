import random
import unittest

from helpers import make_config, make_state

from ludo_core.actions import ActionHandler
from ludo_core.types import Color, TokenState, TurnMove, TurnStep


class ScriptedRandom:
    """Random source that replays fixed die faces."""

    def __init__(self, faces):
        self.faces = list(faces)

    def randint(self, a, b):
        return self.faces.pop(0)


class RollDiceTests(unittest.TestCase):
    def roll(self, faces, dice_mode):
        handler = ActionHandler(rng=ScriptedRandom(faces))
        return handler.roll_dice(make_config(dice_mode=dice_mode))

    def test_single_six_grants_extra_turn(self):
        dice = self.roll([6], "single")
        self.assertEqual(dice.values, [6])
        self.assertEqual(dice.sum, 6)
        self.assertTrue(dice.has_valid_six)
        self.assertTrue(dice.can_move_again)

    def test_single_non_six(self):
        dice = self.roll([4], "single")
        self.assertFalse(dice.has_valid_six)
        self.assertFalse(dice.can_move_again)

    def test_one_six_in_double_mode_is_not_an_extra_turn(self):
        dice = self.roll([6, 3], "double")
        self.assertEqual(dice.values, [6, 3])
        self.assertEqual(dice.sum, 9)
        self.assertTrue(dice.has_valid_six)
        self.assertFalse(dice.can_move_again)

    def test_double_six_grants_extra_turn(self):
        dice = self.roll([6, 6], "double")
        self.assertTrue(dice.can_move_again)
        self.assertEqual(dice.sum, 12)

    def test_seeded_rolls_are_reproducible_and_in_range(self):
        config = make_config(dice_mode="double")
        first = ActionHandler(rng=random.Random(42))
        second = ActionHandler(rng=random.Random(42))
        for _ in range(50):
            a = first.roll_dice(config)
            b = second.roll_dice(config)
            self.assertEqual(a, b)
            self.assertEqual(len(a.values), 2)
            self.assertTrue(all(1 <= v <= 6 for v in a.values))


class ExecuteTurnTests(unittest.TestCase):
    def setUp(self):
        self.handler = ActionHandler()
        self.state = make_state(
            [
                ("p1", "red", [10, 20, -1, -1]),
                ("p2", "blue", [14, 23, -1, -1]),
            ],
            config=make_config(capture_mode="stay"),
        )

    def test_captures_are_accumulated(self):
        turn_move = TurnMove(
            player_id="p1",
            dice_values=[4, 3],
            moves=[TurnStep("p1-token-1", 4, 0), TurnStep("p1-token-2", 3, 1)],
        )
        self.assertTrue(self.handler.rules.validate_turn_move(self.state, turn_move))
        outcome = self.handler.execute_turn_move(self.state, turn_move)
        self.assertTrue(outcome.captured)
        self.assertEqual(outcome.captured_token_ids, ["p2-token-1", "p2-token-2"])
        self.assertEqual(outcome.moves_executed, 2)
        self.assertEqual(self.state.board[14], ["p1-token-1"])
        self.assertEqual(self.state.board[23], ["p1-token-2"])
        for token in self.state.players[1].tokens:
            self.assertEqual(token.state, TokenState.HOME)

    def test_empty_turn_executes_nothing(self):
        outcome = self.handler.execute_turn_move(
            self.state, TurnMove(player_id="p1", dice_values=[1, 2])
        )
        self.assertEqual(outcome.moves_executed, 0)
        self.assertFalse(outcome.captured)

    def test_valid_turn_moves_are_complete_turns(self):
        turns = self.handler.get_valid_turn_moves(self.state, "p1", [4, 3])
        self.assertTrue(turns)
        for candidate in turns:
            self.assertEqual(candidate.player_id, "p1")
            self.assertEqual(candidate.dice_values, [4, 3])
            self.assertEqual(len(candidate.moves), 2)
            self.assertTrue(self.handler.rules.validate_turn_move(self.state, candidate))

    def test_position_helpers(self):
        self.assertEqual(self.handler.starting_position(Color.GREEN), 26)
        self.assertEqual(self.handler.home_column_start(Color.YELLOW), 70)
        self.assertEqual(self.handler.calculate_new_position(10, 4, Color.BLUE), 59)


if __name__ == "__main__":
    unittest.main()
