import unittest

from helpers import make_config, make_state

from ludo_core.board import Board
from ludo_core.state import GameState
from ludo_core.types import GameStatus, TokenState, TurnMove, TurnStep


class TestGameStateShapes(unittest.TestCase):
    def setUp(self):
        self.state = make_state(
            [
                ("p1", "red", [10, 55, 99, -1]),
                ("p2", "blue", [14, 23, -1, -1]),
            ],
            config=make_config(capture_mode="finish"),
        )

    def test_round_trip(self):
        data = self.state.to_dict()
        self.assertEqual(data["status"], "in-progress")
        self.assertEqual(data["config"]["capture_mode"], "finish")
        self.assertEqual(data["board"][10], ["p1-token-1"])
        self.assertEqual(data["players"][0]["tokens"][1]["state"], "home-column")

        restored = GameState.from_dict(data)
        self.assertEqual(restored, self.state)
        self.assertEqual(restored.to_dict(), data)

    def test_clone_is_independent(self):
        clone = self.state.clone()
        _, token = clone.find_token("p1-token-1")
        clone.board.remove_token(token.id, token.position)
        token.position = 12
        clone.board.add_token(token.id, 12)
        clone.status = GameStatus.FINISHED

        _, untouched = self.state.find_token("p1-token-1")
        self.assertEqual(untouched.position, 10)
        self.assertEqual(self.state.board[10], ["p1-token-1"])
        self.assertEqual(self.state.board[12], [])
        self.assertEqual(self.state.status, GameStatus.IN_PROGRESS)

    def test_find_token(self):
        owner, token = self.state.find_token("p2-token-2")
        self.assertEqual(owner.id, "p2")
        self.assertEqual(token.position, 23)
        self.assertIsNone(self.state.find_token("p3-token-1"))

    def test_player_helpers(self):
        p1 = self.state.get_player("p1")
        self.assertEqual(p1.get_finished_tokens_count(), 1)
        self.assertFalse(p1.has_won())
        self.assertEqual(p1.get_token("p1-token-3").state, TokenState.FINISHED)
        self.assertIsNone(p1.get_token("p2-token-1"))


class TestBoard(unittest.TestCase):
    def test_occupancy(self):
        board = Board()
        board.add_token("a", 5)
        board.add_token("b", 5)
        board.remove_token("c", 5)
        self.assertEqual(board.get_tokens_at_position(5), ["a", "b"])
        self.assertEqual(board.get_tokens_at_position(60), [])
        self.assertEqual(board.occupied_positions(), [5])

    def test_from_list_requires_full_ring(self):
        with self.assertRaises(ValueError):
            Board.from_list([[] for _ in range(10)])


class TestTurnMoveShape(unittest.TestCase):
    def test_from_dict(self):
        turn_move = TurnMove.from_dict(
            {
                "player_id": "p1",
                "dice_values": [6, 2],
                "moves": [
                    {"token_id": "p1-token-1", "steps": 6, "die_index": 0},
                    {"token_id": "p1-token-1", "steps": 2, "die_index": 1},
                ],
            }
        )
        self.assertEqual(turn_move.moves[1], TurnStep("p1-token-1", 2, 1))
        self.assertEqual(turn_move.used_die_indices(), {0, 1})
        self.assertEqual(TurnMove.from_dict(turn_move.to_dict()), turn_move)

    def test_missing_moves_means_pass(self):
        turn_move = TurnMove.from_dict({"player_id": "p1", "dice_values": [3]})
        self.assertEqual(turn_move.moves, [])


if __name__ == "__main__":
    unittest.main()
