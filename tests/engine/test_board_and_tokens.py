import unittest

import numpy as np

from ludo_engine.board import (
    absolute_position,
    occupancy,
    position_for_progress,
    progress,
    tokens_at,
)
from ludo_engine.constants import BoardConstants, GameConstants
from ludo_engine.errors import InvalidArgumentError
from ludo_engine.player import Player
from ludo_engine.state import GameState
from ludo_engine.token import Token
from ludo_engine.types import Color, GamePhase, TokenStatus


class TestBoardConstants(unittest.TestCase):
    def test_start_positions_evenly_spaced(self):
        self.assertEqual(BoardConstants.START_POSITIONS[Color.RED], 0)
        self.assertEqual(BoardConstants.START_POSITIONS[Color.BLUE], 13)
        self.assertEqual(BoardConstants.START_POSITIONS[Color.GREEN], 26)
        self.assertEqual(BoardConstants.START_POSITIONS[Color.YELLOW], 39)

    def test_safe_squares(self):
        self.assertEqual(
            BoardConstants.SAFE_SQUARES, {0, 8, 13, 21, 26, 34, 39, 47}
        )
        for pos in range(GameConstants.TRACK_SIZE):
            self.assertEqual(
                BoardConstants.is_safe_position(pos),
                pos in {0, 8, 13, 21, 26, 34, 39, 47},
            )
        self.assertFalse(BoardConstants.is_safe_position(52))

    def test_clockwise_color_order(self):
        self.assertEqual(
            list(Color), [Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW]
        )


class TestTokens(unittest.TestCase):
    def test_home_token_uses_sentinel(self):
        token = Token(token_id=0, owner_id="p1", position=12)
        self.assertTrue(token.is_in_home())
        self.assertEqual(token.position, GameConstants.HOME_POSITION)

    def test_finished_token_sits_on_finish(self):
        token = Token(token_id=1, owner_id="p1", status=TokenStatus.FINISHED)
        self.assertEqual(token.position, GameConstants.FINISH_POSITION)

    def test_active_position_out_of_range(self):
        with self.assertRaises(InvalidArgumentError):
            Token(token_id=0, owner_id="p1", position=57, status=TokenStatus.ACTIVE)
        with self.assertRaises(ValueError):
            Token(token_id=0, owner_id="p1", position=-1, status=TokenStatus.ACTIVE)

    def test_invalid_token_id(self):
        with self.assertRaises(InvalidArgumentError):
            Token(token_id=4, owner_id="p1")

    def test_track_and_home_column_predicates(self):
        on_track = Token(0, "p1", 51, TokenStatus.ACTIVE)
        in_column = Token(1, "p1", 52, TokenStatus.ACTIVE)
        self.assertTrue(on_track.is_on_track())
        self.assertFalse(on_track.is_in_home_column())
        self.assertTrue(in_column.is_in_home_column())
        self.assertFalse(in_column.is_on_track())

    def test_send_home(self):
        token = Token(2, "p1", 30, TokenStatus.ACTIVE).send_home()
        self.assertEqual(token.status, TokenStatus.HOME)
        self.assertEqual(token.position, GameConstants.HOME_POSITION)


class TestPlayers(unittest.TestCase):
    def test_initial_tokens_home(self):
        player = Player("p1", "Alice", Color.RED)
        self.assertEqual([t.token_id for t in player.tokens], [0, 1, 2, 3])
        for token in player.tokens:
            self.assertTrue(token.is_in_home())
            self.assertEqual(token.owner_id, "p1")

    def test_color_from_string(self):
        self.assertIs(Player("p1", "Alice", "green").color, Color.GREEN)

    def test_rejects_foreign_tokens(self):
        tokens = tuple(Token(i, "p2") for i in range(4))
        with self.assertRaises(InvalidArgumentError):
            Player("p1", "Alice", Color.RED, tokens)

    def test_rejects_wrong_token_count(self):
        tokens = tuple(Token(i, "p1") for i in range(3))
        with self.assertRaises(InvalidArgumentError):
            Player("p1", "Alice", Color.RED, tokens)

    def test_rejects_empty_token_tuple(self):
        with self.assertRaises(InvalidArgumentError):
            Player("p1", "Alice", Color.RED, ())

    def test_with_token_and_fresh(self):
        player = Player("p1", "Alice", Color.RED)
        moved = player.with_token(Token(2, "p1", 5, TokenStatus.ACTIVE))
        self.assertEqual(moved.token(2).position, 5)
        self.assertTrue(player.token(2).is_in_home())
        self.assertTrue(all(t.is_in_home() for t in moved.fresh().tokens))
        self.assertIsNone(player.token(7))

    def test_win_progress(self):
        tokens = tuple(Token(i, "p1", status=TokenStatus.FINISHED) for i in range(4))
        self.assertTrue(Player("p1", "Alice", Color.RED, tokens).has_won())


class TestGeometry(unittest.TestCase):
    def test_progress_in_color_frame(self):
        self.assertEqual(progress(Token(0, "p", 13, TokenStatus.ACTIVE), Color.BLUE), 0)
        self.assertEqual(progress(Token(0, "p", 12, TokenStatus.ACTIVE), Color.BLUE), 51)
        self.assertEqual(progress(Token(0, "p", 0, TokenStatus.ACTIVE), Color.YELLOW), 13)
        self.assertEqual(progress(Token(0, "p", 54, TokenStatus.ACTIVE), Color.GREEN), 54)
        self.assertIsNone(progress(Token(0, "p"), Color.RED))
        self.assertEqual(
            progress(Token(0, "p", status=TokenStatus.FINISHED), Color.RED), 57
        )

    def test_absolute_position(self):
        self.assertEqual(absolute_position(Color.BLUE, 51), 12)
        self.assertEqual(absolute_position(Color.YELLOW, 20), 7)
        self.assertEqual(absolute_position(Color.RED, 52), -1)
        self.assertEqual(position_for_progress(Color.GREEN, 55), 55)
        with self.assertRaises(ValueError):
            position_for_progress(Color.RED, 58)

    def test_tokens_at_and_occupancy(self):
        red = Player(
            "p1",
            "Red",
            Color.RED,
            (
                Token(0, "p1", 4, TokenStatus.ACTIVE),
                Token(1, "p1", 4, TokenStatus.ACTIVE),
                Token(2, "p1", 53, TokenStatus.ACTIVE),
                Token(3, "p1", status=TokenStatus.FINISHED),
            ),
        )
        blue = Player(
            "p2", "Blue", Color.BLUE, (Token(0, "p2", 4, TokenStatus.ACTIVE),)
            + tuple(Token(i, "p2") for i in range(1, 4))
        )
        state = GameState(players=(red, blue), phase=GamePhase.ROLLING)

        self.assertEqual(len(tokens_at(state, 4)), 3)
        self.assertEqual(
            [(idx, t.token_id) for idx, t in tokens_at(state, 4, exclude_index=0)],
            [(1, 0)],
        )
        self.assertEqual(tokens_at(state, 53), [])

        grid = occupancy(state)
        self.assertEqual(grid.shape, (4, 58))
        self.assertEqual(grid[0, 4], 2)
        self.assertEqual(grid[0, 53], 1)
        self.assertEqual(grid[0, 57], 1)
        self.assertEqual(grid[1, 4], 1)
        self.assertEqual(int(grid.sum()), 5)

        buf = np.full((4, 58), 9, dtype=np.int64)
        self.assertIs(occupancy(state, out=buf), buf)
        self.assertEqual(int(buf.sum()), 5)
        with self.assertRaises(ValueError):
            occupancy(state, out=np.zeros((2, 58), dtype=np.int64))


if __name__ == "__main__":
    unittest.main()
