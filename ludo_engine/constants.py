"""
Constants for the Ludo rules engine.
Board topology and rule values; every engine sharing snapshots over a network
must agree on these exactly.
"""

from typing import Dict, FrozenSet

from .types import Color


class GameConstants:
    """Core game constants and rules."""

    # Board dimensions
    TRACK_SIZE = 52
    HOME_COLUMN_SIZE = 5
    TOKENS_PER_PLAYER = 4
    MIN_PLAYERS = 2
    MAX_PLAYERS = 4

    # Dice
    DICE_MIN = 1
    DICE_MAX = 6
    DICE_TO_EXIT_HOME = 6
    MAX_CONSECUTIVE_SIXES = 3

    # Special positions
    HOME_POSITION = -1  # sentinel for tokens parked in the yard
    HOME_COL_START = 52
    HOME_COL_END = 56
    FINISH_POSITION = 57
    LAST_TRACK_PROGRESS = TRACK_SIZE - 1  # last ring cell before turning home


class BoardConstants:
    """Board layout and position constants."""

    # Entry square on the shared ring for each color (TRACK_SIZE / 4 apart)
    START_POSITIONS: Dict[Color, int] = {
        Color.RED: 0,
        Color.BLUE: 13,
        Color.GREEN: 26,
        Color.YELLOW: 39,
    }

    # Star squares, 8 cells past each start square
    STAR_SQUARES: FrozenSet[int] = frozenset({8, 21, 34, 47})

    # Start squares plus star squares; no capture happens here
    SAFE_SQUARES: FrozenSet[int] = frozenset({0, 8, 13, 21, 26, 34, 39, 47})

    @classmethod
    def start_position(cls, color: Color) -> int:
        return cls.START_POSITIONS[Color(color)]

    @classmethod
    def is_track_position(cls, position: int) -> bool:
        """Check if a position is a square of the shared ring."""
        return 0 <= position < GameConstants.TRACK_SIZE

    @classmethod
    def is_home_column_position(cls, position: int) -> bool:
        """Check if a position is in a home column."""
        return GameConstants.HOME_COL_START <= position <= GameConstants.HOME_COL_END

    @classmethod
    def is_safe_position(cls, position: int) -> bool:
        """
        Check if a ring square is safe.

        Only meaningful for positions on the shared ring; home-column indices
        overlap no ring square and are never reported safe.
        """
        return position in cls.SAFE_SQUARES
