"""
Board geometry for the Ludo engine.

Each color walks one linear progress coordinate: 0..51 on the shared ring
counted from its start square, 52..56 in its home column, 57 finished.
Conversion to the absolute ring index only matters when comparing squares
across colors, i.e. for captures.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from .constants import BoardConstants, GameConstants
from .state import GameState
from .token import Token
from .types import Color

OCCUPANCY_WIDTH = GameConstants.FINISH_POSITION + 1
COLOR_ORDER: Tuple[Color, ...] = tuple(Color)


def start_position(color: Color) -> int:
    return BoardConstants.start_position(color)


def is_safe(position: int) -> bool:
    return BoardConstants.is_safe_position(position)


def is_home_column(position: int) -> bool:
    return BoardConstants.is_home_column_position(position)


def is_on_track(position: int) -> bool:
    return BoardConstants.is_track_position(position)


def progress(token: Token, color: Color) -> Optional[int]:
    """Distance travelled by ``token`` in its color's frame; None while HOME."""
    if token.is_in_home():
        return None
    if token.is_finished():
        return GameConstants.FINISH_POSITION
    if is_home_column(token.position):
        return token.position
    size = GameConstants.TRACK_SIZE
    return (token.position - start_position(color) + size) % size


def position_for_progress(color: Color, value: int) -> int:
    """Map a progress value (0..57) back to the stored position encoding."""
    if not 0 <= value <= GameConstants.FINISH_POSITION:
        raise ValueError(f"Progress out of range: {value}")
    if value <= GameConstants.LAST_TRACK_PROGRESS:
        return (start_position(color) + value) % GameConstants.TRACK_SIZE
    return value


def absolute_position(color: Color, value: int) -> int:
    """Absolute ring index for a progress value, -1 once off the ring."""
    if not 0 <= value <= GameConstants.LAST_TRACK_PROGRESS:
        return -1
    return position_for_progress(color, value)


def tokens_at(
    state: GameState, square: int, *, exclude_index: Optional[int] = None
) -> List[Tuple[int, Token]]:
    """Active ring tokens on an absolute square as (player index, token) pairs."""
    out: List[Tuple[int, Token]] = []
    if not is_on_track(square):
        return out
    for idx, player in enumerate(state.players):
        if idx == exclude_index:
            continue
        for token in player.tokens:
            if token.is_on_track() and token.position == square:
                out.append((idx, token))
    return out


def occupancy(state: GameState, out: np.ndarray | None = None) -> np.ndarray:
    """Build a (4, 58) token count grid for renderers.

    Rows follow the clockwise color order. Columns 0..51 are absolute ring
    squares, 52..56 the owner's home column and 57 the finish slot. Tokens in
    the yard are not counted.
    """
    shape = (len(COLOR_ORDER), OCCUPANCY_WIDTH)
    if out is not None:
        grid = out
        if grid.shape != shape:
            raise ValueError(f"Expected occupancy grid of shape {shape}")
    else:
        grid = np.zeros(shape, dtype=np.int64)

    grid.fill(0)
    for player in state.players:
        row = grid[COLOR_ORDER.index(player.color)]
        for token in player.tokens:
            if not token.is_in_home():
                row[token.position] += 1
    return grid
