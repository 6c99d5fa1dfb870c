"""
Move legality and single-token move application.
"""

from __future__ import annotations

from typing import Iterable, List

from .board import position_for_progress, progress, start_position
from .constants import GameConstants
from .player import Player
from .token import Token
from .types import Color, TokenStatus


def can_move(token: Token, dice_value: int, color: Color) -> bool:
    """
    Check if a token may legally move with the given dice value.

    Args:
        token: Token to check
        dice_value: The value rolled on the dice
        color: Color of the token's owner

    Returns:
        bool: True if the token can move, False otherwise
    """
    if token.status == TokenStatus.HOME:
        return dice_value == GameConstants.DICE_TO_EXIT_HOME
    if token.status == TokenStatus.FINISHED:
        return False
    if token.status == TokenStatus.ACTIVE:
        # Exact count required to finish; only home-column tokens can overshoot
        return progress(token, color) + dice_value <= GameConstants.FINISH_POSITION
    raise ValueError(f"Unhandled token status: {token.status}")


def movable_tokens(tokens: Iterable[Token], dice_value: int, color: Color) -> List[Token]:
    """Tokens that can move with ``dice_value``, in their original order."""
    return [t for t in tokens if can_move(t, dice_value, color)]


def movable_token_ids(tokens: Iterable[Token], dice_value: int, color: Color) -> List[int]:
    return [t.token_id for t in movable_tokens(tokens, dice_value, color)]


def apply_move(token: Token, dice_value: int, player: Player) -> Token:
    """
    Compute where a token ends up after moving ``dice_value`` squares.

    An illegal move (no six to leave the yard, overshooting the finish,
    moving a finished token) returns the token unchanged.
    """
    if token.status == TokenStatus.FINISHED:
        return token

    if token.status == TokenStatus.HOME:
        if dice_value == GameConstants.DICE_TO_EXIT_HOME:
            return token.moved_to(start_position(player.color))
        return token

    if token.status == TokenStatus.ACTIVE:
        target = progress(token, player.color) + dice_value
        if target > GameConstants.FINISH_POSITION:
            return token
        if target == GameConstants.FINISH_POSITION:
            return token.finish()
        return token.moved_to(position_for_progress(player.color, target))

    raise ValueError(f"Unhandled token status: {token.status}")
