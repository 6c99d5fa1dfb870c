"""
Ludo rules engine.
Legal moves, move application, captures, turn order and victory for a
2-4 player race game, over immutable state snapshots.
"""

from ludo_engine.board import absolute_position, is_safe, occupancy, progress
from ludo_engine.constants import BoardConstants, GameConstants
from ludo_engine.dice import DiceRoller, DiceSource, ScriptedDice
from ludo_engine.errors import (
    DiceExhaustedError,
    InvalidArgumentError,
    LudoError,
    PhaseError,
)
from ludo_engine.game import (
    GameEngine,
    TurnResolution,
    apply_turn_action,
    pass_turn,
    resolve_turn,
)
from ludo_engine.player import Player
from ludo_engine.rules import apply_move, can_move, movable_token_ids, movable_tokens
from ludo_engine.session import GameSession
from ludo_engine.state import GameState
from ludo_engine.token import Token
from ludo_engine.types import Capture, Color, GamePhase, MoveEvents, TokenStatus

__all__ = [
    "GameEngine",
    "GameSession",
    "GameState",
    "Player",
    "Token",
    "Color",
    "TokenStatus",
    "GamePhase",
    "Capture",
    "MoveEvents",
    "TurnResolution",
    "DiceSource",
    "DiceRoller",
    "ScriptedDice",
    "apply_turn_action",
    "resolve_turn",
    "pass_turn",
    "apply_move",
    "can_move",
    "movable_tokens",
    "movable_token_ids",
    "absolute_position",
    "progress",
    "is_safe",
    "occupancy",
    "GameConstants",
    "BoardConstants",
    "LudoError",
    "InvalidArgumentError",
    "PhaseError",
    "DiceExhaustedError",
]
