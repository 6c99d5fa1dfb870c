from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class Color(Enum):
    """Team colors in clockwise seating order."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"


class TokenStatus(Enum):
    """Lifecycle stage of a token."""

    HOME = "home"  # parked in the yard
    ACTIVE = "active"  # on the shared ring or in the home column
    FINISHED = "finished"  # reached the finish slot


class GamePhase(Enum):
    WAITING = "waiting"
    ROLLING = "rolling"
    MOVING = "moving"
    FINISHED = "finished"


@dataclass(slots=True, frozen=True)
class Capture:
    player_id: str
    token_id: int
    square: int  # absolute ring index


@dataclass(slots=True)
class MoveEvents:
    exited_home: bool = False
    finished: bool = False
    captures: List[Capture] = field(default_factory=list)
    extra_turn: bool = False
    rejected: bool = False
