from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence

from .constants import GameConstants
from .errors import DiceExhaustedError


class DiceSource(Protocol):
    def roll(self) -> int:
        ...


@dataclass(slots=True)
class DiceRoller:
    """Uniform six-sided die backed by its own random.Random."""

    seed: Optional[int] = None
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def roll(self) -> int:
        return self.rng.randint(GameConstants.DICE_MIN, GameConstants.DICE_MAX)


@dataclass(slots=True)
class ScriptedDice:
    """Replays a fixed sequence of values, for tests and game replays."""

    values: Sequence[int]
    _cursor: int = field(default=0, init=False, repr=False)

    def roll(self) -> int:
        if self._cursor >= len(self.values):
            raise DiceExhaustedError(
                f"Scripted dice exhausted after {len(self.values)} rolls"
            )
        value = int(self.values[self._cursor])
        self._cursor += 1
        return value

    @property
    def remaining(self) -> int:
        return len(self.values) - self._cursor
