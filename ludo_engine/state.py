"""
Immutable game snapshot.
Every engine transition returns a new GameState; readers holding an older
snapshot never observe a partial update.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from .constants import GameConstants
from .errors import InvalidArgumentError
from .player import Player
from .token import Token
from .types import GamePhase


def validate_seats(players: Iterable[Player]) -> None:
    """
    Check the seating of a started game.

    Raises:
        InvalidArgumentError: Fewer than 2 or more than 4 players, or a
            player id / color used twice
    """
    players = tuple(players)
    if not GameConstants.MIN_PLAYERS <= len(players) <= GameConstants.MAX_PLAYERS:
        raise InvalidArgumentError(
            f"Ludo requires {GameConstants.MIN_PLAYERS}-{GameConstants.MAX_PLAYERS} players, got {len(players)}"
        )
    if len({p.player_id for p in players}) != len(players):
        raise InvalidArgumentError("Player ids must be unique")
    if len({p.color for p in players}) != len(players):
        raise InvalidArgumentError("Player colors must be unique")


@dataclass(slots=True, frozen=True)
class GameState:
    room_id: str = ""  # opaque correlation id
    players: Tuple[Player, ...] = ()  # turn order
    current_turn_index: int = 0
    dice_value: int = 0  # 0 = not rolled this turn
    consecutive_sixes: int = 0
    phase: GamePhase = GamePhase.WAITING
    winner_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "players", tuple(self.players))
        object.__setattr__(self, "phase", GamePhase(self.phase))
        if self.phase != GamePhase.WAITING:
            validate_seats(self.players)
        if self.players and not 0 <= self.current_turn_index < len(self.players):
            raise InvalidArgumentError(
                f"Turn index {self.current_turn_index} out of range for {len(self.players)} players"
            )

    @property
    def current_player(self) -> Player:
        return self.players[self.current_turn_index]

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def winner(self) -> Optional[Player]:
        if self.winner_id is None:
            return None
        index = self.player_index(self.winner_id)
        return self.players[index] if index >= 0 else None

    def player_index(self, player_id: str) -> int:
        for idx, player in enumerate(self.players):
            if player.player_id == player_id:
                return idx
        return -1

    def all_tokens(self) -> Iterator[Token]:
        for player in self.players:
            yield from player.tokens

    def evolve(self, **changes: Any) -> GameState:
        """Return a new snapshot with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "room_id": self.room_id,
            "players": [p.to_dict() for p in self.players],
            "current_turn_index": self.current_turn_index,
            "dice_value": self.dice_value,
            "consecutive_sixes": self.consecutive_sixes,
            "phase": self.phase.value,
            "winner_id": self.winner_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GameState:
        try:
            winner_id = data.get("winner_id")
            return cls(
                room_id=str(data.get("room_id", "")),
                players=tuple(Player.from_dict(p) for p in data.get("players", ())),
                current_turn_index=int(data.get("current_turn_index", 0)),
                dice_value=int(data.get("dice_value", 0)),
                consecutive_sixes=int(data.get("consecutive_sixes", 0)),
                phase=GamePhase(data.get("phase", GamePhase.WAITING.value)),
                winner_id=None if winner_id is None else str(winner_id),
            )
        except (KeyError, TypeError, ValueError) as e:
            if isinstance(e, InvalidArgumentError):
                raise
            raise InvalidArgumentError(f"Malformed game snapshot: {e}") from e
