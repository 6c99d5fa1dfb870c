"""
Token representation for the Ludo engine.
Each player owns four tokens. Tokens are immutable values: every move
produces a new token instead of changing the old one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict

from .constants import BoardConstants, GameConstants
from .errors import InvalidArgumentError
from .types import TokenStatus


@dataclass(slots=True, frozen=True)
class Token:
    """
    A single token of one player.

    ``token_id`` (0..3) doubles as the token's parking slot in the yard.
    ``position`` is -1 while HOME, an absolute ring index 0..51 or a
    home-column index 52..56 while ACTIVE, and 57 once FINISHED.
    """

    token_id: int
    owner_id: str
    position: int = GameConstants.HOME_POSITION
    status: TokenStatus = TokenStatus.HOME

    def __post_init__(self) -> None:
        if not 0 <= self.token_id < GameConstants.TOKENS_PER_PLAYER:
            raise InvalidArgumentError(f"Invalid token id: {self.token_id}")
        status = TokenStatus(self.status)
        object.__setattr__(self, "status", status)
        if status == TokenStatus.HOME:
            object.__setattr__(self, "position", GameConstants.HOME_POSITION)
        elif status == TokenStatus.FINISHED:
            object.__setattr__(self, "position", GameConstants.FINISH_POSITION)
        elif not 0 <= self.position <= GameConstants.HOME_COL_END:
            raise InvalidArgumentError(
                f"Active token position out of range: {self.position}"
            )

    def is_in_home(self) -> bool:
        return self.status == TokenStatus.HOME

    def is_active(self) -> bool:
        return self.status == TokenStatus.ACTIVE

    def is_finished(self) -> bool:
        return self.status == TokenStatus.FINISHED

    def is_on_track(self) -> bool:
        """Check if token is active on the shared ring."""
        return self.is_active() and BoardConstants.is_track_position(self.position)

    def is_in_home_column(self) -> bool:
        return self.is_active() and BoardConstants.is_home_column_position(
            self.position
        )

    def moved_to(self, position: int) -> Token:
        return replace(self, position=position, status=TokenStatus.ACTIVE)

    def finish(self) -> Token:
        return replace(
            self, position=GameConstants.FINISH_POSITION, status=TokenStatus.FINISHED
        )

    def send_home(self) -> Token:
        return replace(
            self, position=GameConstants.HOME_POSITION, status=TokenStatus.HOME
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "token_id": self.token_id,
            "owner_id": self.owner_id,
            "position": self.position,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Token:
        try:
            return cls(
                token_id=int(data["token_id"]),
                owner_id=str(data["owner_id"]),
                position=int(data.get("position", GameConstants.HOME_POSITION)),
                status=TokenStatus(data["status"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            if isinstance(e, InvalidArgumentError):
                raise
            raise InvalidArgumentError(f"Malformed token snapshot: {data!r}") from e

    def __str__(self) -> str:
        return f"Token({self.owner_id}_{self.token_id}: {self.status.value} at {self.position})"
