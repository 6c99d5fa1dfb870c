"""
Player representation for the Ludo engine.
A player has a fixed color and exclusively owns four tokens.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Optional, Tuple

from .constants import BoardConstants, GameConstants
from .errors import InvalidArgumentError
from .token import Token
from .types import Color


def _fresh_tokens(player_id: str) -> Tuple[Token, ...]:
    return tuple(
        Token(token_id=i, owner_id=player_id)
        for i in range(GameConstants.TOKENS_PER_PLAYER)
    )


@dataclass(slots=True, frozen=True)
class Player:
    """
    A seat in the game.

    Args:
        player_id: Stable external identity (session or slot id)
        name: Display name, never interpreted by the engine
        color: Team color, fixed for the whole game
        tokens: Exactly four tokens with ids 0..3; fresh HOME tokens when None
    """

    player_id: str
    name: str
    color: Color
    tokens: Optional[Tuple[Token, ...]] = None

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "color", Color(self.color))
        except ValueError as e:
            raise InvalidArgumentError(f"Unknown color: {self.color!r}") from e
        if self.tokens is None:
            object.__setattr__(self, "tokens", _fresh_tokens(self.player_id))
            return
        tokens = tuple(self.tokens)
        if [t.token_id for t in tokens] != list(range(GameConstants.TOKENS_PER_PLAYER)):
            raise InvalidArgumentError(
                f"Player {self.player_id} must own tokens 0..3 in order"
            )
        if any(t.owner_id != self.player_id for t in tokens):
            raise InvalidArgumentError(
                f"Player {self.player_id} holds a token owned by someone else"
            )
        object.__setattr__(self, "tokens", tokens)

    @property
    def start_position(self) -> int:
        return BoardConstants.start_position(self.color)

    def token(self, token_id: int) -> Optional[Token]:
        for token in self.tokens:
            if token.token_id == token_id:
                return token
        return None

    def with_token(self, token: Token) -> Player:
        """Return a copy with the token of the same id replaced."""
        return self.with_tokens(
            token if t.token_id == token.token_id else t for t in self.tokens
        )

    def with_tokens(self, tokens: Iterable[Token]) -> Player:
        return replace(self, tokens=tuple(tokens))

    def fresh(self) -> Player:
        """Return a copy with all tokens back in the yard."""
        return replace(self, tokens=_fresh_tokens(self.player_id))

    def finished_count(self) -> int:
        return sum(1 for t in self.tokens if t.is_finished())

    def has_won(self) -> bool:
        return self.finished_count() == GameConstants.TOKENS_PER_PLAYER

    def has_tokens_in_home(self) -> bool:
        return any(t.is_in_home() for t in self.tokens)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player_id": self.player_id,
            "name": self.name,
            "color": self.color.value,
            "tokens": [t.to_dict() for t in self.tokens],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Player:
        try:
            return cls(
                player_id=str(data["player_id"]),
                name=str(data.get("name", "")),
                color=Color(data["color"]),
                tokens=tuple(Token.from_dict(t) for t in data["tokens"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            if isinstance(e, InvalidArgumentError):
                raise
            raise InvalidArgumentError(f"Malformed player snapshot: {data!r}") from e

    def __str__(self) -> str:
        return f"Player({self.player_id}, {self.color.value}, tokens: {[str(t) for t in self.tokens]})"
