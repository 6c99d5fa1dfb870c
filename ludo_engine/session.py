"""
Per-room session holding the latest snapshot.

This is the caller the UI and network layers wrap: it serializes actions for
one room, applies the auto-skip after a roll and absorbs actions sent by a
player whose turn it is not.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Iterable, List, Optional

from loguru import logger

from .config import session_config
from .errors import PhaseError
from .game import GameEngine
from .player import Player
from .state import GameState
from .types import GamePhase


class GameSession:
    def __init__(
        self,
        room_id: str,
        engine: Optional[GameEngine] = None,
        auto_skip: Optional[bool] = None,
    ):
        self.room_id = room_id
        self.engine = engine if engine is not None else GameEngine()
        self.auto_skip = session_config.AUTO_SKIP if auto_skip is None else auto_skip
        self._state = GameState(room_id=room_id)
        self._version = 0
        self._lock = threading.Lock()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def version(self) -> int:
        """Incremented every time the held snapshot changes."""
        return self._version

    def start(self, players: Iterable[Player]) -> GameState:
        with self._lock:
            if self._state.phase not in (GamePhase.WAITING, GamePhase.FINISHED):
                raise PhaseError(f"Room {self.room_id} already has a game in progress")
            return self._commit(self.engine.start_game(players, self.room_id))

    def roll(self, player_id: Optional[str] = None) -> GameState:
        with self._lock:
            if not self._is_turn_of(player_id):
                return self._state
            state = self.engine.roll_dice(self._state)
            if self.auto_skip:
                state = self.engine.skip_blocked_turn(state)
            return self._commit(state)

    def move(self, token_id: int, player_id: Optional[str] = None) -> GameState:
        with self._lock:
            if not self._is_turn_of(player_id):
                return self._state
            return self._commit(self.engine.move_token(self._state, token_id))

    def skip_blocked_turn(self) -> GameState:
        """Apply the auto-skip by hand when ``auto_skip`` is off."""
        with self._lock:
            return self._commit(self.engine.skip_blocked_turn(self._state))

    def movable_token_ids(self) -> List[int]:
        return self.engine.movable_token_ids(self._state)

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            data = self._state.to_dict()
            data["version"] = self._version
            data["movable_token_ids"] = self.engine.movable_token_ids(self._state)
            return data

    def _is_turn_of(self, player_id: Optional[str]) -> bool:
        if player_id is None or self._state.phase == GamePhase.WAITING:
            # Phase checks in the engine reject actions before the game starts
            return True
        current = self._state.current_player.player_id
        if player_id != current:
            logger.warning(
                f"Room {self.room_id}: ignoring action from {player_id}, it is {current}'s turn"
            )
            return False
        return True

    def _commit(self, state: GameState) -> GameState:
        if state is not self._state:
            self._state = state
            self._version += 1
        return state
