"""
Turn resolution and the game state machine.

All operations are pure over GameState snapshots: WAITING -> ROLLING ->
MOVING -> (ROLLING | FINISHED). The only impure collaborator is the injected
dice source.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from loguru import logger

from .board import is_on_track, is_safe, tokens_at
from .config import session_config
from .constants import GameConstants
from .dice import DiceRoller, DiceSource
from .errors import PhaseError
from .player import Player
from .rules import apply_move, movable_token_ids
from .state import GameState, validate_seats
from .types import Capture, GamePhase, MoveEvents


@dataclass(slots=True, frozen=True)
class TurnResolution:
    state: GameState
    events: MoveEvents


def pass_turn(state: GameState) -> GameState:
    """Hand the turn to the next seat and wait for a fresh roll."""
    return state.evolve(
        current_turn_index=(state.current_turn_index + 1) % state.player_count,
        dice_value=0,
        consecutive_sixes=0,
        phase=GamePhase.ROLLING,
    )


def _require_phase(state: GameState, phase: GamePhase, action: str) -> None:
    if state.phase != phase:
        raise PhaseError(
            f"Cannot {action} in phase {state.phase.value}; expected {phase.value}"
        )


def resolve_turn(state: GameState, token_id: int) -> TurnResolution:
    """Move one of the current player's tokens and settle the consequences.

    Naming a token the current player does not own, or a move that would
    overshoot the finish, is absorbed: the input state comes back unchanged
    and ``events.rejected`` is set.
    """
    _require_phase(state, GamePhase.MOVING, "move a token")
    mover_index = state.current_turn_index
    player = state.current_player

    token = player.token(token_id)
    if token is None:
        logger.warning(
            f"Room {state.room_id}: player {player.player_id} has no token {token_id}"
        )
        return TurnResolution(state=state, events=MoveEvents(rejected=True))

    moved = apply_move(token, state.dice_value, player)
    if moved == token and not token.is_in_home():
        logger.warning(
            f"Room {state.room_id}: token {token_id} of {player.player_id} cannot move {state.dice_value}"
        )
        return TurnResolution(state=state, events=MoveEvents(rejected=True))

    events = MoveEvents(
        exited_home=token.is_in_home() and moved.is_active(),
        finished=not token.is_finished() and moved.is_finished(),
    )
    players: List[Player] = list(state.players)
    players[mover_index] = player.with_token(moved)

    # Captures only happen on non-safe ring squares; own tokens may share a square
    if moved.is_active() and is_on_track(moved.position) and not is_safe(moved.position):
        victims = tokens_at(state, moved.position, exclude_index=mover_index)
        for idx, victim in victims:
            players[idx] = players[idx].with_token(victim.send_home())
            events.captures.append(
                Capture(
                    player_id=players[idx].player_id,
                    token_id=victim.token_id,
                    square=moved.position,
                )
            )
        if victims:
            logger.debug(
                f"Room {state.room_id}: {player.player_id} captured {len(victims)} token(s) on {moved.position}"
            )

    winner_id = players[mover_index].player_id if players[mover_index].has_won() else None
    events.extra_turn = winner_id is None and (
        state.dice_value == GameConstants.DICE_TO_EXIT_HOME
        or bool(events.captures)
        or events.finished
    )

    next_state = state.evolve(players=tuple(players), phase=GamePhase.ROLLING)
    if not events.extra_turn:
        next_state = pass_turn(next_state)
    if winner_id is not None:
        logger.info(f"Room {state.room_id}: {winner_id} wins")
        next_state = next_state.evolve(phase=GamePhase.FINISHED, winner_id=winner_id)

    return TurnResolution(state=next_state, events=events)


def apply_turn_action(state: GameState, token_id: int) -> GameState:
    return resolve_turn(state, token_id).state


@dataclass(slots=True)
class GameEngine:
    """Entry point for callers: start, roll and move over immutable snapshots."""

    dice: DiceSource = field(
        default_factory=lambda: DiceRoller(seed=session_config.DICE_SEED)
    )

    def start_game(self, players: Iterable[Player], room_id: str = "") -> GameState:
        """
        Seat the players in the given order with fresh tokens.

        Raises:
            InvalidArgumentError: Fewer than 2 or more than 4 players, or a
                player id / color used twice
        """
        players = tuple(players)
        validate_seats(players)

        state = GameState(
            room_id=room_id,
            players=tuple(p.fresh() for p in players),
            phase=GamePhase.ROLLING,
        )
        logger.info(
            f"Room {room_id}: game started with {[p.color.value for p in players]}"
        )
        return state

    def roll_dice(self, state: GameState) -> GameState:
        _require_phase(state, GamePhase.ROLLING, "roll the dice")
        value = self.dice.roll()
        sixes = state.consecutive_sixes + 1 if value == GameConstants.DICE_MAX else 0

        if sixes >= GameConstants.MAX_CONSECUTIVE_SIXES:
            # Turn forfeited; the six stays visible but grants no move
            logger.debug(
                f"Room {state.room_id}: {state.current_player.player_id} rolled three sixes"
            )
            return state.evolve(
                dice_value=value,
                consecutive_sixes=0,
                current_turn_index=(state.current_turn_index + 1) % state.player_count,
                phase=GamePhase.ROLLING,
            )

        logger.debug(
            f"Room {state.room_id}: {state.current_player.player_id} rolled {value}"
        )
        return state.evolve(
            dice_value=value, consecutive_sixes=sixes, phase=GamePhase.MOVING
        )

    def move_token(self, state: GameState, token_id: int) -> GameState:
        return apply_turn_action(state, token_id)

    def movable_token_ids(self, state: GameState) -> List[int]:
        if state.phase != GamePhase.MOVING:
            return []
        player = state.current_player
        return movable_token_ids(player.tokens, state.dice_value, player.color)

    def skip_blocked_turn(self, state: GameState) -> GameState:
        """Pass the turn when the rolled value leaves nothing to move."""
        if state.phase != GamePhase.MOVING or self.movable_token_ids(state):
            return state
        logger.debug(
            f"Room {state.room_id}: {state.current_player.player_id} cannot move {state.dice_value}, skipping"
        )
        return pass_turn(state)

    def roll(self, state: GameState) -> GameState:
        """Roll, then skip the turn if no token can move."""
        return self.skip_blocked_turn(self.roll_dice(state))
