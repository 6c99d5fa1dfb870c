import argparse
import random
from typing import List, Optional, Tuple

from .config import session_config
from .dice import DiceRoller
from .game import GameEngine
from .player import Player
from .session import GameSession
from .state import GameState
from .types import Color, GamePhase


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play a Ludo game to completion with random token choices"
    )
    parser.add_argument(
        "--players", type=int, default=4, choices=[2, 3, 4], help="Number of seats"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=session_config.DICE_SEED,
        help="Seed for dice and token choices",
    )
    parser.add_argument(
        "--max-actions",
        type=int,
        default=session_config.MAX_ACTIONS,
        help="Stop after this many rolls and moves",
    )
    parser.add_argument("--room-id", type=str, default="local")
    return parser.parse_args(argv)


def make_players(count: int) -> List[Player]:
    return [
        Player(player_id=f"p{i + 1}", name=color.value.title(), color=color)
        for i, color in enumerate(list(Color)[:count])
    ]


def play(
    players: int, seed: Optional[int], max_actions: int, room_id: str = "local"
) -> Tuple[GameState, int]:
    """Run a session until someone wins or ``max_actions`` is reached.

    Returns the final snapshot and the number of actions taken.
    """
    session = GameSession(
        room_id, engine=GameEngine(dice=DiceRoller(seed=seed)), auto_skip=True
    )
    chooser = random.Random(seed)
    session.start(make_players(players))

    actions = 0
    while session.state.phase != GamePhase.FINISHED and actions < max_actions:
        if session.state.phase == GamePhase.ROLLING:
            session.roll()
        else:
            session.move(chooser.choice(session.movable_token_ids()))
        actions += 1
    return session.state, actions


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    state, actions = play(args.players, args.seed, args.max_actions, args.room_id)
    if state.winner is None:
        print(f"No winner after {actions} actions")
        return 1
    print(f"Winner: {state.winner.name} ({state.winner.player_id}) after {actions} actions")
    for player in state.players:
        print(f"  {player.color.value:<7} finished {player.finished_count()}/4")
    return 0
