import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name, "").strip()
    return int(value) if value else None


@dataclass(slots=True)
class SessionConfig:
    # Seed for the default dice source; unset means OS entropy
    DICE_SEED: Optional[int] = _optional_int("LUDO_DICE_SEED")
    # Pass the turn automatically when a roll leaves nothing to move
    AUTO_SKIP: bool = bool(int(os.getenv("LUDO_AUTO_SKIP", 1)))
    # Safety cap on actions for command-line playouts
    MAX_ACTIONS: int = int(os.getenv("LUDO_MAX_ACTIONS", 5000))

    def __post_init__(self):
        if self.MAX_ACTIONS < 1:
            raise ValueError("MAX_ACTIONS must be a positive integer")


session_config = SessionConfig()
