# Exception types raised by the rules engine.
# Invalid actions (wrong token, overshoot) never raise; they return the input
# state unchanged.


class LudoError(Exception):
    """Base exception for rules engine errors."""

    pass


class InvalidArgumentError(LudoError, ValueError):
    """Raised when a game cannot be built from the given arguments."""

    pass


class PhaseError(LudoError):
    """Raised when an operation is invoked in the wrong game phase."""

    pass


class DiceExhaustedError(LudoError, IndexError):
    """Raised when a scripted dice source has no values left."""

    pass
