"""
errors.py: Exception types shared by the profile store and the game flow.
"""


class SkyHopperError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(SkyHopperError):
    """A profile name was rejected (empty, whitespace-only, unknown, ...)."""


class DuplicateNameError(ValidationError):
    def __init__(self, name: str):
        super().__init__(f"Profile {name!r} already exists.")
        self.name = name


class PersistenceError(SkyHopperError):
    """The durable store could not be read or written."""


class InvalidStateTransition(SkyHopperError):
    """An input that does not apply to the current game state."""

    def __init__(self, state: str, action: str):
        super().__init__(f"{action!r} is not valid in state {state!r}")
        self.state = state
        self.action = action
