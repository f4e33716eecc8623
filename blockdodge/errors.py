"""Errors raised by the simulation core."""


class GameError(Exception):
    """Base class for every error the core raises."""


class EmptyPoolError(GameError):
    """No unspawned spawn slot is left for the requested orientation."""


class MissingPlayerError(GameError):
    """Zero players where exactly one was expected, or a second one spawned."""


class ConfigurationError(GameError):
    """Configuration values or the spawn pool are unusable."""
