"""Custom exceptions for terrain generation and the world grid."""


class WorldError(Exception):
    """Base exception for world errors."""

    pass


class ConfigurationError(WorldError):
    """Raised when generation constants are contradictory or out of range."""

    pass


class OutOfBoundsError(WorldError, IndexError):
    """Raised when a grid cell outside the world is accessed."""

    pass


class GenerationError(WorldError):
    """Raised when a generation stage fails."""

    pass
