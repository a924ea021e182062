"""
Exception types raised by the live scoreboard.
"""


class ScoreboardError(Exception):
    """Base class for all scoreboard errors."""


class InvalidArgumentError(ScoreboardError, ValueError):
    """Malformed input, duplicate start or a lookup that found nothing."""


class InvalidStateError(ScoreboardError, RuntimeError):
    """Operation not allowed in the match's current lifecycle state."""
