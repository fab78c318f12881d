"""
Error taxonomy for the hex grid core.
Both errors are construction-time failures; nothing mid-computation raises them.
"""


class HexboardError(Exception):
    """Base class for all hexboard errors."""


class InvariantViolation(HexboardError, ValueError):
    """A cube coordinate was built with x + y + z != 0 (or non-integer axes)."""


class InvalidConfiguration(HexboardError, ValueError):
    """Negative range/levels or a non-positive cell size."""
