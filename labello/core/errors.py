"""
Labello error taxonomy.

Every failure the encoder can raise derives from LabelloError. The concrete
classes also inherit from the builtin a caller would naturally catch
(ValueError for bad configuration, TypeError for shape mismatches).
"""


class LabelloError(Exception):
    """Base class for all labello errors."""


class ConfigurationError(LabelloError, ValueError):
    """Encoder configuration is missing or invalid for the chosen strategy."""


class StrategyMismatchError(LabelloError, TypeError):
    """Encoded values do not match the encoder's strategy (int vs bit-vector)."""


class InvariantViolation(LabelloError, AssertionError):
    """Internal invariant broken. Not recoverable."""
