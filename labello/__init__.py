"""
Labello — a small categorical label encoder.

Maps hashable categories to ordinal indices, fixed-width bit-vectors or
user-defined integer codes, and back.
"""

__version__ = "0.1.0"

from labello.core.errors import (  # noqa: F401
    LabelloError, ConfigurationError, StrategyMismatchError, InvariantViolation,
)
from labello.core.schema import Config, EncoderType, Transform  # noqa: F401
from labello.encoder import Encoder, new  # noqa: F401
