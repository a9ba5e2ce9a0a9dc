"""
Encoder registry — factory for creating strategy instances by type.
"""

from labello.core.interfaces import BaseEncoder
from labello.core.schema import EncoderType


_REGISTRY: dict[EncoderType, type] = {}


def register(kind: EncoderType):
    """Decorator to register an encoder class for a strategy."""
    def wrapper(cls):
        cls.kind = kind
        _REGISTRY[kind] = cls
        return cls
    return wrapper


def create_encoder(kind: "EncoderType | str | None" = None, **kwargs) -> BaseEncoder:
    """Create an encoder instance; None means ordinal."""
    kind = EncoderType.parse(kind)
    if kind not in _REGISTRY:
        available = ", ".join(sorted(k.value for k in _REGISTRY))
        raise ValueError(f"No encoder registered for '{kind.value}'. Available: {available}")
    return _REGISTRY[kind](**kwargs)


def list_encoders() -> list[str]:
    return sorted(k.value for k in _REGISTRY)
