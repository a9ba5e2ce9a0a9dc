"""
Labello domain objects.

Every module in the project depends on this file; this file depends on
nothing else inside the package except the error types.

Validation rules are enforced at construction time via __post_init__.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from numbers import Integral
from typing import Any, Callable, Iterator, Optional, Union

from labello.core.errors import ConfigurationError


# ── Types ──────────────────────────────────────────────────────────────

BitVector = tuple[bool, ...]
Code = Union[int, BitVector]
MappingFn = Callable[[Any], int]


class EncoderType(Enum):
    ORDINAL = "ordinal"
    ONE_HOT = "one_hot"
    CUSTOM_MAPPING = "custom"

    @classmethod
    def parse(cls, value: "EncoderType | str | None") -> "EncoderType":
        """Accept a member, its string value, or None (→ ORDINAL)."""
        if value is None:
            return cls.ORDINAL
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            available = ", ".join(e.value for e in cls)
            raise ValueError(
                f"Unknown encoder type '{value}'. Available: {available}"
            ) from None

    @property
    def is_bitvector(self) -> bool:
        return self is EncoderType.ONE_HOT


# ── Configuration ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class Config:
    """Per-fit configuration.

    max_classes: ceiling on distinct ordinal indices (ignored by one-hot
                 and custom encoders). None = unbounded.
    mapping_fn:  category → non-negative int, required by the custom encoder.
    """
    max_classes: Optional[int] = None
    mapping_fn: Optional[MappingFn] = None

    def __post_init__(self):
        if self.max_classes is not None:
            if isinstance(self.max_classes, bool) or not isinstance(self.max_classes, Integral):
                raise ConfigurationError(
                    f"max_classes must be an int, got {type(self.max_classes).__name__}"
                )
            if self.max_classes < 1:
                raise ConfigurationError(
                    f"max_classes must be >= 1, got {self.max_classes}"
                )
        if self.mapping_fn is not None and not callable(self.mapping_fn):
            raise ConfigurationError("mapping_fn must be callable")


# ── Data Transfer Objects ──────────────────────────────────────────────

@dataclass
class Transform:
    """Encoded output of Encoder.transform.

    Tagged with the strategy that produced it so inverse_transform can
    reject values from an encoder of a different kind.
    """
    kind: EncoderType
    codes: list = field(default_factory=list)

    def __post_init__(self):
        self.kind = EncoderType.parse(self.kind)
        self.codes = list(self.codes)

    def __len__(self) -> int:
        return len(self.codes)

    def __iter__(self) -> Iterator[Code]:
        return iter(self.codes)

    def __getitem__(self, i):
        return self.codes[i]

    def __eq__(self, other) -> bool:
        if isinstance(other, Transform):
            return self.kind is other.kind and self.codes == other.codes
        if isinstance(other, (list, tuple)):
            return self.codes == list(other)
        return NotImplemented

    @property
    def is_empty(self) -> bool:
        return len(self.codes) == 0


def is_int_code(value: Any) -> bool:
    """True for an integer code (bools excluded, numpy integers accepted)."""
    return isinstance(value, Integral) and not isinstance(value, bool)
