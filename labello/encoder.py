"""
Public Encoder facade.

Wraps one registered strategy implementation and forwards the
fit / transform / inverse_transform lifecycle to it.

Usage::

    from labello import Encoder, EncoderType, Config

    enc = Encoder(EncoderType.ORDINAL)
    enc.fit(["a", "b", "a"], Config(max_classes=10))
    enc.transform(["b", "a", "zzz"])      # Transform(ORDINAL, [1, 0])
    enc.inverse_transform([1, 0])         # ["b", "a"]
"""

from typing import Hashable, Iterable, Optional

from labello.core.schema import Config, EncoderType, Transform
from labello.encoders import registry


class Encoder:
    """Categorical label encoder for a single strategy."""

    def __init__(self, strategy: "EncoderType | str | None" = None):
        self._impl = registry.create_encoder(strategy)

    @property
    def strategy(self) -> EncoderType:
        return self._impl.kind

    def fit(self, data: Iterable[Hashable], config: Optional[Config] = None) -> "Encoder":
        """Learn the mapping from data. Any previous mapping is discarded."""
        self._impl.fit(data, config)
        return self

    def transform(self, data: Iterable[Hashable]) -> Transform:
        """Encode data; categories unseen during fit are silently dropped."""
        return self._impl.transform(data)

    def fit_transform(self, data: Iterable[Hashable], config: Optional[Config] = None) -> Transform:
        data = list(data)
        return self.fit(data, config).transform(data)

    def inverse_transform(self, data) -> list:
        """Decode a Transform (or raw codes) back to categories.

        Every category sharing a code is returned for that code, so the
        output can be longer than the input after a max_classes collision
        or with a non-injective custom mapping.
        """
        return self._impl.inverse_transform(data)

    def nclasses(self) -> int:
        return self._impl.nclasses()

    def uniques(self) -> set:
        return self._impl.uniques()

    @property
    def mapping(self):
        """Read-only view of category → code."""
        return self._impl.mapping

    @property
    def width(self) -> int:
        """Bit-vector length for one-hot encoders, 0 otherwise."""
        return getattr(self._impl, "width", 0)

    @property
    def is_fitted(self) -> bool:
        return self._impl.is_fitted

    def __len__(self) -> int:
        return len(self._impl)

    def __contains__(self, item) -> bool:
        return item in self._impl

    def __repr__(self) -> str:
        return f"Encoder(strategy={self.strategy.value}, ncategories={len(self)}, nclasses={self.nclasses()})"


def new(strategy: "EncoderType | str | None" = None) -> Encoder:
    """Create an empty Encoder; defaults to ordinal."""
    return Encoder(strategy)
