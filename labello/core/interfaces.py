"""
Abstract base classes defining contracts between modules.

Every encoding strategy implements BaseEncoder. The Encoder facade and the
frame/bench helpers only ever talk to this interface.
"""

from abc import ABC, abstractmethod
from typing import Hashable, Iterable, Optional

from labello.core.schema import Config, EncoderType, Transform


class BaseEncoder(ABC):
    """Contract: categories ↔ codes for exactly one strategy."""

    kind: EncoderType

    @abstractmethod
    def fit(self, data: Iterable[Hashable], config: Optional[Config] = None) -> "BaseEncoder":
        """Learn the category → code mapping. Replaces any previous mapping."""
        ...

    @abstractmethod
    def transform(self, data: Iterable[Hashable]) -> Transform:
        """Encode known categories; unknown ones are dropped."""
        ...

    @abstractmethod
    def inverse_transform(self, data) -> list:
        """Return every category whose code matches each input code."""
        ...

    @abstractmethod
    def nclasses(self) -> int:
        ...

    @abstractmethod
    def uniques(self) -> set:
        ...
