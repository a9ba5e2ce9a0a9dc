"""
Shared fit / transform / inverse-transform lifecycle.

Subclasses only decide how a mapping is built from training data and what
a valid code looks like. Reset semantics, silent skipping of unknowns and the
reverse index live here.
"""

import logging
from abc import abstractmethod
from types import MappingProxyType
from typing import Hashable, Iterable, Optional

from labello.core.errors import StrategyMismatchError
from labello.core.interfaces import BaseEncoder
from labello.core.schema import Code, Config, Transform

log = logging.getLogger(__name__)


def first_seen_indices(data: Iterable[Hashable], max_classes: Optional[int] = None) -> dict:
    """Assign 0, 1, 2, ... to categories in first-seen order.

    With max_classes=k the counter stops at k-1, so every category first
    seen after the ceiling is reached shares index k-1.
    """
    ceiling = None if max_classes is None else max_classes - 1
    mapping: dict = {}
    idx = 0
    for el in data:
        if el in mapping:
            continue
        mapping[el] = idx
        if ceiling is None or idx < ceiling:
            idx += 1
    return mapping


class MappingEncoder(BaseEncoder):
    """BaseEncoder backed by a dict plus a code → categories reverse index."""

    def __init__(self):
        self._mapping: dict = {}
        self._reverse: dict = {}
        self._fitted = False

    # ── Hooks ──

    @abstractmethod
    def _build_mapping(self, data: list, config: Config) -> dict:
        """Return a fresh category → code dict. Must not touch self."""
        ...

    @abstractmethod
    def _normalize_code(self, code) -> Code:
        """Return code in its canonical hashable form, or raise StrategyMismatchError."""
        ...

    # ── Lifecycle ──

    def fit(self, data: Iterable[Hashable], config: Optional[Config] = None) -> "MappingEncoder":
        config = config if config is not None else Config()
        data = list(data)

        # Build first, swap after: a failing fit leaves the old mapping intact.
        mapping = self._build_mapping(data, config)

        reverse: dict = {}
        for key, code in mapping.items():
            reverse.setdefault(code, []).append(key)

        self._mapping = mapping
        self._reverse = reverse
        self._fitted = True

        log.info(
            f"Fitted {self.kind.value} encoder: {len(data)} samples, "
            f"{len(mapping)} categories, {self.nclasses()} classes"
        )
        return self

    def transform(self, data: Iterable[Hashable]) -> Transform:
        mapping = self._mapping
        codes = []
        n_in = 0
        for el in data:
            n_in += 1
            code = mapping.get(el)
            if code is not None:
                codes.append(code)

        dropped = n_in - len(codes)
        if dropped:
            log.debug(f"transform dropped {dropped}/{n_in} unknown categories")
        return Transform(self.kind, codes)

    def inverse_transform(self, data) -> list:
        if isinstance(data, Transform):
            if data.kind is not self.kind:
                raise StrategyMismatchError(
                    f"Transformed data of kind '{data.kind.value}' is not "
                    f"compatible with a {self.kind.value} encoder"
                )
            codes = data.codes
        else:
            try:
                codes = iter(data)
            except TypeError:
                raise StrategyMismatchError(
                    f"inverse_transform expects a sequence of codes, got {type(data).__name__}"
                ) from None

        result = []
        for code in codes:
            result.extend(self._reverse.get(self._normalize_code(code), ()))
        return result

    def fit_transform(self, data: Iterable[Hashable], config: Optional[Config] = None) -> Transform:
        data = list(data)
        return self.fit(data, config).transform(data)

    # ── Introspection ──

    def nclasses(self) -> int:
        return len(self._mapping)

    def uniques(self) -> set:
        return set(self._mapping)

    @property
    def mapping(self) -> MappingProxyType:
        return MappingProxyType(self._mapping)

    @property
    def is_fitted(self) -> bool:
        """True once fit has succeeded, even on empty data."""
        return self._fitted

    def __len__(self) -> int:
        return len(self._mapping)

    def __contains__(self, item) -> bool:
        try:
            return item in self._mapping
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(ncategories={len(self._mapping)}, nclasses={self.nclasses()})"
