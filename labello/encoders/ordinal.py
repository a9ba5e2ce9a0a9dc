"""Ordinal encoding: first-seen index with an optional class ceiling."""

import logging

from labello.core.errors import StrategyMismatchError
from labello.core.schema import Config, EncoderType, is_int_code
from labello.encoders.base import MappingEncoder, first_seen_indices
from labello.encoders.registry import register

log = logging.getLogger(__name__)


@register(EncoderType.ORDINAL)
class OrdinalEncoder(MappingEncoder):
    """Categories → 0..N-1 in first-seen order.

    With Config.max_classes=k, categories first seen after index k-1 has
    been handed out all share k-1. nclasses() reports the ceiling-bounded
    count (max index + 1), not the number of distinct categories.
    """

    def _build_mapping(self, data: list, config: Config) -> dict:
        mapping = first_seen_indices(data, config.max_classes)

        if config.max_classes is not None and len(mapping) > config.max_classes:
            merged = len(mapping) - config.max_classes + 1
            log.warning(
                f"max_classes={config.max_classes} reached: {merged} categories "
                f"share index {config.max_classes - 1}"
            )
        return mapping

    def _normalize_code(self, code) -> int:
        if not is_int_code(code):
            raise StrategyMismatchError(
                f"Transformed data not compatible with this encoder: "
                f"expected int code, got {type(code).__name__}"
            )
        return int(code)

    def nclasses(self) -> int:
        if not self._mapping:
            return 0
        return max(self._mapping.values()) + 1
