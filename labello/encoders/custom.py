"""User-defined mapping: code = mapping_fn(category), computed once per category."""

import logging

from labello.core.errors import ConfigurationError, StrategyMismatchError
from labello.core.schema import Config, EncoderType, is_int_code
from labello.encoders.base import MappingEncoder
from labello.encoders.registry import register

log = logging.getLogger(__name__)


@register(EncoderType.CUSTOM_MAPPING)
class CustomEncoder(MappingEncoder):
    """Codes come from Config.mapping_fn.

    Nothing forces mapping_fn to be injective, so several categories may
    share a code and inverse_transform returns all of them.
    """

    def _build_mapping(self, data: list, config: Config) -> dict:
        fn = config.mapping_fn
        if fn is None:
            raise ConfigurationError("custom encoder requires Config.mapping_fn")

        mapping: dict = {}
        for el in data:
            if el in mapping:
                continue
            code = fn(el)
            if not is_int_code(code) or code < 0:
                raise ConfigurationError(
                    f"mapping_fn must return a non-negative int, got {code!r} for {el!r}"
                )
            mapping[el] = int(code)

        n_codes = len(set(mapping.values()))
        if n_codes < len(mapping):
            log.info(
                f"mapping_fn is not injective: {len(mapping)} categories "
                f"→ {n_codes} codes, inverse_transform will expand"
            )
        return mapping

    def _normalize_code(self, code) -> int:
        if not is_int_code(code):
            raise StrategyMismatchError(
                f"Transformed data not compatible with this encoder: "
                f"expected int code, got {type(code).__name__}"
            )
        return int(code)
