"""
One-hot (binary) encoding.

Each category first gets a first-seen ordinal index, which is then written
out in binary, MSB first, zero-padded on the left to the width of the
largest index. Four categories therefore need two bits, five need three.
There is no class ceiling: max_classes is ignored.
"""

import logging

from labello.core.errors import StrategyMismatchError
from labello.core.schema import BitVector, Config, EncoderType, is_int_code
from labello.encoders.base import MappingEncoder, first_seen_indices
from labello.encoders.binary import bit_width, to_bits
from labello.encoders.registry import register

log = logging.getLogger(__name__)


@register(EncoderType.ONE_HOT)
class OneHotEncoder(MappingEncoder):

    def _build_mapping(self, data: list, config: Config) -> dict:
        if config.max_classes is not None:
            log.debug("max_classes is ignored by the one-hot encoder")

        indices = first_seen_indices(data)
        width = bit_width(len(indices))
        return {key: to_bits(idx, width) for key, idx in indices.items()}

    def _normalize_code(self, code) -> BitVector:
        if isinstance(code, (str, bytes)) or is_int_code(code):
            raise StrategyMismatchError(
                f"Transformed data not compatible with this encoder: "
                f"expected bit-vector, got {type(code).__name__}"
            )
        try:
            bits = tuple(code)
        except TypeError:
            raise StrategyMismatchError(
                f"Transformed data not compatible with this encoder: "
                f"expected bit-vector, got {type(code).__name__}"
            ) from None
        # numpy rows hold np.bool_, compare by value
        if not all(b in (0, 1) for b in bits):
            raise StrategyMismatchError(f"bit-vector contains non-bool values: {code!r}")
        return tuple(bool(b) for b in bits)

    @property
    def width(self) -> int:
        """Bit-vector length of the fitted mapping (0 when unfitted)."""
        return bit_width(len(self._mapping))
