"""Index → fixed-width bit-vector conversion used by the one-hot encoder."""

from labello.core.errors import InvariantViolation
from labello.core.schema import BitVector


def bit_width(n_categories: int) -> int:
    """Bits needed for indices 0..n-1. At least one bit."""
    if n_categories <= 0:
        return 0
    return max(1, (n_categories - 1).bit_length())


def to_bits(index: int, width: int) -> BitVector:
    """Binary representation of index, MSB first, left-padded with zeros."""
    if index < 0:
        raise InvariantViolation(f"negative index {index}")
    digits = format(index, f"0{width}b")
    if len(digits) > width:
        raise InvariantViolation(f"index {index} does not fit in {width} bits")

    bits = []
    for ch in digits:
        if ch == "1":
            bits.append(True)
        elif ch == "0":
            bits.append(False)
        else:
            raise InvariantViolation(f"Invalid conversion to binary: {digits!r}")
    return tuple(bits)


def from_bits(bits: BitVector) -> int:
    value = 0
    for b in bits:
        value = (value << 1) | int(b)
    return value
