"""numpy / pandas adapters around Encoder."""

import logging
from typing import Optional

import numpy as np
import pandas as pd

from labello.core.schema import Config, EncoderType, Transform
from labello.encoder import Encoder

log = logging.getLogger(__name__)


def _is_missing(val) -> bool:
    return val is None or val is pd.NA or val is pd.NaT or (isinstance(val, float) and pd.isna(val))


def to_array(transform: Transform, width: Optional[int] = None) -> np.ndarray:
    """Transform → ndarray.

    Integer codes give a (N,) uint64 array; one-hot codes give an
    (N, width) bool matrix. width is only needed for an empty one-hot
    Transform.
    """
    if transform.kind.is_bitvector:
        if transform.is_empty:
            return np.zeros((0, width or 0), dtype=bool)
        return np.array(transform.codes, dtype=bool)
    return np.array(transform.codes, dtype=np.uint64)


def encode_series(
    series: pd.Series,
    encoder: Encoder,
    config: Optional[Config] = None,
    fit: bool = True,
) -> pd.Series:
    """Encode a Series, keeping the index of the rows that survive.

    Rows whose value is unknown to the encoder are dropped, same as
    Encoder.transform. One-hot codes are stored as tuples of bools.
    Missing values (None, NaN, NA, NaT) all become the same np.nan
    category whatever the column dtype.
    """
    values = [np.nan if _is_missing(v) else v for v in series.tolist()]
    if fit:
        encoder.fit(values, config)

    known = encoder.mapping
    keep = [i for i, v in enumerate(values) if v in known]
    codes = encoder.transform(values).codes

    dropped = len(values) - len(keep)
    if dropped:
        log.warning(f"{series.name}: dropped {dropped} rows with unknown categories")

    dtype = object if encoder.strategy.is_bitvector else "uint64"
    return pd.Series(codes, index=series.index[keep], name=series.name, dtype=dtype)


def encode_frame(
    df: pd.DataFrame,
    columns: list[str],
    strategy: "EncoderType | str | None" = None,
    config: Optional[Config] = None,
) -> tuple[pd.DataFrame, dict[str, Encoder]]:
    """Fit one encoder per column and append the encoded columns.

    Ordinal/custom add `<col>_encoded`; one-hot adds one bool column per
    bit, `<col>_b0` (most significant) .. `<col>_b{width-1}`.
    """
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise KeyError(f"Columns not in frame: {missing}")

    out = df.copy()
    encoders: dict[str, Encoder] = {}

    for col in columns:
        enc = Encoder(strategy)
        encoded = encode_series(df[col], enc, config)
        encoders[col] = enc

        if enc.strategy.is_bitvector:
            bits = to_array(Transform(enc.strategy, encoded.tolist()), enc.width)
            for i in range(enc.width):
                out[f"{col}_b{i}"] = bits[:, i]
        else:
            out[f"{col}_encoded"] = encoded

        log.info(f"Encoded '{col}': {len(enc)} categories → {enc.nclasses()} classes")

    return out, encoders
