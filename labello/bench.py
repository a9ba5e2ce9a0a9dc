"""
Fit / transform timing harness.

Generates synthetic string categories and times each strategy over a
range of cardinalities. Best-of-N wall clock, no external profiler.
"""

import logging
import time
import zlib
from typing import Optional

import numpy as np
import pandas as pd

from labello.core.schema import Config, EncoderType
from labello.encoder import Encoder

log = logging.getLogger(__name__)

DEFAULT_CATEGORY_COUNTS = [2, 3, 4, 5, 1000]


def make_categories(n_samples: int, n_categories: int, seed: int = 42) -> list[str]:
    """n_samples labels drawn uniformly from n_categories distinct strings."""
    if n_categories < 1:
        raise ValueError(f"n_categories must be >= 1, got {n_categories}")
    rng = np.random.default_rng(seed)
    draws = rng.integers(0, n_categories, size=n_samples)
    return [f"cat_{i}" for i in draws]


def _hash_mapping(el) -> int:
    return zlib.crc32(str(el).encode()) & 0xFFFF


def _best_ms(fn, repeats: int) -> float:
    best = float("inf")
    for _ in range(repeats):
        t0 = time.perf_counter()
        fn()
        best = min(best, time.perf_counter() - t0)
    return best * 1000.0


def run_benchmark(
    category_counts: Optional[list[int]] = None,
    n_samples: int = 10_000,
    strategy: "EncoderType | str | None" = None,
    max_classes: Optional[int] = None,
    repeats: int = 10,
    seed: int = 42,
) -> list[dict]:
    """Time fit and transform for each category count. One row per count."""
    counts = category_counts or DEFAULT_CATEGORY_COUNTS
    kind = EncoderType.parse(strategy)
    mapping_fn = _hash_mapping if kind is EncoderType.CUSTOM_MAPPING else None
    config = Config(max_classes=max_classes, mapping_fn=mapping_fn)

    rows = []
    for ncat in counts:
        data = make_categories(n_samples, ncat, seed)
        enc = Encoder(kind)

        fit_ms = _best_ms(lambda: enc.fit(data, config), repeats)
        transform_ms = _best_ms(lambda: enc.transform(data), repeats)

        rows.append({
            "strategy": kind.value,
            "n_categories": ncat,
            "n_samples": n_samples,
            "nclasses": enc.nclasses(),
            "fit_ms": round(fit_ms, 3),
            "transform_ms": round(transform_ms, 3),
        })
        log.info(
            f"{kind.value} ncat={ncat}: fit {fit_ms:.2f} ms, "
            f"transform {transform_ms:.2f} ms"
        )
    return rows


def format_results(rows: list[dict]) -> str:
    if not rows:
        return "(no results)"
    return pd.DataFrame(rows).to_string(index=False)
