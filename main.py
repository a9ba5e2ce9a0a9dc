#!/usr/bin/env python3
"""
Labello CLI.

Usage:
    python main.py encode --input data.csv --column city --strategy one_hot
    python main.py bench --strategy ordinal --categories 2 3 4 5 1000
"""

import sys
import logging
import argparse
from pathlib import Path

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
log = logging.getLogger("labello")


def _load_cfg(path: str) -> dict:
    from labello.utils.config import load_config

    if not Path(path).exists():
        log.info(f"No config at {path}, using defaults")
        return {"encoder": {}, "bench": {}}
    return load_config(path)


def cmd_encode(args):
    import pandas as pd
    from labello.core.schema import Config
    from labello.frame import encode_frame
    from labello.utils.config import config_from_dict

    cfg = _load_cfg(args.config)
    section = dict(cfg.get("encoder") or {})
    if args.strategy:
        section["strategy"] = args.strategy
    if args.max_classes is not None:
        section["max_classes"] = args.max_classes
    strategy, config = config_from_dict(section)

    df = pd.read_csv(args.input)
    out, encoders = encode_frame(df, args.column, strategy=strategy, config=config)

    for col, enc in encoders.items():
        log.info(f"{col}: {enc}")

    if args.output:
        out.to_csv(args.output, index=False)
        log.info(f"Wrote {len(out)} rows to {args.output}")
    else:
        out.to_csv(sys.stdout, index=False)


def cmd_bench(args):
    from labello.bench import run_benchmark, format_results

    cfg = _load_cfg(args.config)
    b = dict(cfg.get("bench") or {})

    rows = run_benchmark(
        category_counts=args.categories or b.get("category_counts"),
        n_samples=args.samples or b.get("n_samples", 10_000),
        strategy=args.strategy or b.get("strategy"),
        max_classes=args.max_classes if args.max_classes is not None else b.get("max_classes"),
        repeats=args.repeats or b.get("repeats", 10),
        seed=b.get("seed", 42),
    )
    print(format_results(rows))


def main(argv=None):
    p = argparse.ArgumentParser(description="Labello CLI")
    p.add_argument("--config", default="configs/default.yaml")
    sub = p.add_subparsers(dest="command")

    strategies = ["ordinal", "one_hot", "custom"]

    enc = sub.add_parser("encode")
    enc.add_argument("--input", required=True)
    enc.add_argument("--column", action="append", required=True)
    enc.add_argument("--strategy", choices=strategies)
    enc.add_argument("--max-classes", type=int, default=None)
    enc.add_argument("--output")

    bn = sub.add_parser("bench")
    bn.add_argument("--strategy", choices=strategies)
    bn.add_argument("--samples", type=int)
    bn.add_argument("--categories", type=int, nargs="+")
    bn.add_argument("--max-classes", type=int, default=None)
    bn.add_argument("--repeats", type=int)

    args = p.parse_args(argv)
    if args.command == "encode":
        cmd_encode(args)
    elif args.command == "bench":
        cmd_bench(args)
    else:
        p.print_help()


if __name__ == "__main__":
    main()
