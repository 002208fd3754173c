#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from rdkit import RDLogger

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

from tautohash.benchmark import BenchmarkConfig, plot_hash_times, run_benchmark, write_results
from tautohash.datasets import SmilesFormat
from tautohash.hashing import DEFAULT_HASH_FUNCTION, HASH_FUNCTIONS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Time SMILES parsing and RDKit tautomer hashing on a SMILES file.")
    parser.add_argument("input", type=str, help="SMILES file (name and SMILES columns) or .parquet table.")
    parser.add_argument("--max-samples", type=int, default=10000, help="Max molecules to load (0 means all).")
    parser.add_argument(
        "--hash-function",
        type=str,
        default=DEFAULT_HASH_FUNCTION,
        choices=sorted(HASH_FUNCTIONS),
        help="rdMolHash variant to time.",
    )
    parser.add_argument("--delimiter", type=str, default=" \t", help="Column delimiter characters.")
    parser.add_argument("--smiles-column", type=int, default=1)
    parser.add_argument("--name-column", type=int, default=0, help="Name column (-1 for none).")
    parser.add_argument("--title-line", action="store_true", help="Skip the first line of the input.")
    parser.add_argument("--on-load-error", choices=["skip", "raise"], default="skip")
    parser.add_argument("--on-hash-error", choices=["skip", "raise"], default="raise")
    parser.add_argument("--timed", action="store_true", help="Record per-molecule hash times.")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar while hashing.")
    parser.add_argument("--output", type=str, default=None, help="Write hashes to .tsv/.csv/.parquet.")
    parser.add_argument("--plot", type=str, default=None, help="Histogram of per-molecule hash times (implies --timed).")
    parser.add_argument("--show-rdkit-errors", action="store_true", help="Keep RDKit parse errors on stderr.")
    parser.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    if not args.show_rdkit_errors:
        RDLogger.DisableLog("rdApp.error")

    config = BenchmarkConfig(
        max_samples=args.max_samples,
        fmt=SmilesFormat(
            delimiter=args.delimiter,
            smiles_column=args.smiles_column,
            name_column=args.name_column,
            title_line=bool(args.title_line),
        ),
        hash_function=args.hash_function,
        load_errors=args.on_load_error,
        hash_errors=args.on_hash_error,
        timed=bool(args.timed or args.plot),
        progress=bool(args.progress),
    )
    summary = run_benchmark(args.input, config)

    output_path = None
    if args.output:
        output_path = write_results(summary.results, args.output)
    plot_path = None
    if args.plot:
        plot_path = plot_hash_times((r.elapsed for r in summary.results if r.elapsed is not None), args.plot)

    out = {
        "input": str(Path(args.input).expanduser().resolve()),
        **summary.to_dict(),
        "output": str(output_path) if output_path is not None else None,
        "plot": str(plot_path) if plot_path is not None else None,
        "config": config.to_dict(),
    }
    print(json.dumps(out, indent=2, allow_nan=False))


if __name__ == "__main__":
    main()
