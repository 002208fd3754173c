#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rdkit import Chem, RDLogger

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

from tautohash.datasets import iter_records, resolve_input_path
from tautohash.hashing import TautomerHasher


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Print the first records of a SMILES file with their tautomer hash.")
    parser.add_argument("--input", type=str, required=True, help="Path to the SMILES file.")
    parser.add_argument("--limit", type=int, default=3, help="Number of records to print.")
    args = parser.parse_args(argv)

    RDLogger.DisableLog("rdApp.error")
    path = resolve_input_path(args.input)
    hasher = TautomerHasher(errors="skip")
    records = list(iter_records(path, max_samples=args.limit)) if args.limit > 0 else []
    hashes = {res.index: res.hash for res in hasher.hash_records(records)}

    print(f"path: {path}")
    print(f"shown: {len(records)}")
    print(f"hash: {hasher.hash_function}")
    print("---")
    for rec in records:
        smi = Chem.MolToSmiles(rec.mol)
        smi_preview = smi if len(smi) <= 120 else smi[:120] + "..."
        print(f"[{rec.index}] {rec.name or '-'}  SMILES: {smi_preview}")
        print(f"    {hashes.get(rec.index, '<hash failed>')}")
    print("---")


if __name__ == "__main__":
    main()
