from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Iterable

from rdkit import Chem
from rdkit.Chem import rdMolHash
from tqdm import tqdm

from ..types import HashError, HashResult, MoleculeRecord, check_error_policy


logger = logging.getLogger(__name__)

HASH_FUNCTIONS: dict[str, rdMolHash.HashFunction] = dict(rdMolHash.HashFunction.names)
DEFAULT_HASH_FUNCTION = "HetAtomTautomer"


def resolve_hash_function(name: str | rdMolHash.HashFunction) -> rdMolHash.HashFunction:
    if isinstance(name, rdMolHash.HashFunction):
        return name
    try:
        return HASH_FUNCTIONS[name]
    except KeyError:
        choices = ", ".join(sorted(HASH_FUNCTIONS))
        raise ValueError(f"Unknown hash function: {name!r} (choose from {choices})") from None


@dataclass
class TautomerHasher:
    hash_function: str = DEFAULT_HASH_FUNCTION
    errors: str = "raise"
    timed: bool = False

    def __post_init__(self) -> None:
        self._func = resolve_hash_function(self.hash_function)
        check_error_policy(self.errors)

    def hash_mol(self, mol: Chem.Mol) -> str:
        return rdMolHash.MolHash(mol, self._func)

    def hash_records(self, records: Iterable[MoleculeRecord], progress: bool = False) -> list[HashResult]:
        results: list[HashResult] = []
        if progress:
            records = tqdm(records, unit="mol")
        for rec in records:
            start = time.perf_counter() if self.timed else 0.0
            try:
                value = self.hash_mol(rec.mol)
            except Exception as exc:
                if self.errors == "raise":
                    raise HashError(rec.index, rec.name, str(exc)) from exc
                logger.warning("hash failed for record %d (%s): %s", rec.index, rec.name or "unnamed", exc)
                continue
            elapsed = time.perf_counter() - start if self.timed else None
            results.append(HashResult(index=rec.index, name=rec.name, hash=value, elapsed=elapsed))
        return results


def hash_all(
    records: Iterable[MoleculeRecord], hash_function: str = DEFAULT_HASH_FUNCTION
) -> list[str]:
    hasher = TautomerHasher(hash_function=hash_function)
    return [res.hash for res in hasher.hash_records(records)]
