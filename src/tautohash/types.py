from __future__ import annotations

from dataclasses import dataclass

from rdkit import Chem


@dataclass(frozen=True)
class MoleculeRecord:
    index: int
    name: str
    mol: Chem.Mol


@dataclass(frozen=True)
class HashResult:
    index: int
    name: str
    hash: str
    elapsed: float | None = None


@dataclass(frozen=True)
class SkippedRecord:
    index: int
    name: str
    reason: str


class RecordError(RuntimeError):
    def __init__(self, index: int, name: str, message: str) -> None:
        super().__init__(f"record {index} ({name or 'unnamed'}): {message}")
        self.index = index
        self.name = name


class HashError(RecordError):
    pass


ERROR_POLICIES = ("skip", "raise")


def check_error_policy(policy: str) -> str:
    if policy not in ERROR_POLICIES:
        raise ValueError(f"Unknown error policy: {policy!r} (expected one of {', '.join(ERROR_POLICIES)})")
    return policy
