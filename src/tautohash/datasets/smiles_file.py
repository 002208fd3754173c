from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator

import pyarrow.parquet as pq
from rdkit import Chem

from ..types import MoleculeRecord, RecordError, SkippedRecord, check_error_policy


logger = logging.getLogger(__name__)

PARQUET_SUFFIXES = (".parquet", ".pq")


@dataclass(frozen=True)
class SmilesFormat:
    delimiter: str = " \t"
    smiles_column: int = 1
    # negative: no name column
    name_column: int = 0
    title_line: bool = False
    smiles_field: str = "smiles"
    name_field: str | None = "name"


SkipCallback = Callable[[SkippedRecord], None]


def resolve_input_path(path: str | Path) -> Path:
    p = Path(path).expanduser()
    if not p.exists():
        raise FileNotFoundError(f"input not found: {p}")
    if not p.is_file():
        raise FileNotFoundError(f"input is not a regular file: {p}")
    return p.resolve()


def prepare_mol(mol: Chem.Mol) -> Chem.Mol:
    # unsanitized input: valences must be computed before conjugation,
    # and the tautomer hashes read conjugation flags
    mol.UpdatePropertyCache()
    Chem.SetConjugation(mol)
    return mol


def _mol_name(mol: Chem.Mol) -> str:
    if mol.HasProp("_Name"):
        return mol.GetProp("_Name")
    return ""


def iter_text_mols(path: Path, fmt: SmilesFormat) -> Iterator[tuple[str, Chem.Mol | None]]:
    supplier = Chem.SmilesMolSupplier(
        str(path),
        fmt.delimiter,
        fmt.smiles_column,
        fmt.name_column,
        fmt.title_line,
        False,
    )
    for mol in supplier:
        if mol is None:
            yield "", None
        else:
            yield _mol_name(mol), mol


def iter_parquet_mols(
    path: Path, fmt: SmilesFormat, batch_size: int = 2048
) -> Iterator[tuple[str, Chem.Mol | None]]:
    pf = pq.ParquetFile(str(path))
    columns = [fmt.smiles_field]
    if fmt.name_field is not None and fmt.name_field in pf.schema_arrow.names:
        columns.append(fmt.name_field)
    for batch in pf.iter_batches(batch_size=batch_size, columns=columns):
        table = batch.to_pydict()
        names = table.get(fmt.name_field) if len(columns) > 1 else None
        for i, smiles in enumerate(table[fmt.smiles_field]):
            name = names[i] if names is not None and names[i] is not None else ""
            if not isinstance(smiles, str) or not smiles:
                yield str(name), None
                continue
            yield str(name), Chem.MolFromSmiles(smiles, sanitize=False)


def _iter_source(path: Path, fmt: SmilesFormat) -> Iterator[tuple[str, Chem.Mol | None]]:
    if path.suffix.lower() in PARQUET_SUFFIXES:
        return iter_parquet_mols(path, fmt)
    return iter_text_mols(path, fmt)


def _prepare_records(
    source: Iterator[tuple[str, Chem.Mol | None]],
    max_samples: int,
    errors: str,
    on_skip: SkipCallback | None,
) -> Iterator[MoleculeRecord]:
    def skip(index: int, name: str, reason: str) -> None:
        logger.debug("skipping record %d (%s): %s", index, name or "unnamed", reason)
        if on_skip is not None:
            on_skip(SkippedRecord(index=index, name=name, reason=reason))

    count = 0
    for index, (name, mol) in enumerate(source):
        if mol is None:
            skip(index, name, "parse failed")
            continue
        try:
            prepare_mol(mol)
        except Exception as exc:
            if errors == "raise":
                raise RecordError(index, name, str(exc)) from exc
            skip(index, name, str(exc) or type(exc).__name__)
            continue

        count += 1
        yield MoleculeRecord(index=index, name=name, mol=mol)
        if max_samples > 0 and count >= max_samples:
            return


def iter_records(
    path: str | Path,
    max_samples: int = 0,
    fmt: SmilesFormat | None = None,
    errors: str = "skip",
    on_skip: SkipCallback | None = None,
) -> Iterator[MoleculeRecord]:
    check_error_policy(errors)
    fmt = fmt if fmt is not None else SmilesFormat()
    source = _iter_source(resolve_input_path(path), fmt)
    return _prepare_records(source, max_samples=max_samples, errors=errors, on_skip=on_skip)


def load_records(
    path: str | Path,
    max_samples: int = 0,
    fmt: SmilesFormat | None = None,
    errors: str = "skip",
    on_skip: SkipCallback | None = None,
) -> list[MoleculeRecord]:
    records = list(iter_records(path, max_samples=max_samples, fmt=fmt, errors=errors, on_skip=on_skip))
    logger.info("read: %d mols.", len(records))
    return records
