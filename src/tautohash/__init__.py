from .benchmark import BenchmarkConfig, BenchmarkSummary, run_benchmark
from .datasets import SmilesFormat, iter_records, load_records
from .hashing import DEFAULT_HASH_FUNCTION, TautomerHasher, hash_all
from .types import HashError, HashResult, MoleculeRecord, RecordError, SkippedRecord

__version__ = "0.1.0"

__all__ = [
    "BenchmarkConfig",
    "BenchmarkSummary",
    "DEFAULT_HASH_FUNCTION",
    "HashError",
    "HashResult",
    "MoleculeRecord",
    "RecordError",
    "SkippedRecord",
    "SmilesFormat",
    "TautomerHasher",
    "hash_all",
    "iter_records",
    "load_records",
    "run_benchmark",
]
