from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, field
from pathlib import Path

from ..datasets.smiles_file import SmilesFormat, load_records, resolve_input_path
from ..hashing.tautomer import DEFAULT_HASH_FUNCTION, TautomerHasher
from ..metrics.timing import PhaseTimer, timing_stats
from ..types import HashResult, SkippedRecord


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkConfig:
    max_samples: int = 10000
    fmt: SmilesFormat = field(default_factory=SmilesFormat)
    hash_function: str = DEFAULT_HASH_FUNCTION
    load_errors: str = "skip"
    hash_errors: str = "raise"
    timed: bool = False
    progress: bool = False

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass
class BenchmarkSummary:
    loaded: int
    skipped: int
    hashed: int
    read_wall: float
    read_cpu: float
    hash_wall: float
    hash_cpu: float
    results: list[HashResult]
    metrics: dict[str, float]

    def to_dict(self) -> dict[str, object]:
        return {
            "loaded": self.loaded,
            "skipped": self.skipped,
            "hashed": self.hashed,
            "read_wall_sec": round(self.read_wall, 3),
            "read_cpu_sec": round(self.read_cpu, 3),
            "hash_wall_sec": round(self.hash_wall, 3),
            "hash_cpu_sec": round(self.hash_cpu, 3),
            "metrics": {k: (v if math.isfinite(v) else None) for k, v in self.metrics.items()},
        }


def run_benchmark(path: str | Path, config: BenchmarkConfig | None = None) -> BenchmarkSummary:
    cfg = config if config is not None else BenchmarkConfig()
    path = resolve_input_path(path)
    hasher = TautomerHasher(hash_function=cfg.hash_function, errors=cfg.hash_errors, timed=cfg.timed)
    skipped: list[SkippedRecord] = []

    logger.info("read mols")
    with PhaseTimer("read") as read_timer:
        records = load_records(
            path,
            max_samples=cfg.max_samples,
            fmt=cfg.fmt,
            errors=cfg.load_errors,
            on_skip=skipped.append,
        )

    logger.info("generate hashes")
    with PhaseTimer("hash") as hash_timer:
        results = hasher.hash_records(records, progress=cfg.progress)

    logger.info("done")
    metrics = timing_stats(r.elapsed for r in results if r.elapsed is not None) if cfg.timed else {}
    return BenchmarkSummary(
        loaded=len(records),
        skipped=len(skipped),
        hashed=len(results),
        read_wall=read_timer.wall,
        read_cpu=read_timer.cpu,
        hash_wall=hash_timer.wall,
        hash_cpu=hash_timer.cpu,
        results=results,
        metrics=metrics,
    )
