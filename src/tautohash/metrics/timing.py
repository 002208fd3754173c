from __future__ import annotations

import logging
import time
from typing import Iterable

import numpy as np


logger = logging.getLogger(__name__)


class PhaseTimer:
    def __init__(self, label: str, log: bool = True) -> None:
        self.label = label
        self.log = log
        self.wall = 0.0
        self.cpu = 0.0
        self._wall0 = 0.0
        self._cpu0 = 0.0

    def __enter__(self) -> "PhaseTimer":
        self._wall0 = time.perf_counter()
        self._cpu0 = time.process_time()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.wall = time.perf_counter() - self._wall0
        self.cpu = time.process_time() - self._cpu0
        if self.log and exc_type is None:
            logger.info("%s: wall %.3fs cpu %.3fs", self.label, self.wall, self.cpu)
        return False


def timing_stats(values: Iterable[float]) -> dict[str, float]:
    arr = np.asarray(list(values), dtype=np.float64)
    if arr.size == 0:
        return {"count": 0.0, "total": 0.0, "mean": float("nan"), "median": float("nan")}

    total = float(np.sum(arr))
    return {
        "count": float(arr.size),
        "total": total,
        "mean": float(np.mean(arr)),
        "median": float(np.median(arr)),
        "p90": float(np.percentile(arr, 90)),
        "p95": float(np.percentile(arr, 95)),
        "min": float(np.min(arr)),
        "max": float(np.max(arr)),
        "per_sec": float(arr.size / total) if total > 0 else float("inf"),
    }
