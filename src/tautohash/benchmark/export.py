from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

import matplotlib.pyplot as plt
import numpy as np
import pyarrow as pa
import pyarrow.csv as pa_csv
import pyarrow.parquet as pq

from ..types import HashResult


RESULT_SCHEMA = pa.schema(
    [
        ("index", pa.int64()),
        ("name", pa.string()),
        ("hash", pa.string()),
        ("elapsed", pa.float64()),
    ]
)


def results_to_table(results: Sequence[HashResult]) -> pa.Table:
    return pa.Table.from_pydict(
        {
            "index": [r.index for r in results],
            "name": [r.name for r in results],
            "hash": [r.hash for r in results],
            "elapsed": [r.elapsed for r in results],
        },
        schema=RESULT_SCHEMA,
    )


def write_results(results: Sequence[HashResult], path: str | Path) -> Path:
    out_path = Path(path).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    table = results_to_table(results)
    suffix = out_path.suffix.lower()
    if suffix in {".parquet", ".pq"}:
        pq.write_table(table, str(out_path))
    else:
        delimiter = "," if suffix == ".csv" else "\t"
        pa_csv.write_csv(table, str(out_path), write_options=pa_csv.WriteOptions(delimiter=delimiter))
    return out_path


def plot_hash_times(values: Iterable[float], out_path: str | Path) -> Path | None:
    arr = np.asarray(list(values), dtype=np.float64)
    if arr.size == 0:
        return None
    arr_us = arr * 1e6
    fig, axes = plt.subplots(1, 2, figsize=(10, 4))

    axes[0].hist(arr_us, bins=50, color="#4C78A8", alpha=0.85)
    axes[0].set_xlabel("Hash time (us)")
    axes[0].set_ylabel("Count")
    axes[0].set_title("Per-molecule Hash Time")

    sorted_arr = np.sort(arr_us)
    cdf = np.arange(1, len(sorted_arr) + 1) / float(len(sorted_arr))
    axes[1].plot(sorted_arr, cdf, color="#F58518")
    axes[1].set_xlabel("Hash time (us)")
    axes[1].set_ylabel("CDF")
    axes[1].set_ylim(0.0, 1.0)
    axes[1].grid(alpha=0.3)
    axes[1].set_title("Hash Time CDF")

    fig.tight_layout()
    out = Path(out_path).expanduser().resolve()
    out.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out, dpi=200)
    plt.close(fig)
    return out
