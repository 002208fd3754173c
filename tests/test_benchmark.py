import json
import logging

import pyarrow.csv as pa_csv
import pyarrow.parquet as pq
import pytest

from tautohash.benchmark import BenchmarkConfig, plot_hash_times, run_benchmark, write_results
from tautohash.types import HashResult


LINES = ["a CCO", "bad C1CC(", "b CC(=O)N", "c CC(O)=N", "d c1ccccc1"]


def test_run_benchmark_summary(write_smi, caplog):
    with caplog.at_level(logging.INFO, logger="tautohash"):
        summary = run_benchmark(write_smi(LINES))
    assert summary.loaded == 4
    assert summary.skipped == 1
    assert summary.hashed == 4
    assert summary.results[1].hash == summary.results[2].hash
    assert summary.metrics == {}
    messages = [rec.getMessage() for rec in caplog.records]
    assert messages.index("read mols") < messages.index("read: 4 mols.") < messages.index("generate hashes")
    assert messages[-1] == "done"
    assert any(m.startswith("hash: wall") for m in messages)


def test_run_benchmark_respects_limit(write_smi):
    summary = run_benchmark(write_smi(LINES), BenchmarkConfig(max_samples=2))
    assert summary.loaded == 2
    assert [r.name for r in summary.results] == ["a", "b"]


def test_run_benchmark_timed(write_smi):
    summary = run_benchmark(write_smi(LINES), BenchmarkConfig(timed=True))
    assert summary.metrics["count"] == 4.0
    payload = summary.to_dict()
    assert "results" not in payload
    json.dumps(payload)


def test_run_benchmark_missing_file(tmp_path, caplog):
    with caplog.at_level(logging.DEBUG, logger="tautohash"):
        with pytest.raises(FileNotFoundError):
            run_benchmark(tmp_path / "nope.smi")
    assert caplog.records == []


def test_summary_metrics_are_json_safe(write_smi):
    summary = run_benchmark(write_smi(["bad C1CC(", "worse Xy"]), BenchmarkConfig(timed=True))
    assert summary.hashed == 0
    payload = summary.to_dict()
    assert payload["metrics"]["count"] == 0.0
    assert payload["metrics"]["mean"] is None
    json.dumps(payload, allow_nan=False)


def test_config_to_dict_is_json_ready():
    payload = BenchmarkConfig().to_dict()
    assert payload["hash_function"] == "HetAtomTautomer"
    assert payload["max_samples"] == 10000
    assert payload["fmt"]["smiles_column"] == 1
    json.dumps(payload)


RESULTS = [
    HashResult(index=0, name="a", hash="h0", elapsed=0.5),
    HashResult(index=2, name="b", hash="h1", elapsed=None),
]


def test_write_results_parquet(tmp_path):
    out = write_results(RESULTS, tmp_path / "out" / "hashes.parquet")
    table = pq.read_table(out).to_pydict()
    assert table["index"] == [0, 2]
    assert table["hash"] == ["h0", "h1"]
    assert table["elapsed"] == [0.5, None]


@pytest.mark.parametrize("suffix,delimiter", [(".csv", ","), (".tsv", "\t")])
def test_write_results_text(tmp_path, suffix, delimiter):
    out = write_results(RESULTS, tmp_path / f"hashes{suffix}")
    header = out.read_text(encoding="utf-8").splitlines()[0]
    assert header.replace('"', "").split(delimiter) == ["index", "name", "hash", "elapsed"]
    table = pa_csv.read_csv(out, parse_options=pa_csv.ParseOptions(delimiter=delimiter)).to_pydict()
    assert table["name"] == ["a", "b"]


def test_plot_hash_times(tmp_path):
    assert plot_hash_times([], tmp_path / "empty.png") is None
    out = plot_hash_times([1e-5, 2e-5, 4e-5], tmp_path / "times.png")
    assert out is not None and out.exists()
