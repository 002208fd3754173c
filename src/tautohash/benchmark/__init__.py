from .export import plot_hash_times, results_to_table, write_results
from .runner import BenchmarkConfig, BenchmarkSummary, run_benchmark

__all__ = [
    "BenchmarkConfig",
    "BenchmarkSummary",
    "plot_hash_times",
    "results_to_table",
    "run_benchmark",
    "write_results",
]
