from .timing import PhaseTimer, timing_stats

__all__ = ["PhaseTimer", "timing_stats"]
