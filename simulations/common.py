# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import time

from guess_distribution.trial import TrialOutcome


SEPARATOR = "---------------"
HEADER = "# guesses : count"


@dataclass(frozen=True)
class SimulationSpec:
    """
    Parameters of one simulation run.
    """
    trials: int
    progress_interval: Optional[int] = None  # print "<n> runs" every n trials
    bar_divisor: int = 1_000_000  # occurrences per bar marker

    def __post_init__(self) -> None:
        if self.trials < 0:
            raise ValueError("trials must be >= 0")
        if self.progress_interval is not None and self.progress_interval <= 0:
            raise ValueError("progress_interval must be > 0")
        if self.bar_divisor <= 0:
            raise ValueError("bar_divisor must be > 0")


@dataclass
class Histogram:
    """
    Guess count -> number of trials that took exactly that many guesses.

    Trials stopped by the safety valve are tallied in `diverged` instead of
    under their guess count.
    """
    counts: Dict[int, int] = field(default_factory=dict)
    diverged: int = 0

    def record(self, outcome: TrialOutcome) -> None:
        if outcome.diverged:
            self.diverged += 1
            return
        # bins are created on first occurrence
        self.counts.setdefault(outcome.guesses, 0)
        self.counts[outcome.guesses] += 1

    def total(self) -> int:
        total = self.diverged
        for c in self.counts.values():
            total += c
        return total

    def sorted_items(self) -> List[Tuple[int, int]]:
        return sorted(self.counts.items())


@dataclass
class SimulationResult:
    """
    Common return type for all simulation runs.
    """
    preset: str
    spec: SimulationSpec
    histogram: Histogram

    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Sanity: every trial lands in exactly one bin
        expected = self.spec.trials
        actual = self.histogram.total()
        if actual != expected:
            raise ValueError(
                f"histogram total mismatch: expected {expected}, got {actual}"
            )


class Timer:
    """
    Wall-clock duration of a trial loop, on a monotonic clock.

        with Timer() as t:
            simulate...
        t.elapsed_s  # None until the block exits
    """
    def __init__(self) -> None:
        self._t0: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed_s = time.perf_counter() - self._t0


def bar(count: int, bar_divisor: int, marker: str = "X") -> str:
    """
    Text bar for one bin. Always at least one marker, so small bins
    stay visible.
    """
    return marker * max(1, count // bar_divisor)


def render_histogram(h: Histogram, bar_divisor: int, marker: str = "X") -> List[str]:
    """
    Render the histogram as text lines, ascending by guess count:

        ---------------
        # guesses : count
        <guesses>: <count> | XXXX

    A trailing "diverged: <n>" line is added only when the safety valve fired.
    """
    lines = [SEPARATOR, HEADER]
    for guesses, count in h.sorted_items():
        lines.append(f"{guesses}: {count} | {bar(count, bar_divisor, marker)}")
    if h.diverged:
        lines.append(f"diverged: {h.diverged}")
    return lines


def common_x_range(results: List[SimulationResult]) -> Tuple[int, int]:
    """
    Compute a shared (xmin, xmax) of guess counts across multiple results
    for 'same x-axis' bar chart comparisons.
    """
    if not results:
        raise ValueError("results must be non-empty")

    keys = [k for r in results for k in r.histogram.counts]
    if not keys:
        return 1, 1
    return min(keys), max(keys)


def format_summary_line(r: SimulationResult) -> str:
    """
    Human-friendly one-liner for printing after a run.
    """
    return (
        f"{r.preset}: trials={r.spec.trials}, diverged={r.histogram.diverged}"
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )
