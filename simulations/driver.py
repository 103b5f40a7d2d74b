# simulations/driver.py

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from guess_distribution.trial import SECRET_HIGH, SECRET_LOW, BinarySearchTrialRunner

from .common import Histogram, SimulationResult, SimulationSpec, Timer


def simulate(
    spec: SimulationSpec,
    seed: Optional[int] = None,
    runner: Optional[BinarySearchTrialRunner] = None,
    out: Callable[[str], None] = print,
    preset: str = "custom",
) -> SimulationResult:
    """
    Run spec.trials binary-search trials over [SECRET_LOW, SECRET_HIGH] and
    tabulate guess counts.

    Diverged trials do not stop the run; they are tallied apart from the
    guess-count bins.
    """
    meta: Dict[str, Any] = {}
    if runner is None:
        runner = BinarySearchTrialRunner(seed=seed)
        meta["seed"] = seed

    histogram = Histogram()
    interval = spec.progress_interval

    with Timer() as t:
        for i in range(1, spec.trials + 1):
            histogram.record(runner.run(SECRET_LOW, SECRET_HIGH))

            if interval is not None and i % interval == 0:
                out(f"{i} runs")

    return SimulationResult(
        preset=preset,
        spec=spec,
        histogram=histogram,
        runtime_s=t.elapsed_s,
        meta=meta,
    )


# --- Registry / presets ------------------------------------------------------

def get_preset(name: str) -> SimulationSpec:
    name = name.strip().lower()
    if name not in PRESETS:
        raise ValueError(f"unknown preset '{name}'. Available: {sorted(PRESETS.keys())}")
    return PRESETS[name]


# Both presets scale the bars so the tallest bin stays around 40 markers.
PRESETS: Dict[str, SimulationSpec] = {
    "small": SimulationSpec(trials=1_000_001, progress_interval=None, bar_divisor=10_000),
    "large": SimulationSpec(trials=100_000_000, progress_interval=10_000_000, bar_divisor=1_000_000),
}

DEFAULT_PRESET = "large"
