# simulations/run.py

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

from .common import SimulationResult, render_histogram
from .driver import DEFAULT_PRESET, get_preset, simulate


LOG_FORMAT = "[%(levelname)s] %(message)s"


def run_simulation(
    preset: str = DEFAULT_PRESET,
    seed: Optional[int] = None,
    out: Callable[[str], None] = print,
) -> SimulationResult:
    """
    Run a named preset and return its SimulationResult.

    Parameters
    ----------
    preset:
        Name of the preset ('small' or 'large').
    seed:
        RNG seed. None draws from OS entropy.
    out:
        Sink for progress lines.

    Returns
    -------
    SimulationResult
    """
    spec = get_preset(preset)
    return simulate(spec, seed=seed, out=out, preset=preset.strip().lower())


def report(result: SimulationResult, out: Callable[[str], None] = print) -> None:
    for line in render_histogram(result.histogram, result.spec.bar_divisor):
        out(line)


def configure_logging() -> None:
    # Diagnostics share stdout with the report.
    logging.basicConfig(stream=sys.stdout, level=logging.INFO, format=LOG_FORMAT)


def main() -> int:
    configure_logging()
    report(run_simulation())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
