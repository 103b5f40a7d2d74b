# simulations/compare.py

from __future__ import annotations

import argparse
import sys

import matplotlib.pyplot as plt

from .common import SimulationResult, common_x_range, format_summary_line
from .driver import PRESETS
from .run import configure_logging, report, run_simulation


# Seed is fixed unless you edit the file
DEFAULT_SEED = 42


def frequencies(r: SimulationResult):
    """
    (guess counts, fraction of trials) for plotting. Presets differ in trial
    volume, so raw counts are not comparable.
    """
    items = r.histogram.sorted_items()
    xs = [k for k, _ in items]
    trials = r.spec.trials or 1
    ys = [c / trials for _, c in items]
    return xs, ys


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Compare two presets of the guess-count simulation (same x-axis plots)."
    )
    parser.add_argument("--preset-a", required=True, choices=sorted(PRESETS), help="first preset")
    parser.add_argument("--preset-b", required=True, choices=sorted(PRESETS), help="second preset")

    args = parser.parse_args(argv)
    configure_logging()

    ra = run_simulation(args.preset_a, seed=DEFAULT_SEED)
    rb = run_simulation(args.preset_b, seed=DEFAULT_SEED)

    report(ra)
    report(rb)
    print(format_summary_line(ra))
    print(format_summary_line(rb))

    xmin, xmax = common_x_range([ra, rb])

    plt.figure(figsize=(12, 4))

    ax = plt.subplot(1, 2, 1)
    xs, ys = frequencies(ra)
    plt.bar(xs, ys)
    plt.title(ra.preset)
    plt.xlabel("Guesses")
    plt.ylabel("Fraction of trials")
    plt.xlim(xmin - 0.5, xmax + 0.5)

    plt.subplot(1, 2, 2, sharey=ax)
    xs, ys = frequencies(rb)
    plt.bar(xs, ys)
    plt.title(rb.preset)
    plt.xlabel("Guesses")
    plt.xlim(xmin - 0.5, xmax + 0.5)

    plt.suptitle(
        f"Compare: {ra.preset} (trials={ra.spec.trials}) vs "
        f"{rb.preset} (trials={rb.spec.trials})"
    )
    plt.tight_layout(rect=[0, 0.02, 1, 0.92])
    plt.show()

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
