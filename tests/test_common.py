import pytest

from guess_distribution.trial import TrialOutcome
from simulations.common import (
    HEADER,
    SEPARATOR,
    Histogram,
    SimulationResult,
    SimulationSpec,
    Timer,
    bar,
    common_x_range,
    format_summary_line,
    render_histogram,
)


def make_histogram(counts, diverged=0):
    return Histogram(counts=dict(counts), diverged=diverged)


def test_record_creates_bins_lazily():
    h = Histogram()
    assert h.counts == {}

    h.record(TrialOutcome(guesses=6, secret=1))
    h.record(TrialOutcome(guesses=6, secret=2))
    h.record(TrialOutcome(guesses=3, secret=3))

    assert h.counts == {6: 2, 3: 1}
    assert h.total() == 3


def test_diverged_outcomes_kept_out_of_bins():
    h = Histogram()
    h.record(TrialOutcome(guesses=101, secret=75, diverged=True))
    assert h.counts == {}
    assert h.diverged == 1
    assert h.total() == 1


def test_bar_always_has_one_marker():
    assert bar(0, 10_000) == "X"
    assert bar(5, 10_000) == "X"
    assert bar(10_000, 10_000) == "X"
    assert bar(20_000, 10_000) == "XX"
    assert bar(37_999, 10_000) == "XXX"
    assert bar(3, 1, marker="#") == "###"


def test_render_sorted_and_formatted():
    h = make_histogram({7: 370_000, 1: 10_000, 4: 80_000})
    lines = render_histogram(h, bar_divisor=10_000)

    assert lines[:2] == [SEPARATOR, HEADER]
    assert lines[2:] == [
        "1: 10000 | X",
        "4: 80000 | XXXXXXXX",
        "7: 370000 | " + "X" * 37,
    ]


def test_render_is_idempotent_and_ascending():
    h = make_histogram({5: 16, 2: 2, 7: 37, 1: 1, 6: 32, 3: 4, 4: 8})
    first = render_histogram(h, bar_divisor=10)
    second = render_histogram(h, bar_divisor=10)
    assert first == second

    keys = [int(line.split(":")[0]) for line in first[2:]]
    assert keys == sorted(set(keys))
    assert len(keys) == len(h.counts)


def test_render_empty_histogram_has_only_header():
    assert render_histogram(Histogram(), bar_divisor=1) == [SEPARATOR, HEADER]


def test_render_reports_diverged_trials():
    lines = render_histogram(make_histogram({6: 3}, diverged=2), bar_divisor=1)
    assert lines[-1] == "diverged: 2"


def test_spec_validation():
    with pytest.raises(ValueError):
        SimulationSpec(trials=-1)
    with pytest.raises(ValueError):
        SimulationSpec(trials=10, progress_interval=0)
    with pytest.raises(ValueError):
        SimulationSpec(trials=10, bar_divisor=0)


def test_result_checks_histogram_total():
    spec = SimulationSpec(trials=3, bar_divisor=1)
    SimulationResult(preset="p", spec=spec, histogram=make_histogram({2: 2}, diverged=1))
    with pytest.raises(ValueError):
        SimulationResult(preset="p", spec=spec, histogram=make_histogram({2: 2}))


def test_summary_line():
    spec = SimulationSpec(trials=2, bar_divisor=1)
    r = SimulationResult(preset="small", spec=spec, histogram=make_histogram({1: 2}), runtime_s=1.5)
    assert format_summary_line(r) == "small: trials=2, diverged=0, runtime=1.500s"


def test_common_x_range_spans_all_results():
    a = SimulationResult(preset="a", spec=SimulationSpec(trials=2, bar_divisor=1), histogram=make_histogram({2: 1, 5: 1}))
    b = SimulationResult(preset="b", spec=SimulationSpec(trials=2, bar_divisor=1), histogram=make_histogram({1: 1, 4: 1}))
    assert common_x_range([a, b]) == (1, 5)


def test_common_x_range_empty_histograms():
    empty = SimulationResult(preset="e", spec=SimulationSpec(trials=0, bar_divisor=1), histogram=Histogram())
    assert common_x_range([empty]) == (1, 1)
    with pytest.raises(ValueError):
        common_x_range([])


def test_timer_measures_block():
    with Timer() as t:
        assert t.elapsed_s is None
    assert t.elapsed_s >= 0.0
