import random

import pytest

from tradesim.simulator.models import format_period
from tradesim.simulator.trackers import RunningTrackers


def test_streaks_are_mutually_exclusive():
    trackers = RunningTrackers(peak_equity=1000)
    rng = random.Random(5)
    for index in range(200):
        label = f"day {index // 4}"
        if rng.random() < 0.5:
            trackers.record_win(label)
        else:
            trackers.record_loss(label)
        assert not (trackers.win_streak > 0 and trackers.loss_streak > 0)
    assert trackers.total_trades == 200


def test_best_streak_keeps_first_maximum():
    trackers = RunningTrackers(peak_equity=1000)
    trackers.record_win("a")
    trackers.record_win("b")
    trackers.record_loss("c")
    trackers.record_win("d")
    trackers.record_win("e")

    assert trackers.best_win_streak.length == 2
    assert trackers.best_win_streak.period == "a to b"
    assert trackers.best_loss_streak.period == "c to c"


def test_drawdown_uses_running_peak():
    trackers = RunningTrackers(peak_equity=1000)
    trackers.close_day("d1", 900)
    assert trackers.max_drawdown.pct == pytest.approx(10.0)

    trackers.close_day("d2", 950)
    assert trackers.drawdown_pct == pytest.approx(10.0)
    assert trackers.max_drawdown.period == "d1 to d1"

    trackers.close_day("d3", 1100)
    assert trackers.peak_equity == 1100
    assert trackers.drawdown_pct == 0
    assert trackers.drawdown_start is None

    trackers.close_day("d4", 880)
    trackers.close_day("d5", 990)
    assert trackers.max_drawdown.pct == pytest.approx(20.0)
    assert trackers.max_drawdown.period == "d4 to d4"


def test_max_drawdown_never_decreases():
    trackers = RunningTrackers(peak_equity=5000)
    rng = random.Random(17)
    equity = 5000.0
    previous = 0.0
    for index in range(300):
        equity += rng.choice([150.0, -100.0])
        trackers.close_day(f"day {index}", equity)
        assert trackers.max_drawdown.pct >= previous >= 0
        previous = trackers.max_drawdown.pct


def test_non_positive_peak_skips_drawdown():
    trackers = RunningTrackers(peak_equity=0)
    trackers.close_day("d1", -100)

    assert trackers.max_drawdown.pct == 0
    assert trackers.max_drawdown.period == "N/A to N/A"


def test_format_period():
    assert format_period("Jan 1 2025", "Jan 3 2025") == "Jan 1 2025 to Jan 3 2025"
    assert format_period(None, "Jan 3 2025") == "N/A to Jan 3 2025"
    assert format_period(None, None) == "N/A to N/A"
