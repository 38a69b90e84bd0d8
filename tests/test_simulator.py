from datetime import date

import pytest

from tradesim.simulator import SimulationParameters, TradeSimulator, seeded_rng, simulate


def _params(**overrides):
    values = dict(
        win_rate=100,
        trades_per_day=1,
        risk_per_trade=100,
        risk_reward_ratio=2,
        starting_equity=1000,
        start_date=date(2025, 1, 1),
        end_date=date(2025, 1, 10),
    )
    values.update(overrides)
    return SimulationParameters(**values)


def _sequence(*draws):
    values = iter(draws)
    return lambda: next(values)


def test_all_winning_trades():
    summary = simulate(_params(win_rate=100))

    assert summary.trading_days == 8
    assert summary.final_equity == 2600
    assert summary.total_profit == 1600
    assert summary.total_trades == 8
    assert summary.win_rate == 100
    assert summary.max_win_streak.length == 8
    assert summary.max_win_streak_period == "Jan 1 2025 to Jan 10 2025"
    assert summary.max_loss_streak.length == 0
    assert summary.max_loss_streak_period == "N/A to N/A"
    assert summary.max_drawdown.pct == 0
    assert summary.max_drawdown_period == "N/A to N/A"
    assert summary.avg_r_per_day == pytest.approx(2.0)
    assert summary.avg_r_per_week == pytest.approx(10.0)
    assert summary.avg_trades_per_day == 1.0
    assert summary.risk_reward_ratio == 2


def test_all_losing_trades():
    summary = simulate(_params(win_rate=0))

    assert summary.final_equity == 200
    assert summary.win_rate == 0
    assert summary.max_drawdown.pct == pytest.approx(80.0)
    assert summary.max_drawdown_period == "Jan 1 2025 to Jan 10 2025"
    assert summary.max_win_streak.length == 0
    assert summary.max_loss_streak.length == 8
    assert summary.avg_r_per_day == pytest.approx(-1.0)


def test_equity_curve_is_seeded_with_starting_equity():
    summary = simulate(_params(win_rate=100))
    curve = summary.equity_curve

    assert len(curve) == summary.trading_days + 1
    assert curve[0].label == "Jan 1 2025"
    assert curve[0].equity == 1000
    assert curve[1].label == "Jan 1 2025"
    assert curve[1].equity == 1200
    assert curve[-1].equity == summary.final_equity
    assert curve[-1].week == "Week 2, 2025"


def test_buckets_follow_calendar():
    summary = simulate(_params(win_rate=100))

    assert [bucket.key for bucket in summary.monthly_breakdown] == ["Jan 2025"]
    assert summary.monthly_breakdown[0].profit_loss == 1600
    assert summary.monthly_breakdown[0].win_rate == 100
    assert [bucket.key for bucket in summary.weekly_breakdown] == ["Week 1, 2025", "Week 2, 2025"]
    assert [bucket.trades for bucket in summary.weekly_breakdown] == [3, 5]


def test_win_requires_draw_strictly_below_probability():
    params = _params(win_rate=50, trades_per_day=2, end_date=date(2025, 1, 2))
    summary = TradeSimulator(params, rng=_sequence(0.1, 0.5, 0.9, 0.49)).run()

    assert summary.total_wins == 2
    assert summary.total_losses == 2
    assert summary.win_rate == 50
    assert [point.equity for point in summary.equity_curve] == [1000, 1100, 1200]
    assert summary.max_win_streak.length == 1
    assert summary.max_win_streak_period == "Jan 1 2025 to Jan 1 2025"
    assert summary.max_loss_streak.length == 2
    assert summary.max_loss_streak_period == "Jan 1 2025 to Jan 2 2025"


def test_empty_calendar_uses_fallbacks():
    params = _params(win_rate=55, trades_per_day=4, start_date=date(2025, 1, 10), end_date=date(2025, 1, 1))
    summary = simulate(params)

    assert summary.trading_days == 0
    assert summary.equity_curve == []
    assert summary.monthly_breakdown == []
    assert summary.weekly_breakdown == []
    assert summary.win_rate == 55
    assert summary.avg_r_per_day == 0
    assert summary.avg_r_per_week == 0
    assert summary.avg_trades_per_day == 4
    assert summary.final_equity == summary.initial_equity == 1000
    assert summary.max_drawdown_period == "N/A to N/A"


def test_bucket_totals_match_trade_count():
    params = _params(
        win_rate=48,
        trades_per_day=3,
        risk_per_trade=250,
        risk_reward_ratio=1.5,
        starting_equity=50000,
        start_date=date(2025, 1, 1),
        end_date=date(2025, 6, 30),
    )
    summary = simulate(params, rng=seeded_rng(11))

    assert summary.total_trades == summary.trading_days * 3
    for breakdown in (summary.monthly_breakdown, summary.weekly_breakdown):
        for bucket in breakdown:
            assert bucket.wins + bucket.losses == bucket.trades
        assert sum(bucket.wins + bucket.losses for bucket in breakdown) == summary.total_trades
        assert sum(bucket.profit_loss for bucket in breakdown) == pytest.approx(summary.total_profit)
    assert len(summary.monthly_breakdown) == 6
    assert len(summary.equity_curve) == summary.trading_days + 1
    expected = 50000 + summary.total_wins * 375 - summary.total_losses * 250
    assert summary.final_equity == pytest.approx(expected)
    assert 0 <= summary.max_drawdown.pct


def test_seeded_runs_are_reproducible():
    params = _params(win_rate=55, trades_per_day=4, end_date=date(2025, 3, 31))

    first = simulate(params, rng=seeded_rng(3))
    second = simulate(params, rng=seeded_rng(3))

    assert first == second


def test_run_batch_is_seeded():
    simulator = TradeSimulator(_params(win_rate=50, trades_per_day=2))

    first = simulator.run_batch(5, seed=9)
    second = simulator.run_batch(5, seed=9)

    assert len(first) == 5
    assert [result.final_equity for result in first] == [result.final_equity for result in second]
    assert simulator.run_batch(0) == []


def test_large_risk_amount_is_supported():
    summary = simulate(_params(win_rate=0, risk_per_trade=1_000_000, starting_equity=10_000_000))

    assert summary.final_equity == 2_000_000
    assert summary.max_drawdown.pct == pytest.approx(80.0)
