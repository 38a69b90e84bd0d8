"""Derive the final statistics of a simulation run."""

from __future__ import annotations

from tradesim.simulator.aggregate import finalize_buckets
from tradesim.simulator.models import (
    BucketStats,
    EquityPoint,
    SimulationParameters,
    SimulationSummary,
)
from tradesim.simulator.trackers import RunningTrackers

TRADING_DAYS_PER_WEEK = 5


def _ratio(numerator: float, denominator: float, fallback: float) -> float:
    if denominator == 0:
        return fallback
    return numerator / denominator


def build_summary(
    params: SimulationParameters,
    trackers: RunningTrackers,
    final_equity: float,
    trading_days: int,
    equity_curve: list[EquityPoint],
    monthly: dict[str, BucketStats],
    weekly: dict[str, BucketStats],
) -> SimulationSummary:
    initial_equity = params.starting_equity
    total_profit = final_equity - initial_equity
    total_trades = trackers.total_trades

    win_rate = _ratio(trackers.total_wins * 100, trackers.total_wins + trackers.total_losses, params.win_rate)
    avg_r_per_day = _ratio(total_profit, params.risk_per_trade * trading_days, 0.0)
    avg_trades_per_day = _ratio(total_trades, trading_days, float(params.trades_per_day))

    return SimulationSummary(
        win_rate=win_rate,
        avg_r_per_day=avg_r_per_day,
        avg_r_per_week=avg_r_per_day * TRADING_DAYS_PER_WEEK,
        avg_trades_per_day=avg_trades_per_day,
        initial_equity=initial_equity,
        final_equity=final_equity,
        total_profit=total_profit,
        total_trades=total_trades,
        total_wins=trackers.total_wins,
        total_losses=trackers.total_losses,
        trading_days=trading_days,
        max_win_streak=trackers.best_win_streak,
        max_loss_streak=trackers.best_loss_streak,
        max_drawdown=trackers.max_drawdown,
        risk_reward_ratio=params.risk_reward_ratio,
        equity_curve=list(equity_curve),
        monthly_breakdown=finalize_buckets(monthly),
        weekly_breakdown=finalize_buckets(weekly),
    )
