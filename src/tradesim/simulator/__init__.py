"""Simulation engine."""

from tradesim.simulator.aggregate import bucket_win_rate, finalize_buckets, register_buckets
from tradesim.simulator.calendar import (
    count_weekdays,
    estimate_trading_days,
    generate_trading_days,
    week_number,
)
from tradesim.simulator.engine import RandomSource, TradeSimulator, seeded_rng, simulate
from tradesim.simulator.gate import BatchAssessment, assess_runs
from tradesim.simulator.models import (
    BucketBreakdown,
    BucketStats,
    DrawdownRecord,
    EquityPoint,
    SimulationParameters,
    SimulationSummary,
    StreakRecord,
    TradingDay,
    format_period,
)
from tradesim.simulator.summary import build_summary
from tradesim.simulator.trackers import RunningTrackers

__all__ = [
    "BatchAssessment",
    "BucketBreakdown",
    "BucketStats",
    "DrawdownRecord",
    "EquityPoint",
    "RandomSource",
    "RunningTrackers",
    "SimulationParameters",
    "SimulationSummary",
    "StreakRecord",
    "TradeSimulator",
    "TradingDay",
    "assess_runs",
    "bucket_win_rate",
    "build_summary",
    "count_weekdays",
    "estimate_trading_days",
    "finalize_buckets",
    "format_period",
    "generate_trading_days",
    "register_buckets",
    "seeded_rng",
    "simulate",
    "week_number",
]
