"""Synthetic win/loss trading simulator."""

from __future__ import annotations

import random
from typing import Callable, Optional

from tradesim.simulator.aggregate import register_buckets
from tradesim.simulator.calendar import generate_trading_days
from tradesim.simulator.models import (
    BucketStats,
    EquityPoint,
    SimulationParameters,
    SimulationSummary,
    TradingDay,
)
from tradesim.simulator.summary import build_summary
from tradesim.simulator.trackers import RunningTrackers

RandomSource = Callable[[], float]


def seeded_rng(seed: Optional[int] = None) -> RandomSource:
    return random.Random(seed).random


class TradeSimulator:
    """Draws Bernoulli trade outcomes day by day over a business-day calendar.

    ``rng`` must return uniform floats in [0, 1). A trade wins when the draw is
    strictly below the configured win probability.
    """

    def __init__(self, params: SimulationParameters, rng: Optional[RandomSource] = None) -> None:
        self.params = params
        self.rng = rng or seeded_rng()

    def run(self) -> SimulationSummary:
        params = self.params
        days = generate_trading_days(params.start_date, params.end_date)
        monthly, weekly = register_buckets(days)
        trackers = RunningTrackers(peak_equity=params.starting_equity)

        equity = params.starting_equity
        equity_curve: list[EquityPoint] = []
        if days:
            first = days[0]
            equity_curve.append(EquityPoint(label=first.label, equity=equity, month=first.month, week=first.week))

        for day in days:
            equity = self._simulate_day(day, equity, trackers, monthly[day.month], weekly[day.week])
            trackers.close_day(day.label, equity)
            equity_curve.append(EquityPoint(label=day.label, equity=equity, month=day.month, week=day.week))

        return build_summary(
            params,
            trackers,
            final_equity=equity,
            trading_days=len(days),
            equity_curve=equity_curve,
            monthly=monthly,
            weekly=weekly,
        )

    def run_batch(self, runs: int, seed: Optional[int] = None) -> list[SimulationSummary]:
        rng = seeded_rng(seed) if seed is not None else self.rng
        simulator = TradeSimulator(self.params, rng)
        return [simulator.run() for _ in range(max(0, runs))]

    def _simulate_day(
        self,
        day: TradingDay,
        equity: float,
        trackers: RunningTrackers,
        month: BucketStats,
        week: BucketStats,
    ) -> float:
        probability = self.params.win_probability
        reward = self.params.reward_per_trade
        risk = self.params.risk_per_trade
        for _ in range(self.params.trades_per_day):
            if self.rng() < probability:
                equity += reward
                month.record(True, reward)
                week.record(True, reward)
                trackers.record_win(day.label)
            else:
                equity -= risk
                month.record(False, risk)
                week.record(False, risk)
                trackers.record_loss(day.label)
        return equity


def simulate(params: SimulationParameters, rng: Optional[RandomSource] = None) -> SimulationSummary:
    return TradeSimulator(params, rng).run()
