"""Simulation data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

NOT_AVAILABLE = "N/A"


def format_period(start: Optional[str], end: Optional[str]) -> str:
    return f"{start or NOT_AVAILABLE} to {end or NOT_AVAILABLE}"


@dataclass(frozen=True)
class SimulationParameters:
    win_rate: float  # percentage, 0-100
    trades_per_day: int
    risk_per_trade: float
    risk_reward_ratio: float
    starting_equity: float
    start_date: date
    end_date: date

    @property
    def win_probability(self) -> float:
        return self.win_rate / 100.0

    @property
    def reward_per_trade(self) -> float:
        return self.risk_per_trade * self.risk_reward_ratio


@dataclass(frozen=True)
class TradingDay:
    label: str
    month: str
    week: str
    day: date


@dataclass(frozen=True)
class EquityPoint:
    label: str
    equity: float
    month: str
    week: str


@dataclass
class BucketStats:
    key: str
    wins: int = 0
    losses: int = 0
    profit_loss: float = 0.0
    trades: int = 0

    def record(self, won: bool, amount: float) -> None:
        if won:
            self.wins += 1
            self.profit_loss += amount
        else:
            self.losses += 1
            self.profit_loss -= amount
        self.trades += 1


@dataclass(frozen=True)
class BucketBreakdown:
    key: str
    wins: int
    losses: int
    profit_loss: float
    trades: int
    win_rate: float


@dataclass(frozen=True)
class StreakRecord:
    length: int = 0
    start: Optional[str] = None
    end: Optional[str] = None

    @property
    def period(self) -> str:
        return format_period(self.start, self.end)


@dataclass(frozen=True)
class DrawdownRecord:
    pct: float = 0.0
    start: Optional[str] = None
    end: Optional[str] = None

    @property
    def period(self) -> str:
        return format_period(self.start, self.end)


@dataclass(frozen=True)
class SimulationSummary:
    win_rate: float
    avg_r_per_day: float
    avg_r_per_week: float
    avg_trades_per_day: float
    initial_equity: float
    final_equity: float
    total_profit: float
    total_trades: int
    total_wins: int
    total_losses: int
    trading_days: int
    max_win_streak: StreakRecord
    max_loss_streak: StreakRecord
    max_drawdown: DrawdownRecord
    risk_reward_ratio: float
    equity_curve: list[EquityPoint] = field(default_factory=list)
    monthly_breakdown: list[BucketBreakdown] = field(default_factory=list)
    weekly_breakdown: list[BucketBreakdown] = field(default_factory=list)

    @property
    def max_win_streak_period(self) -> str:
        return self.max_win_streak.period

    @property
    def max_loss_streak_period(self) -> str:
        return self.max_loss_streak.period

    @property
    def max_drawdown_period(self) -> str:
        return self.max_drawdown.period
