"""Per-run streak and drawdown accumulators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from tradesim.simulator.models import DrawdownRecord, StreakRecord


@dataclass
class RunningTrackers:
    peak_equity: float
    win_streak: int = 0
    win_streak_start: Optional[str] = None
    loss_streak: int = 0
    loss_streak_start: Optional[str] = None
    best_win_streak: StreakRecord = field(default_factory=StreakRecord)
    best_loss_streak: StreakRecord = field(default_factory=StreakRecord)
    drawdown_pct: float = 0.0
    drawdown_start: Optional[str] = None
    max_drawdown: DrawdownRecord = field(default_factory=DrawdownRecord)
    total_wins: int = 0
    total_losses: int = 0

    @property
    def total_trades(self) -> int:
        return self.total_wins + self.total_losses

    def record_win(self, label: str) -> None:
        self.total_wins += 1
        if self.win_streak == 0:
            self.win_streak_start = label
        self.win_streak += 1
        self.loss_streak = 0
        if self.win_streak > self.best_win_streak.length:
            self.best_win_streak = StreakRecord(self.win_streak, self.win_streak_start, label)

    def record_loss(self, label: str) -> None:
        self.total_losses += 1
        if self.loss_streak == 0:
            self.loss_streak_start = label
        self.loss_streak += 1
        self.win_streak = 0
        if self.loss_streak > self.best_loss_streak.length:
            self.best_loss_streak = StreakRecord(self.loss_streak, self.loss_streak_start, label)

    def close_day(self, label: str, equity: float) -> None:
        """Update peak and drawdown from the day's closing equity."""
        if equity > self.peak_equity:
            self.peak_equity = equity
            self.drawdown_pct = 0.0
            self.drawdown_start = None
            return
        if self.peak_equity <= 0:
            return

        pct = (self.peak_equity - equity) / self.peak_equity * 100
        if pct <= self.drawdown_pct:
            return
        self.drawdown_pct = pct
        if self.drawdown_start is None:
            self.drawdown_start = label
        if pct > self.max_drawdown.pct:
            self.max_drawdown = DrawdownRecord(pct, self.drawdown_start, label)
