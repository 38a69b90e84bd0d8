"""Monitoring and alert routing."""

from __future__ import annotations

from dataclasses import dataclass

from tradesim.monitoring.notifier import Notifier


@dataclass
class Monitor:
    notifier: Notifier

    def run_completed(self, run_key: int, final_equity: float, max_drawdown_pct: float) -> None:
        self.notifier.notify(
            "RUN_COMPLETE",
            f"run {run_key} final equity {final_equity:,.2f}, max drawdown {max_drawdown_pct:.2f}%",
        )

    def empty_calendar(self, run_key: int) -> None:
        self.notifier.notify("EMPTY_CALENDAR", f"run {run_key} has no trading days")

    def config_rejected(self, reason: str) -> None:
        self.notifier.notify("CONFIG_REJECTED", reason)

    def store_corrupt(self, path: str) -> None:
        self.notifier.notify("STORE_CORRUPT", f"Failed to parse saved configurations at {path}")

    def drawdown_limit(self, run_key: int, drawdown_pct: float, limit_pct: float) -> None:
        self.notifier.notify(
            "DRAWDOWN_LIMIT",
            f"run {run_key} drawdown {drawdown_pct:.2f}% exceeds {limit_pct:.2f}%",
        )
