"""Re-runnable simulation session keyed by a monotonically increasing run key."""

from __future__ import annotations

from typing import Callable, Optional

from tradesim.config.loader import serialize_parameters
from tradesim.monitoring.audit import AuditLog
from tradesim.monitoring.monitor import Monitor
from tradesim.simulator.engine import RandomSource, TradeSimulator
from tradesim.simulator.models import SimulationParameters, SimulationSummary


class SimulationSession:
    """Holds one parameter set and the summary of its latest run.

    Every call to :meth:`rerun` bumps ``run_key`` and recomputes with fresh
    draws and replaces the summary produced under the previous key.
    """

    def __init__(
        self,
        params: SimulationParameters,
        rng_factory: Optional[Callable[[int], RandomSource]] = None,
        monitor: Optional[Monitor] = None,
        audit: Optional[AuditLog] = None,
        drawdown_alert_pct: Optional[float] = None,
    ) -> None:
        self.params = params
        self.rng_factory = rng_factory
        self.monitor = monitor
        self.audit = audit
        self.drawdown_alert_pct = drawdown_alert_pct
        self.run_key = 0
        self._summary: Optional[SimulationSummary] = None

    @property
    def summary(self) -> SimulationSummary:
        if self._summary is None:
            return self.rerun()
        return self._summary

    def rerun(self) -> SimulationSummary:
        self.run_key += 1
        key = self.run_key
        rng = self.rng_factory(key) if self.rng_factory else None
        if self.audit:
            self.audit.log("run_started", {"run_key": key, "parameters": serialize_parameters(self.params)})

        summary = TradeSimulator(self.params, rng).run()
        self._summary = summary
        self._report(key, summary)
        return summary

    def _report(self, key: int, summary: SimulationSummary) -> None:
        if self.audit:
            self.audit.log(
                "run_completed",
                {
                    "run_key": key,
                    "trading_days": summary.trading_days,
                    "total_trades": summary.total_trades,
                    "final_equity": summary.final_equity,
                    "max_drawdown_pct": summary.max_drawdown.pct,
                },
            )
        if self.monitor is None:
            return
        if summary.trading_days == 0:
            self.monitor.empty_calendar(key)
        if self.drawdown_alert_pct is not None and summary.max_drawdown.pct > self.drawdown_alert_pct:
            self.monitor.drawdown_limit(key, summary.max_drawdown.pct, self.drawdown_alert_pct)
        self.monitor.run_completed(key, summary.final_equity, summary.max_drawdown.pct)
