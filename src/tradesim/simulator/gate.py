"""Assessment of repeated simulation runs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from tradesim.simulator.models import SimulationSummary


@dataclass(frozen=True)
class BatchAssessment:
    runs: int
    profitable_rate: float
    average_final_equity: float
    min_final_equity: float
    max_final_equity: float
    average_win_rate: float
    worst_drawdown_pct: float
    drawdown_breach_runs: int
    meets_threshold: bool


def assess_runs(
    summaries: Iterable[SimulationSummary],
    min_profitable_rate: float,
    max_drawdown_pct: float = 100.0,
) -> BatchAssessment:
    results = list(summaries)
    total = len(results)
    if total == 0:
        return BatchAssessment(0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0, False)

    profitable = sum(1 for result in results if result.total_profit > 0)
    final_equities = [result.final_equity for result in results]
    drawdowns = [result.max_drawdown.pct for result in results]
    breach_runs = sum(1 for pct in drawdowns if pct > max_drawdown_pct)
    profitable_rate = profitable / total

    return BatchAssessment(
        runs=total,
        profitable_rate=profitable_rate,
        average_final_equity=sum(final_equities) / total,
        min_final_equity=min(final_equities),
        max_final_equity=max(final_equities),
        average_win_rate=sum(result.win_rate for result in results) / total,
        worst_drawdown_pct=max(drawdowns),
        drawdown_breach_runs=breach_runs,
        meets_threshold=profitable_rate >= min_profitable_rate and breach_runs == 0,
    )
