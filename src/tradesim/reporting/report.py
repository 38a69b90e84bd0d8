"""Serialize simulation summaries for reports and dashboards."""

from __future__ import annotations

import csv
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Optional

from tradesim.simulator.models import BucketBreakdown, EquityPoint, SimulationSummary

BREAKDOWN_FIELDS = ["period", "trades", "wins", "losses", "win_rate", "profit_loss"]


def _serialize_equity_curve(equity_curve: Iterable[EquityPoint]) -> list[dict[str, Any]]:
    return [
        {"date": point.label, "equity": point.equity, "month": point.month, "week": point.week}
        for point in equity_curve
    ]


def breakdown_rows(breakdown: Iterable[BucketBreakdown]) -> list[dict[str, Any]]:
    return [
        {
            "period": bucket.key,
            "trades": bucket.trades,
            "wins": bucket.wins,
            "losses": bucket.losses,
            "win_rate": f"{bucket.win_rate:.2f}",
            "profit_loss": bucket.profit_loss,
        }
        for bucket in breakdown
    ]


def summary_to_dict(summary: SimulationSummary) -> dict[str, Any]:
    return {
        "win_rate": summary.win_rate,
        "avg_r_per_day": summary.avg_r_per_day,
        "avg_r_per_week": summary.avg_r_per_week,
        "avg_trades_per_day": summary.avg_trades_per_day,
        "initial_equity": summary.initial_equity,
        "final_equity": summary.final_equity,
        "total_profit": summary.total_profit,
        "total_trades": summary.total_trades,
        "total_wins": summary.total_wins,
        "total_losses": summary.total_losses,
        "trading_days": summary.trading_days,
        "max_win_streak": summary.max_win_streak.length,
        "max_win_streak_period": summary.max_win_streak_period,
        "max_loss_streak": summary.max_loss_streak.length,
        "max_loss_streak_period": summary.max_loss_streak_period,
        "max_drawdown": summary.max_drawdown.pct,
        "max_drawdown_period": summary.max_drawdown_period,
        "risk_reward_ratio": summary.risk_reward_ratio,
        "equity_curve": _serialize_equity_curve(summary.equity_curve),
        "monthly_breakdown": breakdown_rows(summary.monthly_breakdown),
        "weekly_breakdown": breakdown_rows(summary.weekly_breakdown),
    }


def write_summary_report(
    path: str | Path,
    summary: SimulationSummary,
    extra: Optional[dict[str, Any]] = None,
) -> Path:
    report = {"generated_at_utc": datetime.now(timezone.utc).isoformat()}
    if extra:
        report.update(extra)
    report["summary"] = summary_to_dict(summary)

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report, indent=2, default=str), encoding="utf-8")
    return path


def write_breakdown_csv(path: str | Path, breakdown: Iterable[BucketBreakdown]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=BREAKDOWN_FIELDS)
        writer.writeheader()
        writer.writerows(breakdown_rows(breakdown))
    return path
