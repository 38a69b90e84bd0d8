"""Monthly and weekly bucket aggregation."""

from __future__ import annotations

from typing import Iterable

from tradesim.simulator.models import BucketBreakdown, BucketStats, TradingDay


def register_buckets(days: Iterable[TradingDay]) -> tuple[dict[str, BucketStats], dict[str, BucketStats]]:
    monthly: dict[str, BucketStats] = {}
    weekly: dict[str, BucketStats] = {}
    for day in days:
        if day.month not in monthly:
            monthly[day.month] = BucketStats(key=day.month)
        if day.week not in weekly:
            weekly[day.week] = BucketStats(key=day.week)
    return monthly, weekly


def bucket_win_rate(bucket: BucketStats) -> float:
    decided = bucket.wins + bucket.losses
    if decided == 0:
        return 0.0
    return bucket.wins / decided * 100


def finalize_buckets(buckets: dict[str, BucketStats]) -> list[BucketBreakdown]:
    return [
        BucketBreakdown(
            key=bucket.key,
            wins=bucket.wins,
            losses=bucket.losses,
            profit_loss=bucket.profit_loss,
            trades=bucket.trades,
            win_rate=bucket_win_rate(bucket),
        )
        for bucket in buckets.values()
    ]
