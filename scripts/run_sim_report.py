from __future__ import annotations

import argparse
from dataclasses import asdict
from pathlib import Path

from tradesim.config import (
    ParameterError,
    ensure_valid,
    freeze_config,
    load_config,
    serialize_parameters,
    verify_config_lock,
)
from tradesim.monitoring import AuditLog, LogNotifier, Monitor
from tradesim.reporting import write_breakdown_csv, write_summary_report
from tradesim.runtime import SimulationSession, create_run_context
from tradesim.simulator import TradeSimulator, assess_runs, seeded_rng


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", required=True)
    parser.add_argument("--output", default=None)
    parser.add_argument("--runs", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--freeze", action="store_true", help="write a lock file for the config before running")
    parser.add_argument("--verify-lock", action="store_true", help="refuse to run if the config lock does not match")
    args = parser.parse_args()

    config_path = Path(args.config)
    if args.freeze:
        lock_path = freeze_config(config_path)
        print(f"Frozen {config_path} -> {lock_path}")
    if args.verify_lock and not verify_config_lock(config_path):
        raise SystemExit(f"Config lock mismatch for {config_path}")

    config = load_config(config_path)
    context = create_run_context(config.run_id_prefix, config_path=config_path)
    monitor = Monitor(LogNotifier())
    audit = AuditLog(
        Path(config.monitoring.audit_log_path),
        run_id=context.run_id,
        config_hash=context.config_hash,
    )

    try:
        params = ensure_valid(config.simulation)
    except ParameterError as exc:
        monitor.config_rejected(str(exc))
        raise SystemExit(2) from exc

    output_dir = Path(config.report.output_dir)
    output_path = Path(args.output) if args.output else output_dir / f"{context.run_id}.json"

    seed = args.seed if args.seed is not None else config.batch.seed
    session = SimulationSession(
        params,
        rng_factory=None if seed is None else lambda key: seeded_rng(seed + key),
        monitor=monitor,
        audit=audit,
        drawdown_alert_pct=config.batch.max_drawdown_pct,
    )
    summary = session.summary

    runs = args.runs if args.runs is not None else config.batch.runs
    extra = {
        "run_id": context.run_id,
        "config_path": str(config_path),
        "config_hash": context.config_hash,
        "parameters": serialize_parameters(params),
    }
    if runs > 1:
        batch = TradeSimulator(params).run_batch(runs, seed=seed)
        assessment = assess_runs(batch, config.batch.min_profitable_rate, config.batch.max_drawdown_pct)
        extra["batch"] = asdict(assessment)

    write_summary_report(output_path, summary, extra=extra)
    write_breakdown_csv(output_path.with_name(output_path.stem + "_monthly.csv"), summary.monthly_breakdown)
    write_breakdown_csv(output_path.with_name(output_path.stem + "_weekly.csv"), summary.weekly_breakdown)
    print(f"Wrote {output_path}")


if __name__ == "__main__":
    main()
