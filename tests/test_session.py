from datetime import date

import pytest

from tradesim.monitoring import AuditLog, MemoryNotifier, Monitor
from tradesim.runtime import SimulationSession, create_run_context
from tradesim.simulator import SimulationParameters, seeded_rng


def _params(win_rate=55.0, end_date=date(2025, 3, 31)):
    return SimulationParameters(
        win_rate=win_rate,
        trades_per_day=2,
        risk_per_trade=100.0,
        risk_reward_ratio=1.5,
        starting_equity=10000.0,
        start_date=date(2025, 1, 1),
        end_date=end_date,
    )


def test_summary_runs_once_until_rerun():
    keys = []

    def factory(key):
        keys.append(key)
        return seeded_rng(key)

    session = SimulationSession(_params(), rng_factory=factory)
    assert session.run_key == 0

    first = session.summary
    assert session.run_key == 1
    assert session.summary is first

    second = session.rerun()
    assert session.run_key == 2
    assert session.summary is second
    assert keys == [1, 2]


def test_rerun_draws_fresh_outcomes():
    session = SimulationSession(_params(), rng_factory=seeded_rng)

    first = session.summary
    second = session.rerun()

    assert first.trading_days == second.trading_days
    assert first.equity_curve != second.equity_curve


def test_session_reports_to_monitor_and_audit(tmp_path):
    notifier = MemoryNotifier()
    audit = AuditLog(tmp_path / "audit.log", run_id="test-run", config_hash="abc")
    session = SimulationSession(
        _params(win_rate=0.0, end_date=date(2025, 1, 10)),
        monitor=Monitor(notifier),
        audit=audit,
        drawdown_alert_pct=5.0,
    )

    session.rerun()

    events = [event for event, _ in notifier.events]
    assert events == ["DRAWDOWN_LIMIT", "RUN_COMPLETE"]
    records = audit.read()
    assert [record["event"] for record in records] == ["run_started", "run_completed"]
    assert records[1]["payload"]["total_trades"] == 16
    assert records[0]["run_id"] == "test-run"


def test_empty_calendar_is_reported():
    notifier = MemoryNotifier()
    session = SimulationSession(
        _params(end_date=date(2024, 12, 31)),
        monitor=Monitor(notifier),
    )

    summary = session.summary

    assert summary.trading_days == 0
    assert notifier.events[0][0] == "EMPTY_CALENDAR"


def test_run_context_id(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("name: demo\n", encoding="utf-8")

    context = create_run_context("tradesim", config_path=config_path)

    assert context.run_id.startswith("tradesim-")
    assert context.run_id.endswith(context.config_hash[:8])
    assert create_run_context("tradesim", config_path=config_path, run_id="fixed").run_id == "fixed"


def test_run_context_from_parameters():
    first = create_run_context("dashboard", params=_params())
    second = create_run_context("dashboard", params=_params())
    other = create_run_context("dashboard", params=_params(win_rate=40.0))

    assert first.config_path is None
    assert first.config_hash == second.config_hash
    assert first.config_hash != other.config_hash


def test_run_context_requires_a_source():
    with pytest.raises(ValueError):
        create_run_context("tradesim")
