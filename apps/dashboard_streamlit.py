from __future__ import annotations

import os
from datetime import date, timedelta

import streamlit as st

from tradesim.config import validate_parameters
from tradesim.monitoring import AuditLog
from tradesim.reporting import breakdown_rows
from tradesim.runtime import SavedConfigStore, SimulationSession, create_run_context
from tradesim.simulator import SimulationParameters, estimate_trading_days


def _format_currency(value: float) -> str:
    return f"${value:,.2f}"


def _default_parameters() -> SimulationParameters:
    today = date.today()
    return SimulationParameters(
        win_rate=55.0,
        trades_per_day=4,
        risk_per_trade=250.0,
        risk_reward_ratio=1.0,
        starting_equity=50000.0,
        start_date=today,
        end_date=today + timedelta(days=365),
    )


def _settings_form(defaults: SimulationParameters) -> SimulationParameters:
    col_a, col_b = st.columns(2)
    start_date = col_a.date_input("Start date", value=defaults.start_date)
    end_date = col_b.date_input("End date", value=defaults.end_date)
    trades_per_day = col_a.number_input("Trades per day", min_value=1, max_value=20, step=1, value=defaults.trades_per_day)
    win_rate = col_b.number_input("Win rate (%)", min_value=0.0, max_value=100.0, step=0.1, value=float(defaults.win_rate))
    risk_reward_ratio = col_a.number_input(
        "Risk:reward ratio",
        min_value=0.1,
        max_value=10.0,
        step=0.1,
        value=float(defaults.risk_reward_ratio),
        help="1 = equal risk and reward, 2 = potential reward is twice the risk",
    )
    starting_equity = col_b.number_input(
        "Starting equity", min_value=1.0, step=1000.0, value=float(defaults.starting_equity)
    )
    risk_per_trade = col_a.number_input(
        "Risk per trade",
        min_value=0.01,
        value=float(defaults.risk_per_trade),
        help="Amount you're willing to lose on each trade",
    )
    return SimulationParameters(
        win_rate=float(win_rate),
        trades_per_day=int(trades_per_day),
        risk_per_trade=float(risk_per_trade),
        risk_reward_ratio=float(risk_reward_ratio),
        starting_equity=float(starting_equity),
        start_date=start_date,
        end_date=end_date,
    )


def _saved_configs_sidebar(store: SavedConfigStore, params: SimulationParameters) -> None:
    st.sidebar.subheader("Saved configurations")
    name = st.sidebar.text_input("Configuration name")
    if st.sidebar.button("Save current settings"):
        try:
            store.save(name, params)
            st.sidebar.success(f"Saved {name.strip()}")
        except ValueError as exc:
            st.sidebar.error(str(exc))

    for index, saved in enumerate(store.list()):
        col_a, col_b = st.sidebar.columns([3, 1])
        if col_a.button(f"{saved.name} ({saved.created})", key=f"load-{index}"):
            st.session_state["params"] = saved.parameters
            st.session_state.pop("session", None)
            st.rerun()
        if col_b.button("Delete", key=f"delete-{index}"):
            store.delete(index)
            st.rerun()


def _render_results(session: SimulationSession) -> None:
    summary = session.summary

    col_a, col_b, col_c, col_d = st.columns(4)
    col_a.metric("Final Equity", _format_currency(summary.final_equity))
    col_b.metric("Total Profit", _format_currency(summary.total_profit))
    col_c.metric("Win Rate", f"{summary.win_rate:.2f}%")
    col_d.metric("Total Trades", str(summary.total_trades))

    col_e, col_f, col_g, col_h = st.columns(4)
    col_e.metric("Avg R / Day", f"{summary.avg_r_per_day:.2f}")
    col_f.metric("Avg R / Week", f"{summary.avg_r_per_week:.2f}")
    col_g.metric("Avg Trades / Day", f"{summary.avg_trades_per_day:.2f}")
    col_h.metric("Risk:Reward", f"1:{summary.risk_reward_ratio:g}")

    st.subheader("Streaks and Drawdown")
    col_i, col_j, col_k = st.columns(3)
    col_i.metric("Max Win Streak", str(summary.max_win_streak.length))
    col_i.caption(summary.max_win_streak_period)
    col_j.metric("Max Loss Streak", str(summary.max_loss_streak.length))
    col_j.caption(summary.max_loss_streak_period)
    col_k.metric("Max Drawdown", f"{summary.max_drawdown.pct:.2f}%")
    col_k.caption(summary.max_drawdown_period)

    st.subheader("Equity Curve")
    if summary.equity_curve:
        st.line_chart(
            [{"date": point.label, "equity": point.equity} for point in summary.equity_curve],
            x="date",
            y="equity",
        )
    else:
        st.info("No trading days in the selected range")

    st.subheader("Monthly Breakdown")
    st.dataframe(breakdown_rows(summary.monthly_breakdown), use_container_width=True)
    st.subheader("Weekly Breakdown")
    st.dataframe(breakdown_rows(summary.weekly_breakdown), use_container_width=True)


def main() -> None:
    st.set_page_config(page_title="Trading Simulation", layout="wide")
    st.title("Trading Simulation")

    store_path = os.getenv("TRADESIM_SAVED_CONFIGS_PATH", "runtime/saved_configs.json")
    store = SavedConfigStore(store_path)
    audit_path = os.getenv("TRADESIM_AUDIT_LOG_PATH", "runtime/audit.log")

    defaults = st.session_state.get("params") or _default_parameters()
    params = _settings_form(defaults)
    _saved_configs_sidebar(store, params)

    problems = validate_parameters(params)
    if problems:
        for problem in problems:
            st.error(problem)
        return
    st.caption(f"Approximately {estimate_trading_days(params.start_date, params.end_date)} trading days")

    session = st.session_state.get("session")
    if st.button("Run Simulation") or (session is not None and session.params != params):
        context = create_run_context("dashboard", params=params)
        audit = AuditLog(audit_path, run_id=context.run_id, config_hash=context.config_hash)
        session = SimulationSession(params, audit=audit)
        st.session_state["session"] = session
        st.session_state["params"] = params
    if session is None:
        return

    if st.button("Re-run Simulation", help="Re-run simulation with the same parameters"):
        session.rerun()
    st.caption(f"Run #{session.run_key}")
    _render_results(session)


if __name__ == "__main__":
    main()
