from datetime import date

from tradesim.config import validate_parameters
from tradesim.simulator import SimulationParameters, TradeSimulator, assess_runs, seeded_rng


params = SimulationParameters(
    win_rate=55,
    trades_per_day=4,
    risk_per_trade=250,
    risk_reward_ratio=1.0,
    starting_equity=50000,
    start_date=date(2025, 1, 1),
    end_date=date(2025, 12, 31),
)
print("Problems:", validate_parameters(params) or "none")

simulator = TradeSimulator(params, rng=seeded_rng(42))
summary = simulator.run()
print("Trading days:", summary.trading_days)
print("Realized win rate:", f"{summary.win_rate:.2f}%")
print("Final equity:", f"{summary.final_equity:,.2f}")
print("Avg R per day / week:", f"{summary.avg_r_per_day:.2f} / {summary.avg_r_per_week:.2f}")
print("Max win streak:", summary.max_win_streak.length, summary.max_win_streak_period)
print("Max loss streak:", summary.max_loss_streak.length, summary.max_loss_streak_period)
print("Max drawdown:", f"{summary.max_drawdown.pct:.2f}%", summary.max_drawdown_period)

for month in summary.monthly_breakdown:
    print(f"  {month.key}: {month.trades} trades, {month.win_rate:.2f}% wins, P/L {month.profit_loss:,.2f}")

assessment = assess_runs(simulator.run_batch(100, seed=1), min_profitable_rate=0.6, max_drawdown_pct=20.0)
print("Profitable runs:", f"{assessment.profitable_rate * 100:.1f}%")
print("Worst drawdown:", f"{assessment.worst_drawdown_pct:.2f}%")
