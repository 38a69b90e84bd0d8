"""Parameter checks applied before a simulation is started."""

from __future__ import annotations

from tradesim.simulator.models import SimulationParameters

MAX_TRADES_PER_DAY = 20
MAX_RISK_REWARD_RATIO = 10.0


class ParameterError(ValueError):
    def __init__(self, problems: list[str]) -> None:
        self.problems = list(problems)
        super().__init__("Invalid simulation parameters: " + "; ".join(self.problems))


def is_valid_date_range(params: SimulationParameters) -> bool:
    return params.end_date >= params.start_date


def validate_parameters(params: SimulationParameters) -> list[str]:
    problems: list[str] = []
    if not is_valid_date_range(params):
        problems.append("End date must be on or after start date")
    if not 0 <= params.win_rate <= 100:
        problems.append(f"win_rate must be between 0 and 100, got {params.win_rate}")
    if not 1 <= params.trades_per_day <= MAX_TRADES_PER_DAY:
        problems.append(
            f"trades_per_day must be between 1 and {MAX_TRADES_PER_DAY}, got {params.trades_per_day}"
        )
    if not 0 < params.risk_reward_ratio <= MAX_RISK_REWARD_RATIO:
        problems.append(
            f"risk_reward_ratio must be in (0, {MAX_RISK_REWARD_RATIO:g}], got {params.risk_reward_ratio}"
        )
    if params.starting_equity <= 0:
        problems.append(f"starting_equity must be positive, got {params.starting_equity}")
    if params.risk_per_trade <= 0:
        problems.append(f"risk_per_trade must be positive, got {params.risk_per_trade}")
    return problems


def ensure_valid(params: SimulationParameters) -> SimulationParameters:
    problems = validate_parameters(params)
    if problems:
        raise ParameterError(problems)
    return params
