from dataclasses import replace
from datetime import date

import pytest

from tradesim.config import ParameterError, ensure_valid, validate_parameters
from tradesim.simulator import SimulationParameters

BASE = SimulationParameters(
    win_rate=55,
    trades_per_day=4,
    risk_per_trade=250,
    risk_reward_ratio=1,
    starting_equity=50000,
    start_date=date(2025, 1, 1),
    end_date=date(2025, 12, 31),
)


def test_valid_parameters():
    assert validate_parameters(BASE) == []
    assert ensure_valid(BASE) is BASE


def test_end_before_start_is_rejected():
    problems = validate_parameters(replace(BASE, end_date=date(2024, 12, 31)))

    assert problems == ["End date must be on or after start date"]


def test_same_day_range_is_valid():
    params = replace(BASE, end_date=BASE.start_date)

    assert validate_parameters(params) == []


def test_risk_per_trade_has_no_upper_bound():
    assert validate_parameters(replace(BASE, risk_per_trade=1e12)) == []
    assert validate_parameters(replace(BASE, risk_per_trade=0)) != []


def test_ensure_valid_lists_every_problem():
    params = replace(BASE, trades_per_day=0, win_rate=120, risk_reward_ratio=0)

    with pytest.raises(ParameterError) as excinfo:
        ensure_valid(params)

    assert isinstance(excinfo.value, ValueError)
    assert len(excinfo.value.problems) == 3
    assert "trades_per_day" in str(excinfo.value)
