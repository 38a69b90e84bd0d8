"""Load and freeze configuration files."""

from __future__ import annotations

import hashlib
import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import yaml

from tradesim.config.models import (
    BatchConfig,
    MonitoringConfig,
    ReportConfig,
    SimConfig,
    StorageConfig,
)
from tradesim.simulator.calendar import as_date
from tradesim.simulator.models import SimulationParameters


def load_config(path: str | Path) -> SimConfig:
    path = Path(path)
    data = _load_yaml(path)

    name = _require(data, "name")
    version = str(_require(data, "version"))
    run_id_prefix = data.get("run_id_prefix", name)

    simulation = parse_parameters(_require(data, "simulation"))
    batch = _parse_batch(data.get("batch", {}))
    monitoring = _parse_monitoring(data.get("monitoring", {}))
    storage = _parse_storage(data.get("storage", {}))
    report = _parse_report(data.get("report", {}))

    return SimConfig(
        name=name,
        version=version,
        run_id_prefix=run_id_prefix,
        simulation=simulation,
        batch=batch,
        monitoring=monitoring,
        storage=storage,
        report=report,
    )


def compute_config_hash(path: str | Path) -> str:
    path = Path(path)
    content = path.read_bytes()
    return hashlib.sha256(content).hexdigest()


def freeze_config(path: str | Path, lock_path: Optional[str | Path] = None) -> Path:
    path = Path(path)
    config_hash = compute_config_hash(path)
    if lock_path is None:
        lock_path = path.with_suffix(path.suffix + ".lock.json")
    lock_path = Path(lock_path)

    payload = {
        "config_path": str(path),
        "config_hash": config_hash,
        "frozen_at_utc": datetime.now(timezone.utc).isoformat(),
    }
    lock_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return lock_path


def verify_config_lock(path: str | Path, lock_path: Optional[str | Path] = None) -> bool:
    path = Path(path)
    if lock_path is None:
        lock_path = path.with_suffix(path.suffix + ".lock.json")
    lock_path = Path(lock_path)
    if not lock_path.exists():
        return False
    payload = json.loads(lock_path.read_text(encoding="utf-8"))
    expected = payload.get("config_hash")
    return expected == compute_config_hash(path)


def parse_parameters(data: dict[str, Any]) -> SimulationParameters:
    if not isinstance(data, dict):
        raise ValueError("simulation must be a mapping")

    def number(key: str) -> float:
        value = _require(data, key)
        try:
            return float(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid {key}: {value}") from exc

    def integer(key: str) -> int:
        value = number(key)
        if not value.is_integer():
            raise ValueError(f"Invalid {key}: {data[key]}")
        return int(value)

    return SimulationParameters(
        win_rate=number("win_rate"),
        trades_per_day=integer("trades_per_day"),
        risk_per_trade=number("risk_per_trade"),
        risk_reward_ratio=number("risk_reward_ratio"),
        starting_equity=number("starting_equity"),
        start_date=as_date(_require(data, "start_date")),
        end_date=as_date(_require(data, "end_date")),
    )


def serialize_parameters(params: SimulationParameters) -> dict[str, Any]:
    payload = asdict(params)
    payload["start_date"] = params.start_date.isoformat()
    payload["end_date"] = params.end_date.isoformat()
    return payload


def serialize_config(config: SimConfig) -> dict[str, Any]:
    payload = asdict(config)
    payload["simulation"] = serialize_parameters(config.simulation)
    return payload


def _load_yaml(path: Path) -> dict[str, Any]:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config must be a mapping")
    return data


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"Missing required config key: {key}")
    return data[key]


def _parse_batch(data: dict[str, Any]) -> BatchConfig:
    seed = data.get("seed")
    return BatchConfig(
        runs=int(data.get("runs", 1)),
        seed=int(seed) if seed is not None else None,
        min_profitable_rate=float(data.get("min_profitable_rate", 0.5)),
        max_drawdown_pct=float(data.get("max_drawdown_pct", 100.0)),
    )


def _parse_monitoring(data: dict[str, Any]) -> MonitoringConfig:
    return MonitoringConfig(
        audit_log_path=str(data.get("audit_log_path", "runtime/audit.log")),
    )


def _parse_storage(data: dict[str, Any]) -> StorageConfig:
    return StorageConfig(
        saved_configs_path=str(data.get("saved_configs_path", "runtime/saved_configs.json")),
    )


def _parse_report(data: dict[str, Any]) -> ReportConfig:
    return ReportConfig(
        output_dir=str(data.get("output_dir", "reports")),
    )
