"""Configuration models for reproducible runs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tradesim.simulator.models import SimulationParameters


@dataclass(frozen=True)
class BatchConfig:
    runs: int = 1
    seed: Optional[int] = None
    min_profitable_rate: float = 0.5
    max_drawdown_pct: float = 100.0


@dataclass(frozen=True)
class MonitoringConfig:
    audit_log_path: str = "runtime/audit.log"


@dataclass(frozen=True)
class StorageConfig:
    saved_configs_path: str = "runtime/saved_configs.json"


@dataclass(frozen=True)
class ReportConfig:
    output_dir: str = "reports"


@dataclass(frozen=True)
class SimConfig:
    name: str
    version: str
    run_id_prefix: str
    simulation: SimulationParameters
    batch: BatchConfig = BatchConfig()
    monitoring: MonitoringConfig = MonitoringConfig()
    storage: StorageConfig = StorageConfig()
    report: ReportConfig = ReportConfig()
