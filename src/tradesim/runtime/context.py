"""Run context creation and metadata."""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from tradesim.config.loader import compute_config_hash, serialize_parameters
from tradesim.simulator.models import SimulationParameters


@dataclass(frozen=True)
class RunContext:
    run_id: str
    config_hash: str
    started_at: datetime
    config_path: Optional[Path] = None


def parameters_hash(params: SimulationParameters) -> str:
    payload = json.dumps(serialize_parameters(params), sort_keys=True)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def create_run_context(
    run_id_prefix: str,
    config_path: Optional[str | Path] = None,
    params: Optional[SimulationParameters] = None,
    run_id: Optional[str] = None,
) -> RunContext:
    """Identify a run by its config file, or by its parameters when run from the form."""
    path = Path(config_path) if config_path is not None else None
    if path is not None:
        config_hash = compute_config_hash(path)
    elif params is not None:
        config_hash = parameters_hash(params)
    else:
        raise ValueError("create_run_context needs a config_path or params")

    started_at = datetime.now(timezone.utc)
    if run_id is None:
        stamp = started_at.strftime("%Y%m%dT%H%M%SZ")
        run_id = f"{run_id_prefix}-{stamp}-{config_hash[:8]}"
    return RunContext(
        run_id=run_id,
        config_hash=config_hash,
        started_at=started_at,
        config_path=path,
    )
