"""Config loading, validation and freezing."""

from tradesim.config.loader import (
    compute_config_hash,
    freeze_config,
    load_config,
    parse_parameters,
    serialize_config,
    serialize_parameters,
    verify_config_lock,
)
from tradesim.config.models import (
    BatchConfig,
    MonitoringConfig,
    ReportConfig,
    SimConfig,
    StorageConfig,
)
from tradesim.config.validation import ParameterError, ensure_valid, validate_parameters

__all__ = [
    "BatchConfig",
    "MonitoringConfig",
    "ParameterError",
    "ReportConfig",
    "SimConfig",
    "StorageConfig",
    "compute_config_hash",
    "ensure_valid",
    "freeze_config",
    "load_config",
    "parse_parameters",
    "serialize_config",
    "serialize_parameters",
    "validate_parameters",
    "verify_config_lock",
]
