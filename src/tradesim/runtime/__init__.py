"""Runtime context exports."""

from tradesim.runtime.config_store import SavedConfig, SavedConfigStore
from tradesim.runtime.context import RunContext, create_run_context
from tradesim.runtime.session import SimulationSession

__all__ = [
    "RunContext",
    "SavedConfig",
    "SavedConfigStore",
    "SimulationSession",
    "create_run_context",
]
