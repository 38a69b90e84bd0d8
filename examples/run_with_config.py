from pathlib import Path

from tradesim.config import ensure_valid, freeze_config, load_config, verify_config_lock
from tradesim.monitoring import AuditLog, LogNotifier, Monitor
from tradesim.runtime import SavedConfigStore, SimulationSession, create_run_context
from tradesim.simulator import seeded_rng


config_path = Path("configs") / "default.yaml"
config = load_config(config_path)
lock_path = freeze_config(config_path)
assert verify_config_lock(config_path, lock_path)

context = create_run_context(config.run_id_prefix, config_path=config_path)

monitor = Monitor(LogNotifier())
audit = AuditLog(
    Path(config.monitoring.audit_log_path),
    run_id=context.run_id,
    config_hash=context.config_hash,
)
audit.log("run_start", {"config": str(config_path), "lock": str(lock_path)})

params = ensure_valid(config.simulation)
store = SavedConfigStore(config.storage.saved_configs_path, monitor=monitor)
store.save(config.name, params)

session = SimulationSession(
    params,
    rng_factory=seeded_rng,
    monitor=monitor,
    audit=audit,
    drawdown_alert_pct=config.batch.max_drawdown_pct,
)
session.summary
session.rerun()

print("Run ready:", context.run_id)
print("Saved configurations:", [entry.name for entry in store.list()])
