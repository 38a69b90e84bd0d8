"""Monitoring exports."""

from tradesim.monitoring.audit import AuditLog
from tradesim.monitoring.monitor import Monitor
from tradesim.monitoring.notifier import LogNotifier, MemoryNotifier, Notifier

__all__ = [
    "AuditLog",
    "LogNotifier",
    "MemoryNotifier",
    "Monitor",
    "Notifier",
]
