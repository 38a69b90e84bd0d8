"""Persist named snapshots of simulation parameters."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

from tradesim.config.loader import parse_parameters, serialize_parameters
from tradesim.monitoring.monitor import Monitor
from tradesim.simulator.models import SimulationParameters


@dataclass(frozen=True)
class SavedConfig:
    name: str
    parameters: SimulationParameters
    created: str


class SavedConfigStore:
    def __init__(self, path: str | Path, monitor: Optional[Monitor] = None) -> None:
        self.path = Path(path)
        self.monitor = monitor

    def list(self) -> list[SavedConfig]:
        return [self._from_payload(entry) for entry in self._load_payload()]

    def save(self, name: str, params: SimulationParameters, created: Optional[date] = None) -> SavedConfig:
        name = name.strip()
        if not name:
            raise ValueError("Configuration name must not be blank")
        created_on = (created or date.today()).isoformat()
        entries = self._load_payload()
        entries.append(
            {
                "name": name,
                "settings": serialize_parameters(params),
                "date": created_on,
            }
        )
        self._save_payload(entries)
        return SavedConfig(name=name, parameters=params, created=created_on)

    def load(self, index: int) -> SavedConfig:
        entries = self.list()
        if not 0 <= index < len(entries):
            raise IndexError(f"No saved configuration at index {index}")
        return entries[index]

    def find(self, name: str) -> Optional[SavedConfig]:
        for entry in reversed(self.list()):
            if entry.name == name:
                return entry
        return None

    def delete(self, index: int) -> None:
        entries = self._load_payload()
        if not 0 <= index < len(entries):
            raise IndexError(f"No saved configuration at index {index}")
        del entries[index]
        self._save_payload(entries)

    def _load_payload(self) -> list[dict]:
        if not self.path.exists():
            return []
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            payload = None
        if not isinstance(payload, list):
            self._report_corrupt()
            return []

        entries = []
        for entry in payload:
            try:
                self._from_payload(entry)
            except (KeyError, TypeError, ValueError):
                continue
            entries.append(entry)
        if len(entries) != len(payload):
            self._report_corrupt()
        return entries

    def _report_corrupt(self) -> None:
        if self.monitor:
            self.monitor.store_corrupt(str(self.path))

    def _save_payload(self, entries: list[dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(entries, indent=2), encoding="utf-8")

    @staticmethod
    def _from_payload(entry: dict) -> SavedConfig:
        return SavedConfig(
            name=str(entry["name"]),
            parameters=parse_parameters(entry["settings"]),
            created=str(entry.get("date", "")),
        )
