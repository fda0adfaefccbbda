"""
Telemetry source replaying fixed raw readings.

Used to feed captured or hand-written readings through the normalizer,
e.g. `hostsnap collect --from-file readings.yaml`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from hostsnap.sources.base import RawDisk, RawIdentity, RawMemory, RawSensor, TelemetrySource


class StaticSource(TelemetrySource):
    """Serves the same raw readings on every read."""

    name = "static"

    def __init__(
        self,
        identity: RawIdentity | None = None,
        memory: RawMemory | None = None,
        disks: list[RawDisk] | None = None,
        sensors: list[RawSensor] | None = None,
    ):
        super().__init__()
        self.identity = identity or RawIdentity()
        self.memory = memory or RawMemory()
        self.disks = tuple(disks or ())
        self.sensors = tuple(sensors or ())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StaticSource:
        """
        Build a source from a dictionary of raw readings.

        Expected layout::

            identity: {name, kernel_version, os_version, host_name}
            memory: {total_memory, used_memory, total_swap, used_swap}
            disks: [{name, mount_point, available_bytes, total_bytes}, ...]
            sensors: [{label, temperature}, ...]

        Missing sections are treated as unavailable facets.
        """
        return cls(
            identity=RawIdentity(**(data.get("identity") or {})),
            memory=RawMemory(**(data.get("memory") or {})),
            disks=[RawDisk(**disk) for disk in data.get("disks") or []],
            sensors=[RawSensor(**sensor) for sensor in data.get("sensors") or []],
        )

    @classmethod
    def from_file(cls, path: str | Path) -> StaticSource:
        """Load raw readings from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Readings file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise TypeError(f"Readings file must contain a mapping, got {type(data).__name__}")

        return cls.from_dict(data)

    def read_identity(self) -> RawIdentity:
        return self.identity

    def read_memory(self) -> RawMemory:
        return self.memory

    def read_disks(self) -> list[RawDisk]:
        return list(self.disks)

    def read_sensors(self) -> list[RawSensor]:
        return list(self.sensors)
