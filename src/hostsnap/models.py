"""
Snapshot data model.

Every value here is created fresh for a single snapshot and never mutated.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class Identity:
    """OS and host identity strings. Unknown values are empty strings."""

    name: str = ""
    kernel_version: str = ""
    os_version: str = ""
    host_name: str = ""


@dataclass(frozen=True)
class MemoryUsage:
    """RAM and swap usage in decimal GB and MB."""

    total_ram_gb: float = 0.0
    total_ram_mb: float = 0.0
    used_ram_gb: float = 0.0
    used_ram_mb: float = 0.0
    ram_percent: float = 0.0
    total_swap_gb: float = 0.0
    total_swap_mb: float = 0.0
    used_swap_gb: float = 0.0
    used_swap_mb: float = 0.0
    swap_percent: float = 0.0


@dataclass(frozen=True)
class DiskUsage:
    """Capacity of one mounted volume."""

    name: str
    mount_point: str
    available_space_gb: float
    available_space_mb: float
    total_space_gb: float
    total_space_mb: float


@dataclass(frozen=True)
class SensorReading:
    """One thermal sensor. ``temperature`` is None when the sensor has no reading."""

    label: str
    temperature: float | None = None


@dataclass(frozen=True)
class Snapshot:
    """Complete point-in-time capture of host telemetry."""

    identity: Identity = field(default_factory=Identity)
    memory: MemoryUsage = field(default_factory=MemoryUsage)
    disks: tuple[DiskUsage, ...] = ()
    sensors: tuple[SensorReading, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert snapshot to the wire layout."""
        return {
            "system": asdict(self.identity),
            "memory": asdict(self.memory),
            "disks": [asdict(disk) for disk in self.disks],
            "components": [asdict(sensor) for sensor in self.sensors],
        }

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize snapshot to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)
