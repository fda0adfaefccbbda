"""
Base telemetry source that all sources inherit from.

A source reads raw, unnormalized readings from the host. Every read
reflects the current state of the host; sources keep no readings
between calls, so one instance may serve concurrent callers.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class RawIdentity:
    """Identity strings as reported by the OS. None means unavailable."""

    name: str | None = None
    kernel_version: str | None = None
    os_version: str | None = None
    host_name: str | None = None


@dataclass(frozen=True)
class RawMemory:
    """Memory and swap counters in bytes."""

    total_memory: int = 0
    used_memory: int = 0
    total_swap: int = 0
    used_swap: int = 0


@dataclass(frozen=True)
class RawDisk:
    """One mounted volume. Paths may be undecoded bytes."""

    name: str | bytes
    mount_point: str | bytes
    available_bytes: int = 0
    total_bytes: int = 0


@dataclass(frozen=True)
class RawSensor:
    """One thermal sensor, temperature in degrees Celsius."""

    label: str
    temperature: float | None = None


class TelemetrySource(ABC):
    """
    Abstract base class for all telemetry sources.

    Subclasses implement one read per facet. Per-facet failures must be
    absorbed (absent value or empty list); only `refresh` may raise
    TelemetrySourceError, when the host cannot be queried at all.
    """

    name: str = "base"

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.name}")

    def refresh(self) -> None:
        """
        Make sure the telemetry subsystem is reachable before reading.

        Raises:
            TelemetrySourceError: If the host cannot be queried at all.
        """

    @abstractmethod
    def read_identity(self) -> RawIdentity:
        """Read OS name, kernel version, OS version and host name."""

    @abstractmethod
    def read_memory(self) -> RawMemory:
        """Read RAM and swap byte counters."""

    @abstractmethod
    def read_disks(self) -> list[RawDisk]:
        """Enumerate mounted volumes, in OS order."""

    @abstractmethod
    def read_sensors(self) -> list[RawSensor]:
        """Enumerate thermal sensors, in OS order."""
