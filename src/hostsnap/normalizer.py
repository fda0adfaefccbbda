"""
Normalizer for Hostsnap.

Turns raw source readings into a Snapshot: decimal GB/MB units,
utilization percentages, and friendly sensor labels.
"""

from __future__ import annotations

import logging
import math
import time

from hostsnap.models import DiskUsage, Identity, MemoryUsage, SensorReading, Snapshot
from hostsnap.sources import default_source
from hostsnap.sources.base import RawDisk, RawIdentity, RawMemory, RawSensor, TelemetrySource

logger = logging.getLogger(__name__)

BYTES_PER_GB = 1_000_000_000
BYTES_PER_MB = 1_000_000

# Vendor sensor labels (lower-cased) mapped to display names
SENSOR_LABELS: dict[str, str] = {
    "iwlwifi_1 temp1": "Wi-Fi Module",
    "sensor 1": "Sensor 1",
    "sensor 2": "Sensor 2",
    "composite": "Chipset",
    "edge": "GPU (Edge)",
    "tctl": "CPU (Tctl)",
}


def to_gb(value: int | float) -> float:
    """Convert bytes to decimal gigabytes."""
    return value / BYTES_PER_GB


def to_mb(value: int | float) -> float:
    """Convert bytes to decimal megabytes."""
    return value / BYTES_PER_MB


def usage_percent(used: int | float, total: int | float) -> float:
    """Return used/total as a percentage, or 0.0 when total is zero."""
    if total > 0:
        return used / total * 100
    return 0.0


def friendly_label(raw_label: str) -> str:
    """Map a vendor sensor label to its display name; unknown labels pass through."""
    return SENSOR_LABELS.get(raw_label.lower(), raw_label)


def display_string(value: str | bytes | None) -> str:
    """
    Decode a path or name for display without ever failing.

    Undecodable bytes, whether raw or left as surrogate escapes in a str by
    the OS layer, are rendered as backslash escapes so the result is always
    valid UTF-8.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        try:
            value = value.encode("utf-8", "surrogateescape")
        except UnicodeEncodeError:
            # Lone surrogates outside the escape range (e.g. WTF-16 paths)
            return value.encode("utf-8", "backslashreplace").decode("utf-8")
    return value.decode("utf-8", "backslashreplace")


class Normalizer:
    """
    Builds snapshots from a telemetry source.

    Holds no state besides the source, so one instance may be shared by
    concurrent callers.
    """

    def __init__(self, source: TelemetrySource | None = None):
        self.source = source or default_source()

    def collect_snapshot(self) -> Snapshot:
        """
        Take a fresh snapshot of the host.

        Returns:
            Snapshot with every facet populated; unavailable readings are
            empty strings, empty sequences, or None temperatures.

        Raises:
            TelemetrySourceError: If the source cannot be queried at all.
        """
        start = time.perf_counter()

        self.source.refresh()

        snapshot = Snapshot(
            identity=self.normalize_identity(self.source.read_identity()),
            memory=self.normalize_memory(self.source.read_memory()),
            disks=tuple(self.normalize_disk(disk) for disk in self.source.read_disks()),
            sensors=tuple(self.normalize_sensor(sensor) for sensor in self.source.read_sensors()),
        )

        duration = (time.perf_counter() - start) * 1000
        logger.debug(
            f"Snapshot from '{self.source.name}' took {duration:.2f}ms "
            f"({len(snapshot.disks)} disks, {len(snapshot.sensors)} sensors)"
        )

        return snapshot

    @staticmethod
    def normalize_identity(raw: RawIdentity) -> Identity:
        return Identity(
            name=raw.name or "",
            kernel_version=raw.kernel_version or "",
            os_version=raw.os_version or "",
            host_name=raw.host_name or "",
        )

    @staticmethod
    def normalize_memory(raw: RawMemory) -> MemoryUsage:
        return MemoryUsage(
            total_ram_gb=to_gb(raw.total_memory),
            total_ram_mb=to_mb(raw.total_memory),
            used_ram_gb=to_gb(raw.used_memory),
            used_ram_mb=to_mb(raw.used_memory),
            ram_percent=usage_percent(raw.used_memory, raw.total_memory),
            total_swap_gb=to_gb(raw.total_swap),
            total_swap_mb=to_mb(raw.total_swap),
            used_swap_gb=to_gb(raw.used_swap),
            used_swap_mb=to_mb(raw.used_swap),
            swap_percent=usage_percent(raw.used_swap, raw.total_swap),
        )

    @staticmethod
    def normalize_disk(raw: RawDisk) -> DiskUsage:
        return DiskUsage(
            name=display_string(raw.name),
            mount_point=display_string(raw.mount_point),
            available_space_gb=to_gb(raw.available_bytes),
            available_space_mb=to_mb(raw.available_bytes),
            total_space_gb=to_gb(raw.total_bytes),
            total_space_mb=to_mb(raw.total_bytes),
        )

    @staticmethod
    def normalize_sensor(raw: RawSensor) -> SensorReading:
        temperature = None
        if raw.temperature is not None and math.isfinite(raw.temperature):
            temperature = float(raw.temperature)
        return SensorReading(label=friendly_label(raw.label), temperature=temperature)


def collect_snapshot(source: TelemetrySource | None = None) -> Snapshot:
    """
    Convenience function to take one snapshot.

    Args:
        source: Optional telemetry source. Reads the live host if not provided.

    Returns:
        The snapshot.
    """
    return Normalizer(source).collect_snapshot()
