"""
Host telemetry source backed by psutil.

Reads identity, memory, disk, and thermal sensor information from the
running host.
"""

from __future__ import annotations

import math
import platform
import socket

import distro
import psutil

from hostsnap.exceptions import TelemetrySourceError
from hostsnap.sources.base import RawDisk, RawIdentity, RawMemory, RawSensor, TelemetrySource


class PsutilSource(TelemetrySource):
    """Reads live host telemetry through psutil and distro."""

    name = "psutil"

    def refresh(self) -> None:
        """Query the memory counters; if these fail nothing else will work."""
        try:
            psutil.virtual_memory()
        except (OSError, RuntimeError) as e:
            raise TelemetrySourceError(f"Cannot query host telemetry: {e}") from e

    def read_identity(self) -> RawIdentity:
        """Read identity strings, reporting empty values as absent."""
        return RawIdentity(
            name=self._safe_string(distro.name, "name"),
            kernel_version=self._safe_string(platform.release, "kernel_version"),
            os_version=self._safe_string(distro.version, "os_version"),
            host_name=self._safe_string(socket.gethostname, "host_name"),
        )

    def read_memory(self) -> RawMemory:
        """Read RAM and swap counters."""
        mem = psutil.virtual_memory()

        try:
            swap = psutil.swap_memory()
            total_swap, used_swap = swap.total, swap.used
        except (OSError, RuntimeError) as e:
            self.logger.debug(f"Could not read swap counters: {e}")
            total_swap, used_swap = 0, 0

        return RawMemory(
            total_memory=mem.total,
            used_memory=mem.used,
            total_swap=total_swap,
            used_swap=used_swap,
        )

    def read_disks(self) -> list[RawDisk]:
        """Get mounted disk information."""
        disks = []

        try:
            partitions = psutil.disk_partitions(all=False)
        except OSError as e:
            self.logger.debug(f"Could not enumerate partitions: {e}")
            return disks

        for part in partitions:
            try:
                usage = psutil.disk_usage(part.mountpoint)
                available, total = usage.free, usage.total
            except (PermissionError, OSError) as e:
                self.logger.debug(f"Could not get usage stats for {part.mountpoint}: {e}")
                available, total = 0, 0

            disks.append(
                RawDisk(
                    name=part.device,
                    mount_point=part.mountpoint,
                    available_bytes=available,
                    total_bytes=total,
                )
            )

        return disks

    def read_sensors(self) -> list[RawSensor]:
        """Get thermal sensor readings, chip by chip."""
        sensors: list[RawSensor] = []

        # Not available on every platform (e.g. Windows)
        if not hasattr(psutil, "sensors_temperatures"):
            return sensors

        try:
            chips = psutil.sensors_temperatures()
        except (OSError, RuntimeError) as e:
            self.logger.debug(f"Could not read thermal sensors: {e}")
            return sensors

        for chip, entries in (chips or {}).items():
            for index, entry in enumerate(entries, start=1):
                # Unlabelled hwmon inputs are named after their tempN file
                label = entry.label or f"{chip} temp{index}"
                sensors.append(RawSensor(label=label, temperature=self._temperature(entry.current)))

        return sensors

    def _safe_string(self, reader, field_name: str) -> str | None:
        try:
            value = reader()
        except OSError as e:
            self.logger.debug(f"Could not read {field_name}: {e}")
            return None
        return value or None

    @staticmethod
    def _temperature(value) -> float | None:
        if value is None:
            return None
        value = float(value)
        return None if math.isnan(value) else value
