"""
Telemetry sources for Hostsnap.

A source supplies raw, unnormalized readings from the host; the
normalizer turns them into a Snapshot.
"""

from __future__ import annotations

from hostsnap.sources.base import RawDisk, RawIdentity, RawMemory, RawSensor, TelemetrySource
from hostsnap.sources.psutil_source import PsutilSource
from hostsnap.sources.static import StaticSource


def default_source() -> TelemetrySource:
    """Return a source reading the live host."""
    return PsutilSource()


__all__ = [
    "TelemetrySource",
    "RawIdentity",
    "RawMemory",
    "RawDisk",
    "RawSensor",
    "PsutilSource",
    "StaticSource",
    "default_source",
]
