"""
Exceptions raised by Hostsnap.
"""

from __future__ import annotations


class HostsnapError(Exception):
    """Base class for all Hostsnap errors."""


class TelemetrySourceError(HostsnapError):
    """The OS telemetry subsystem cannot be queried at all."""
