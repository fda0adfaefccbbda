"""
Pytest fixtures and configuration for Hostsnap tests.

Provides fake telemetry sources and sample readings shared across the
test suite.
"""

from __future__ import annotations

import pytest

from hostsnap.exceptions import TelemetrySourceError
from hostsnap.sources.base import RawDisk, RawIdentity, RawMemory, RawSensor, TelemetrySource
from hostsnap.sources.static import StaticSource


class BrokenSource(TelemetrySource):
    """Source whose telemetry subsystem is unreachable."""

    name = "broken"

    def refresh(self) -> None:
        raise TelemetrySourceError("telemetry subsystem unavailable")

    def read_identity(self) -> RawIdentity:
        raise AssertionError("read after failed refresh")

    def read_memory(self) -> RawMemory:
        raise AssertionError("read after failed refresh")

    def read_disks(self) -> list[RawDisk]:
        raise AssertionError("read after failed refresh")

    def read_sensors(self) -> list[RawSensor]:
        raise AssertionError("read after failed refresh")


# Sample Readings
@pytest.fixture
def sample_identity():
    """Identity as reported by a Fedora workstation."""
    return RawIdentity(
        name="Fedora Linux",
        kernel_version="6.5.11-300.fc39.x86_64",
        os_version="39",
        host_name="fedora",
    )


@pytest.fixture
def sample_memory():
    """16 GB of RAM, half used, no swap."""
    return RawMemory(
        total_memory=16_000_000_000,
        used_memory=8_000_000_000,
        total_swap=0,
        used_swap=0,
    )


@pytest.fixture
def sample_disks():
    """A single 500 GB root volume, half free."""
    return [
        RawDisk(
            name="/dev/sda1",
            mount_point="/",
            available_bytes=250_000_000_000,
            total_bytes=500_000_000_000,
        )
    ]


@pytest.fixture
def sample_sensors():
    """A single GPU edge sensor."""
    return [RawSensor(label="edge", temperature=45.0)]


# Source Fixtures
@pytest.fixture
def sample_source(sample_identity, sample_memory, sample_disks, sample_sensors):
    """Static source serving the sample readings."""
    return StaticSource(
        identity=sample_identity,
        memory=sample_memory,
        disks=sample_disks,
        sensors=sample_sensors,
    )


@pytest.fixture
def empty_source():
    """Static source on a host where every facet is unavailable."""
    return StaticSource()


@pytest.fixture
def broken_source():
    """Source whose refresh always fails."""
    return BrokenSource()


@pytest.fixture
def readings_file(tmp_path):
    """YAML file of raw readings for StaticSource.from_file."""
    path = tmp_path / "readings.yaml"
    path.write_text(
        """
identity:
  name: Ubuntu
  kernel_version: 6.8.0-45-generic
  os_version: "24.04"
  host_name: build-01
memory:
  total_memory: 8000000000
  used_memory: 2000000000
  total_swap: 2000000000
  used_swap: 500000000
disks:
  - name: /dev/nvme0n1p2
    mount_point: /
    available_bytes: 120000000000
    total_bytes: 480000000000
  - name: /dev/nvme0n1p1
    mount_point: /boot/efi
    available_bytes: 500000000
    total_bytes: 1000000000
sensors:
  - label: Tctl
    temperature: 52.5
  - label: Composite
    temperature: 38.85
  - label: acpitz temp1
    temperature: null
"""
    )
    return path


# Pytest Configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "cli: marks tests as CLI tests")
