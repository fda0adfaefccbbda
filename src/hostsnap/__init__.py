"""
Hostsnap - Point-in-time host telemetry snapshots over HTTP.

Samples host identity, memory and swap usage, disk capacity and thermal
sensors, normalizes them into a stable schema and serves them as JSON.
"""

__version__ = "0.3.0"
__author__ = "Sluggisty"

__all__ = ["__version__"]
