"""Driver configuration filled from command-line flags or user input."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Config:
    """Settings a driver instance is started with."""

    # Name the driver registers under with the container orchestrator.
    driver_name: str = ""
    # Either "controller" or "agent".
    plugin_type: str = ""
    # Version of the controller/node driver.
    version: str = ""
    # Endpoint (unix or tcp) the plugin listens on.
    endpoint: str = ""
    # Identifies the node the agent runs on.
    node_id: str = ""
    # Whether to apply iops/bps limits to pods using local volumes.
    set_io_limits: bool = False
    # Container runtime on the node, used to locate pod cgroups.
    container_runtime: str = ""
    # Per-volume-group rate limits, entries of the form "vg-prefix=100".
    r_iops_limit_per_gb: list[str] | None = None
    w_iops_limit_per_gb: list[str] | None = None
    r_bps_limit_per_gb: list[str] | None = None
    w_bps_limit_per_gb: list[str] | None = None
    # TCP address of the metrics endpoint; empty disables it.
    listen_address: str = ""
    # HTTP path the metrics are served on.
    metrics_path: str = ""
    # Leave out metrics about the exporter process itself.
    disable_exporter_metrics: bool = False


def default_config() -> Config:
    """Return a fresh configuration with every setting at its zero value."""
    return Config()