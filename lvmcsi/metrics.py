"""Metrics landing page and node topology reporting for the node agent."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

# Topology key under which the driver reports the node it runs on.
TOPOLOGY_KEY = "openebs.io/nodename"
ALLOWED_TOPOLOGIES_ENV = "ALLOWED_TOPOLOGIES"


def metrics_index_page(metrics_path: str) -> str:
    """HTML page served at the root that links to the metrics path."""
    return (
        "<html>\n"
        "\t\t\t<head><title>LVM Exporter</title></head>\n"
        "\t\t\t<body>\n"
        "\t\t\t<h1>LVM Exporter</h1>\n"
        f'\t\t\t<p><a href="{metrics_path}">Metrics</a></p>\n'
        "\t\t\t</body>\n"
        "\t\t\t</html>"
    )


def _allowed_keys(allowed_topologies: str | Iterable[str] | None) -> list[str]:
    if allowed_topologies is None:
        allowed_topologies = os.environ.get(ALLOWED_TOPOLOGIES_ENV, "")
    if isinstance(allowed_topologies, str):
        allowed_topologies = allowed_topologies.split(",")
    return [key for key in allowed_topologies if key]


def node_topology(
    node_id: str,
    labels: Mapping[str, str] | None,
    allowed_topologies: str | Iterable[str] | None = None,
) -> dict[str, str]:
    """Topology segments a node reports.

    The driver's own key maps to ``node_id``; each allowed key that is among
    the node's labels is added with the label's value. ``allowed_topologies``
    is a comma-separated string or a list of keys; when None it is read from
    the ALLOWED_TOPOLOGIES environment variable.
    """
    labels = labels or {}
    topology = {TOPOLOGY_KEY: node_id}
    for key in _allowed_keys(allowed_topologies):
        if key in labels:
            topology[key] = labels[key]
    return topology


__all__ = [
    "ALLOWED_TOPOLOGIES_ENV",
    "TOPOLOGY_KEY",
    "metrics_index_page",
    "node_topology",
]