"""Label indexing and topology filtering of cluster nodes."""

from __future__ import annotations

from collections.abc import Mapping

_INDEX_PREFIX = "l:"


def label_index_name(label: str) -> str:
    """Name of the index that groups objects by the value of ``label``."""
    return _INDEX_PREFIX + label


def label_index_values(label: str, labels: Mapping[str, str] | None) -> list[str]:
    """Index values of an object with ``labels`` for the index on ``label``.

    An object without the label has no index values.
    """
    labels = labels or {}
    return [labels[label]] if label in labels else []


def _matches(labels: Mapping[str, str] | None, segments: Mapping[str, str]) -> bool:
    labels = labels or {}
    return all(key in labels and labels[key] == value for key, value in segments.items())


def filter_nodes_by_topology(
    nodes: Mapping[str, Mapping[str, str] | None],
    segments: Mapping[str, str] | None,
) -> list[str]:
    """Names of the nodes whose labels carry every key and value in ``segments``.

    ``nodes`` maps each node name to its labels. With no segments every node
    is returned.
    """
    if not segments:
        return list(nodes)
    return [name for name, labels in nodes.items() if _matches(labels, segments)]


__all__ = ["filter_nodes_by_topology", "label_index_name", "label_index_values"]