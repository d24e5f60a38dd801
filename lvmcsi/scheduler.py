"""Node weighting used to pick where a new volume is provisioned."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from lvmcsi.params import SPACE_WEIGHTED

# Pick the node with the fewest volumes in matching volume groups.
VOLUME_WEIGHTED = "VolumeWeighted"
# Pick the node whose matching volumes occupy the least capacity.
CAPACITY_WEIGHTED = "CapacityWeighted"

_INT64_MAX = 2**63 - 1
_INT64_MIN = -(2**63)
_DECIMAL_INT = re.compile(r"[+-]?\d+", re.ASCII)


@dataclass
class VolumeGroup:
    """A volume group on a node and its free space in bytes."""

    name: str
    free: int = 0


@dataclass
class LVMNode:
    """A node and the volume groups it reports."""

    name: str
    volume_groups: list[VolumeGroup] = field(default_factory=list)


@dataclass
class LVMVolume:
    """A provisioned logical volume; capacity is a decimal byte string."""

    name: str
    vol_group: str = ""
    owner_node_id: str = ""
    capacity: str = "0"


def _as_pattern(pattern: re.Pattern[str] | str) -> re.Pattern[str]:
    return pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)


def _parse_capacity(text: str) -> int | None:
    if not _DECIMAL_INT.fullmatch(text):
        return None
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def volume_weighted_map(
    volumes: Iterable[LVMVolume], pattern: re.Pattern[str] | str
) -> dict[str, int]:
    """Count, per owner node, the volumes whose volume group matches."""
    regex = _as_pattern(pattern)
    counts = Counter(
        vol.owner_node_id for vol in volumes if regex.search(vol.vol_group)
    )
    return dict(counts)


def capacity_weighted_map(
    volumes: Iterable[LVMVolume], pattern: re.Pattern[str] | str
) -> dict[str, int]:
    """Sum, per owner node, the capacity of volumes whose group matches.

    Volumes with an unparsable capacity are left out.
    """
    regex = _as_pattern(pattern)
    totals: dict[str, int] = {}
    for vol in volumes:
        if not regex.search(vol.vol_group):
            continue
        size = _parse_capacity(vol.capacity)
        if size is not None:
            totals[vol.owner_node_id] = totals.get(vol.owner_node_id, 0) + size
    return totals


def _node_max_free(node: LVMNode, regex: re.Pattern[str]) -> int:
    return max(
        (vg.free for vg in node.volume_groups if regex.search(vg.name)),
        default=0,
    )


def space_weighted_map(
    nodes: Iterable[LVMNode], pattern: re.Pattern[str] | str
) -> dict[str, int]:
    """Weight nodes so that the one with the most free space weighs least.

    Nodes without any matching group having free space are left out.
    """
    regex = _as_pattern(pattern)
    weights: dict[str, int] = {}
    for node in nodes:
        max_free = max(_node_max_free(node, regex), 0)
        if max_free > 0:
            weights[node.name] = _INT64_MAX - max_free
    return weights


def node_map(
    scheduler: str,
    pattern: re.Pattern[str] | str,
    volumes: Iterable[LVMVolume],
    nodes: Iterable[LVMNode],
) -> dict[str, int]:
    """Node weights for the named scheduler; unknown names weigh by space."""
    if scheduler == VOLUME_WEIGHTED:
        return volume_weighted_map(volumes, pattern)
    if scheduler == CAPACITY_WEIGHTED:
        return capacity_weighted_map(volumes, pattern)
    return space_weighted_map(nodes, pattern)


def max_free_capacity(
    nodes: Iterable[LVMNode], pattern: re.Pattern[str] | str
) -> int:
    """Largest free space of any single matching volume group, or 0.

    This is the largest volume that fits anywhere, not the sum of free space.
    """
    regex = _as_pattern(pattern)
    return max((max(_node_max_free(node, regex), 0) for node in nodes), default=0)


__all__ = [
    "CAPACITY_WEIGHTED",
    "LVMNode",
    "LVMVolume",
    "SPACE_WEIGHTED",
    "VOLUME_WEIGHTED",
    "VolumeGroup",
    "capacity_weighted_map",
    "max_free_capacity",
    "node_map",
    "space_weighted_map",
    "volume_weighted_map",
]