"""Storage-class and snapshot-class parameters."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from lvmcsi.quantity import parse_quantity

SPACE_WEIGHTED = "SpaceWeighted"

_PVC_NAME_KEY = "csi.storage.k8s.io/pvc/name"
_PVC_NAMESPACE_KEY = "csi.storage.k8s.io/pvc/namespace"
_PV_NAME_KEY = "csi.storage.k8s.io/pv/name"

_FLOAT = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.ASCII | re.IGNORECASE,
)


@dataclass
class VolumeParams:
    """Settings a storage class may give for provisioning a volume."""

    vg_pattern: re.Pattern[str] = field(default_factory=lambda: re.compile(""))
    scheduler: str = SPACE_WEIGHTED
    shared: str = "no"
    thin_provision: str = "no"
    # Optional metadata passed by the external provisioner.
    pvc_name: str = ""
    pvc_namespace: str = ""
    pv_name: str = ""


@dataclass
class SnapshotParams:
    """Settings a snapshot class may give for a snapshot's size."""

    snap_size: float = 0.0
    abs_snap_size: bool = False


def _lower_keys(params: Mapping[str, str] | None) -> dict[str, str]:
    # Keys in storage classes are all lower case, so mistyped case is forgiven.
    return {key.lower(): value for key, value in (params or {}).items()}


def new_volume_params(params: Mapping[str, str] | None) -> VolumeParams:
    """Build volume parameters from a storage class's parameter map.

    Raises ValueError when the volume group pattern is not a valid regex.
    """
    m = _lower_keys(params)

    pattern = m.get("vgpattern", "")
    if "volgroup" in m:
        pattern = f"^{m['volgroup']}$"
    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        raise ValueError(f"invalid volgroup/vgpattern param {pattern}: {exc}") from exc

    result = VolumeParams(vg_pattern=compiled)
    result.scheduler = m.get("scheduler", result.scheduler)
    result.shared = m.get("shared", result.shared)
    result.thin_provision = m.get("thinprovision", result.thin_provision)
    result.pvc_name = m.get(_PVC_NAME_KEY, "")
    result.pvc_namespace = m.get(_PVC_NAMESPACE_KEY, "")
    result.pv_name = m.get(_PV_NAME_KEY, "")
    return result


def _parse_percentage(text: str) -> float:
    if not _FLOAT.fullmatch(text):
        raise ValueError(f"invalid syntax for snapSize percentage: {text!r}")
    return float(text)


def new_snapshot_params(params: Mapping[str, str] | None) -> SnapshotParams:
    """Build snapshot parameters from a snapshot class's parameter map.

    ``snapsize`` is either a percentage of the origin volume ("50%") or an
    absolute quantity ("3Gi"). Raises ValueError on an invalid size.
    """
    m = _lower_keys(params)
    result = SnapshotParams()

    size = m.get("snapsize")
    if size is None:
        return result

    if size.endswith("%"):
        percent = _parse_percentage(size[:-1])
        # NaN passes both comparisons, as it does with the original checks.
        if percent < 1 or percent > 100:
            raise ValueError(
                f"snapSize percentage should be between 1 and 100, found {size}"
            )
        result.snap_size = percent
        return result

    try:
        absolute = parse_quantity(size)
    except ValueError as exc:
        if "out of range" not in str(exc):
            raise
        absolute = 0
    if absolute < 1:
        raise ValueError(f"absolute snapSize should greater than 0, found {size}")
    result.abs_snap_size = True
    result.snap_size = float(absolute)
    return result


__all__ = [
    "SPACE_WEIGHTED",
    "SnapshotParams",
    "VolumeParams",
    "math",
    "new_snapshot_params",
    "new_volume_params",
]