"""Rounding of volume and snapshot sizes."""

from __future__ import annotations

from lvmcsi.params import SnapshotParams

MB = 1000 * 1000
GB = 1000 * 1000 * 1000
Mi = 1024 * 1024
Gi = 1024 * 1024 * 1024


def _truncating_div(numerator: int, denominator: int) -> int:
    # Integer division that rounds toward zero, as fixed-width integers do.
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def round_capacity(size: int) -> int:
    """Round a size in bytes up to a whole Gi above 1Gi, else to a whole Mi.

    The smallest allocatable size is therefore 1Mi.
    """
    if size > Gi:
        return _truncating_div(size + Gi - 1, Gi) * Gi
    return _truncating_div(size + Mi - 1, Mi) * Mi


def snapshot_size(params: SnapshotParams, capacity: int) -> int:
    """Size in bytes of a snapshot of a volume of ``capacity`` bytes.

    A percentage is taken of the capacity; an absolute size is capped at the
    capacity. The result is rounded with :func:`round_capacity`.
    """
    if not params.abs_snap_size:
        size = int(float(capacity) * (params.snap_size / 100))
    else:
        size = min(int(params.snap_size), capacity)
    return round_capacity(size)


__all__ = ["GB", "Gi", "MB", "Mi", "round_capacity", "snapshot_size"]