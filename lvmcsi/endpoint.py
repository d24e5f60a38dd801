"""Endpoint parsing and call-log filtering for the RPC server."""

from __future__ import annotations

_NOISY_METHODS = ("NodeGetVolumeStats", "NodeGetCapabilities")


def parse_endpoint(endpoint: str) -> tuple[str, str]:
    """Split a ``unix://`` or ``tcp://`` endpoint into protocol and address.

    Raises ValueError for any other scheme or an empty address.
    """
    lowered = endpoint.lower()
    if lowered.startswith("unix://") or lowered.startswith("tcp://"):
        proto, _, addr = endpoint.partition("://")
        if addr:
            return proto, addr
    raise ValueError(f"Invalid endpoint: {endpoint}")


def is_informative_log(method: str) -> bool:
    """Whether calls to ``method`` are worth logging; polling calls are not."""
    return not any(noisy in method for noisy in _NOISY_METHODS)


__all__ = ["is_informative_log", "parse_endpoint"]