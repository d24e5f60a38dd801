"""Parameter parsing, sizing, scheduling and topology logic for an LVM-backed CSI driver."""

__version__ = "0.1.0"

__all__ = [
    "config",
    "endpoint",
    "metrics",
    "params",
    "quantity",
    "scheduler",
    "sizes",
    "topology",
]