"""Reporting exports."""
from .terminal import HarnessLog

__all__ = [
    "HarnessLog",
]
