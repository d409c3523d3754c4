"""Exception types raised at the harness boundaries."""
from __future__ import annotations


class HarnessError(Exception):
    """Base class for harness errors."""


class InvalidArgumentError(HarnessError, ValueError):
    """Raised when a seed length, identifier or iteration is malformed."""


class SetupFailureError(HarnessError, RuntimeError):
    """Raised when the timeout watchdog cannot be armed."""
