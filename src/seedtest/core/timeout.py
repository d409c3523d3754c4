"""One-shot watchdog that kills the process when a case hangs."""
from __future__ import annotations

import os
import threading
from typing import Callable, Optional

from seedtest.reporting.terminal import HarnessLog

from .errors import SetupFailureError

# Process exit status used when the watchdog fires.
TIMEOUT_EXIT_CODE = -1


def bail_out() -> None:
    """Abort the whole run immediately; no unwinding, no bookkeeping."""

    HarnessLog().error("TestCaseTimeout timer expired. Aborting test run.")
    os._exit(TIMEOUT_EXIT_CODE)


class TimeoutGuard:
    """Arms and disarms ``threading.Timer`` based watchdogs."""

    def arm(self, timeout_s: float, on_timeout: Callable[[], None]) -> threading.Timer:
        if on_timeout is None:
            raise SetupFailureError("Timeout callback can't be None")
        if timeout_s < 0:
            raise SetupFailureError("Timeout value must be bigger than zero.")
        timer = threading.Timer(timeout_s, on_timeout)
        timer.daemon = True
        try:
            timer.start()
        except RuntimeError as exc:
            raise SetupFailureError(f"Creation of timer failed: {exc}") from exc
        return timer

    def disarm(self, handle: Optional[threading.Timer]) -> None:
        if handle is None:
            return
        handle.cancel()
