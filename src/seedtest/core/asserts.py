"""Assertion tracking used by suite hooks and case bodies."""
from __future__ import annotations

from typing import Optional

from seedtest.reporting.terminal import COLOR_GREEN, COLOR_RED, HarnessLog

from .models import FAILED, NO_ASSERTS, PASSED


class AssertTracker:
    """Counts passed/failed assertions for the case currently executing."""

    def __init__(self, log: Optional[HarnessLog] = None) -> None:
        self._log = log or HarnessLog()
        self.passed_count = 0
        self.failed_count = 0

    def reset(self) -> None:
        self.passed_count = 0
        self.failed_count = 0

    def check(self, condition: object, message: str) -> bool:
        """Record ``condition`` as one assertion and return its truth value."""

        if condition:
            self.passed_count += 1
            self._log.info(f"Assert '{message}': Passed")
            return True
        self.failed_count += 1
        self._log.error(f"Assert '{message}': {self._log.colored('Failed', COLOR_RED)}")
        return False

    def passed(self, message: str) -> None:
        self.check(True, message)

    def to_result(self) -> str:
        if self.failed_count > 0:
            return FAILED
        if self.passed_count > 0:
            return PASSED
        return NO_ASSERTS

    def log_summary(self) -> None:
        total = self.passed_count + self.failed_count
        line = f"Assert Summary: Total={total} Passed={self.passed_count} Failed={self.failed_count}"
        if self.failed_count == 0:
            self._log.info(self._log.colored(line, COLOR_GREEN))
        else:
            self._log.error(self._log.colored(line, COLOR_RED))
