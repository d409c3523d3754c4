"""Runs a single test case once for one execution key."""
from __future__ import annotations

import traceback
from typing import Callable, Optional

from seedtest.reporting.terminal import COLOR_BLUE, COLOR_RED, HarnessLog

from .asserts import AssertTracker
from .errors import SetupFailureError
from .fuzzer import Fuzzer
from .models import (
    DEFAULT_TIMEOUT_S,
    FAILED,
    SETUP_FAILURE,
    SKIPPED,
    TEST_ABORTED,
    TEST_SKIPPED,
    TEST_STARTED,
    CaseContext,
    TestCase,
    TestSuite,
)
from .timeout import TimeoutGuard, bail_out


class CaseExecutor:
    """Executes setup, body and teardown of one case under the watchdog."""

    def __init__(
        self,
        *,
        log: Optional[HarnessLog] = None,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        guard: Optional[TimeoutGuard] = None,
        asserts: Optional[AssertTracker] = None,
        fuzzer_factory: Callable[[int], Fuzzer] = Fuzzer,
        on_timeout: Callable[[], None] = bail_out,
    ) -> None:
        self._log = log or HarnessLog()
        self._timeout_s = timeout_s
        self._guard = guard or TimeoutGuard()
        self._asserts = asserts or AssertTracker(self._log)
        self._fuzzer_factory = fuzzer_factory
        self._on_timeout = on_timeout

    @property
    def asserts(self) -> AssertTracker:
        return self._asserts

    def execute(self, suite: TestSuite, case: TestCase, exec_key: int, *, force_run: bool = False) -> str:
        """Run ``case`` once and return its harness result."""

        if not case.enabled and not force_run:
            self._log.final_result("Test", case.name, "Skipped (Disabled)")
            return SKIPPED

        fuzzer = self._fuzzer_factory(exec_key)
        self._asserts.reset()
        context = CaseContext(suite=suite, case=case, exec_key=exec_key, asserts=self._asserts, fuzzer=fuzzer)

        timer = None
        try:
            timer = self._guard.arm(self._timeout_s, self._on_timeout)
        except SetupFailureError as exc:
            self._log.error(f"Failed to arm case timeout, running without watchdog: {exc}")

        if suite.setup is not None and not self._run_setup(suite, context):
            self._log.final_result("Suite Setup", suite.name, "Failed", COLOR_RED)
            self._guard.disarm(timer)
            return SETUP_FAILURE

        outcome = self._run_body(case, context)
        body_result = self._asserts.to_result()

        if suite.teardown is not None:
            try:
                suite.teardown(context)
            except Exception:
                self._log.error(f"Suite teardown of '{suite.name}' raised:\n{traceback.format_exc().rstrip()}")

        self._guard.disarm(timer)

        if fuzzer.invocation_count > 0:
            self._log.info(f"Fuzzer invocations: {fuzzer.invocation_count}")
        return self._classify(case, outcome, body_result)

    def _run_setup(self, suite: TestSuite, context: CaseContext) -> bool:
        try:
            suite.setup(context)  # type: ignore[misc]
        except Exception:
            self._log.error(f"Suite setup of '{suite.name}' raised:\n{traceback.format_exc().rstrip()}")
            return False
        return self._asserts.to_result() != FAILED

    def _run_body(self, case: TestCase, context: CaseContext) -> int:
        try:
            outcome = case.body(context)
        except Exception:
            self._log.error(f"Test '{case.name}' raised:\n{traceback.format_exc().rstrip()}")
            return TEST_ABORTED
        if outcome is None:
            return TEST_STARTED
        return outcome

    def _classify(self, case: TestCase, outcome: int, body_result: str) -> str:
        if outcome == TEST_SKIPPED:
            self._log.final_result("Test", case.name, "Skipped (Programmatically)", COLOR_BLUE)
            return SKIPPED
        if outcome == TEST_STARTED:
            self._log.final_result(
                "Test", case.name, "Failed (test started, but did not return TEST_COMPLETED)", COLOR_RED
            )
            return FAILED
        if outcome == TEST_ABORTED:
            self._log.final_result("Test", case.name, "Failed (Aborted)", COLOR_RED)
            return FAILED
        self._asserts.log_summary()
        return body_result

