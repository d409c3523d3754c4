"""Core models and the execution engine exposed at the package level."""
from .asserts import AssertTracker
from .errors import HarnessError, InvalidArgumentError, SetupFailureError
from .executor import CaseExecutor
from .fuzzer import Fuzzer
from .keys import INVALID_EXEC_KEY, MAX_EXEC_KEY, check_exec_key, derive_exec_key, generate_run_seed
from .models import (
    FAILED,
    NO_ASSERTS,
    PASSED,
    SETUP_FAILURE,
    SKIPPED,
    TEST_ABORTED,
    TEST_COMPLETED,
    TEST_SKIPPED,
    TEST_STARTED,
    CaseContext,
    Counters,
    FailureRecord,
    RunResult,
    SuiteReport,
    TestCase,
    TestSuite,
)
from .runner import RunOrchestrator, Selection, list_suites, resolve_filter, run_suites
from .timeout import TimeoutGuard, bail_out

__all__ = [
    "AssertTracker",
    "CaseContext",
    "CaseExecutor",
    "Counters",
    "FAILED",
    "FailureRecord",
    "Fuzzer",
    "HarnessError",
    "INVALID_EXEC_KEY",
    "InvalidArgumentError",
    "MAX_EXEC_KEY",
    "NO_ASSERTS",
    "PASSED",
    "RunOrchestrator",
    "RunResult",
    "SETUP_FAILURE",
    "SKIPPED",
    "Selection",
    "SetupFailureError",
    "SuiteReport",
    "TEST_ABORTED",
    "TEST_COMPLETED",
    "TEST_SKIPPED",
    "TEST_STARTED",
    "TestCase",
    "TestSuite",
    "TimeoutGuard",
    "bail_out",
    "check_exec_key",
    "derive_exec_key",
    "generate_run_seed",
    "list_suites",
    "resolve_filter",
    "run_suites",
]
