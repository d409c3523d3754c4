"""seedtest package initialization."""
from __future__ import annotations

from .core import (
    TEST_ABORTED,
    TEST_COMPLETED,
    TEST_SKIPPED,
    TEST_STARTED,
    CaseContext,
    RunOrchestrator,
    TestCase,
    TestSuite,
    run_suites,
)
from .version import __version__

__all__ = [
    "__version__",
    "CaseContext",
    "RunOrchestrator",
    "TEST_ABORTED",
    "TEST_COMPLETED",
    "TEST_SKIPPED",
    "TEST_STARTED",
    "TestCase",
    "TestSuite",
    "run_suites",
]
