"""Core dataclasses shared across seedtest subsystems."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence

from seedtest.config.models import DEFAULT_TIMEOUT_S

if TYPE_CHECKING:
    from .asserts import AssertTracker
    from .fuzzer import Fuzzer


# Outcome codes returned by case bodies.
TEST_ABORTED = -1
TEST_STARTED = 0
TEST_COMPLETED = 1
TEST_SKIPPED = 2

# Harness-level results.
PASSED = "passed"
FAILED = "failed"
SKIPPED = "skipped"
NO_ASSERTS = "no_asserts"
SETUP_FAILURE = "setup_failure"

FAILING_RESULTS = frozenset({FAILED, NO_ASSERTS, SETUP_FAILURE})

RUN_SEED_LENGTH = 16

CaseBody = Callable[["CaseContext"], Optional[int]]
SuiteHook = Callable[["CaseContext"], Any]


@dataclass(frozen=True)
class TestCase:
    """A single named test unit."""

    __test__ = False  # keep pytest from collecting the class

    name: str
    body: CaseBody
    description: str = ""
    enabled: bool = True

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Test case name cannot be empty")


@dataclass(frozen=True)
class TestSuite:
    """Named, ordered group of cases sharing optional setup/teardown."""

    __test__ = False

    name: str
    cases: Sequence[TestCase]
    setup: Optional[SuiteHook] = None
    teardown: Optional[SuiteHook] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Test suite name cannot be empty")
        object.__setattr__(self, "cases", tuple(self.cases))


@dataclass
class CaseContext:
    """Per-execution handles passed to setup, body and teardown."""

    suite: TestSuite
    case: TestCase
    exec_key: int
    asserts: "AssertTracker"
    fuzzer: "Fuzzer"


@dataclass
class Counters:
    passed: int = 0
    failed: int = 0
    skipped: int = 0

    def record(self, result: str) -> None:
        if result == PASSED:
            self.passed += 1
        elif result == SKIPPED:
            self.skipped += 1
        else:
            self.failed += 1

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.skipped


@dataclass(frozen=True)
class FailureRecord:
    """A failing (case, iteration) kept for the reproduction report."""

    suite_name: str
    case: TestCase
    seed: str
    iteration: int
    exec_key: int

    def repro_args(self) -> str:
        return f"--seed {self.seed} --filter {self.case.name}"


@dataclass
class SuiteReport:
    index: int
    name: str
    counters: Counters = field(default_factory=Counters)
    runtime_s: float = 0.0

    @property
    def passed(self) -> bool:
        return self.counters.failed == 0


@dataclass
class RunResult:
    """Outcome of one orchestrator invocation."""

    exit_code: int
    seed: Optional[str] = None
    totals: Counters = field(default_factory=Counters)
    suites: list[SuiteReport] = field(default_factory=list)
    failures: list[FailureRecord] = field(default_factory=list)
    total_cases: int = 0
    runtime_s: float = 0.0

    @property
    def passed(self) -> bool:
        return self.exit_code == 0
