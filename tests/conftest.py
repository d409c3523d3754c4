from __future__ import annotations

from typing import List, Optional

import pytest

from seedtest.config import HarnessConfig
from seedtest.core import (
    TEST_COMPLETED,
    AssertTracker,
    CaseExecutor,
    Fuzzer,
    RunOrchestrator,
    SetupFailureError,
)
from seedtest.reporting import HarnessLog


class RecordingGuard:
    """Timeout guard double that records arm/disarm calls without threads."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.armed: List[float] = []
        self.disarmed: List[Optional[object]] = []

    def arm(self, timeout_s, on_timeout):
        if self.fail:
            raise SetupFailureError("timer subsystem unavailable")
        self.armed.append(timeout_s)
        return object()

    def disarm(self, handle) -> None:
        self.disarmed.append(handle)


class RecordingFuzzerFactory:
    def __init__(self) -> None:
        self.keys: List[int] = []

    def __call__(self, exec_key: int) -> Fuzzer:
        self.keys.append(exec_key)
        return Fuzzer(exec_key)


def passing_body(ctx):
    ctx.asserts.check(True, "always true")
    return TEST_COMPLETED


def failing_body(ctx):
    ctx.asserts.check(False, "always false")
    return TEST_COMPLETED


@pytest.fixture
def log() -> HarnessLog:
    return HarnessLog(use_color=False)


@pytest.fixture
def guard() -> RecordingGuard:
    return RecordingGuard()


@pytest.fixture
def fuzzers() -> RecordingFuzzerFactory:
    return RecordingFuzzerFactory()


@pytest.fixture
def executor(log, guard, fuzzers) -> CaseExecutor:
    return CaseExecutor(log=log, guard=guard, asserts=AssertTracker(log), fuzzer_factory=fuzzers)


@pytest.fixture
def orchestrator(log, executor) -> RunOrchestrator:
    return RunOrchestrator(HarnessConfig(use_color=False), log=log, executor=executor)
