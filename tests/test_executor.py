from __future__ import annotations

from conftest import RecordingGuard, failing_body, passing_body

from seedtest.core import (
    FAILED,
    NO_ASSERTS,
    PASSED,
    SETUP_FAILURE,
    SKIPPED,
    TEST_ABORTED,
    TEST_COMPLETED,
    TEST_SKIPPED,
    TEST_STARTED,
    AssertTracker,
    CaseExecutor,
    TestCase,
    TestSuite,
)


def _suite(*cases: TestCase, **hooks) -> TestSuite:
    return TestSuite(name="Suite", cases=list(cases), **hooks)


def test_passing_case_arms_and_disarms_timer(executor, guard, fuzzers) -> None:
    case = TestCase("ok", passing_body)
    assert executor.execute(_suite(case), case, 42) == PASSED
    assert guard.armed == [3600]
    assert len(guard.disarmed) == 1
    assert fuzzers.keys == [42]


def test_failing_assertion_classifies_failed(executor) -> None:
    case = TestCase("bad", failing_body)
    assert executor.execute(_suite(case), case, 1) == FAILED


def test_completed_without_asserts_is_no_asserts(executor) -> None:
    case = TestCase("empty", lambda ctx: TEST_COMPLETED)
    assert executor.execute(_suite(case), case, 1) == NO_ASSERTS


def test_disabled_case_has_no_side_effects(executor, guard, fuzzers, capsys) -> None:
    tracker = executor.asserts
    tracker.check(False, "left over from a previous case")
    case = TestCase("off", passing_body, enabled=False)
    assert executor.execute(_suite(case), case, 7) == SKIPPED
    assert fuzzers.keys == []
    assert guard.armed == [] and guard.disarmed == []
    assert tracker.failed_count == 1
    assert ">>> Test 'off': Skipped (Disabled)" in capsys.readouterr().out


def test_forced_disabled_case_executes(executor, guard) -> None:
    case = TestCase("off", passing_body, enabled=False)
    assert executor.execute(_suite(case), case, 7, force_run=True) == PASSED
    assert len(guard.armed) == 1


def test_skipped_outcome_wins_over_failed_asserts(executor, capsys) -> None:
    def body(ctx):
        ctx.asserts.check(False, "ignored")
        return TEST_SKIPPED

    case = TestCase("skipper", body)
    assert executor.execute(_suite(case), case, 1) == SKIPPED
    assert "Skipped (Programmatically)" in capsys.readouterr().out


def test_started_and_aborted_outcomes_fail_despite_passing_asserts(executor, capsys) -> None:
    def started(ctx):
        ctx.asserts.check(True, "fine")
        return TEST_STARTED

    def aborted(ctx):
        ctx.asserts.check(True, "fine")
        return TEST_ABORTED

    for name, body in (("started", started), ("aborted", aborted)):
        case = TestCase(name, body)
        assert executor.execute(_suite(case), case, 1) == FAILED
    output = capsys.readouterr().out
    assert "Failed (test started, but did not return TEST_COMPLETED)" in output
    assert "Failed (Aborted)" in output


def test_body_returning_none_counts_as_started(executor) -> None:
    def body(ctx):
        ctx.asserts.check(True, "fine")

    case = TestCase("implicit", body)
    assert executor.execute(_suite(case), case, 1) == FAILED


def test_body_exception_is_contained_and_teardown_runs(executor, guard, capsys) -> None:
    calls = []

    def body(ctx):
        raise RuntimeError("boom")

    case = TestCase("crash", body)
    suite = _suite(case, teardown=lambda ctx: calls.append("teardown"))
    assert executor.execute(suite, case, 1) == FAILED
    assert calls == ["teardown"]
    assert len(guard.disarmed) == 1
    output = capsys.readouterr().out
    assert "RuntimeError: boom" in output
    assert "Failed (Aborted)" in output


def test_setup_failure_skips_body_and_teardown_but_disarms(executor, guard, capsys) -> None:
    calls = []

    def setup(ctx):
        ctx.asserts.check(False, "resource available")

    def body(ctx):
        calls.append("body")
        return TEST_COMPLETED

    case = TestCase("needs_resource", body)
    suite = _suite(case, setup=setup, teardown=lambda ctx: calls.append("teardown"))
    assert executor.execute(suite, case, 1) == SETUP_FAILURE
    assert calls == []
    assert len(guard.armed) == 1
    assert len(guard.disarmed) == 1
    assert ">>> Suite Setup 'Suite': Failed" in capsys.readouterr().out


def test_setup_exception_is_setup_failure(executor) -> None:
    def setup(ctx):
        raise OSError("no device")

    case = TestCase("ok", passing_body)
    assert executor.execute(_suite(case, setup=setup), case, 1) == SETUP_FAILURE


def test_teardown_failures_never_change_result(executor) -> None:
    def teardown(ctx):
        ctx.asserts.check(False, "cleanup")
        raise ValueError("cleanup exploded")

    def body(ctx):
        ctx.asserts.check(True, "fine")
        return TEST_COMPLETED

    case = TestCase("ok", body)
    order = []
    suite = _suite(case, setup=lambda ctx: order.append("setup"), teardown=teardown)
    assert executor.execute(suite, case, 1) == PASSED
    assert order == ["setup"]


def test_arming_failure_is_not_fatal(log, fuzzers, capsys) -> None:
    guard = RecordingGuard(fail=True)
    executor = CaseExecutor(log=log, guard=guard, asserts=AssertTracker(log), fuzzer_factory=fuzzers)
    case = TestCase("ok", passing_body)
    assert executor.execute(_suite(case), case, 1) == PASSED
    assert guard.disarmed == [None]
    assert "running without watchdog" in capsys.readouterr().out


def test_fuzzer_is_seeded_with_exec_key_and_reported(executor, capsys) -> None:
    seen = []

    def body(ctx):
        seen.append(ctx.exec_key)
        ctx.fuzzer.random_uint8()
        ctx.fuzzer.random_uint8()
        ctx.asserts.passed("drew values")
        return TEST_COMPLETED

    case = TestCase("fuzzy", body)
    executor.execute(_suite(case), case, 555)
    assert seen == [555]
    assert "Fuzzer invocations: 2" in capsys.readouterr().out


def test_custom_timeout_is_used(log, guard, fuzzers) -> None:
    executor = CaseExecutor(log=log, guard=guard, timeout_s=5, fuzzer_factory=fuzzers)
    case = TestCase("ok", passing_body)
    executor.execute(_suite(case), case, 1)
    assert guard.armed == [5]
