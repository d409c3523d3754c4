"""Run orchestration: seed resolution, filtering, iteration and summaries."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from seedtest.config.models import HarnessConfig
from seedtest.reporting.terminal import COLOR_BLUE, COLOR_GREEN, COLOR_RED, COLOR_YELLOW, HarnessLog

from .errors import HarnessError, InvalidArgumentError
from .executor import CaseExecutor
from .keys import INVALID_EXEC_KEY, check_exec_key, derive_exec_key, generate_run_seed
from .models import (
    FAILED,
    FAILING_RESULTS,
    NO_ASSERTS,
    PASSED,
    RUN_SEED_LENGTH,
    SETUP_FAILURE,
    SKIPPED,
    Counters,
    FailureRecord,
    RunResult,
    SuiteReport,
    TestCase,
    TestSuite,
)

EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_SETUP_FAILURE = 2
EXIT_NO_TESTS = -1

# Most severe first; used to summarise a case over its iterations.
_RESULT_SEVERITY = (FAILED, SETUP_FAILURE, NO_ASSERTS, PASSED, SKIPPED)


@dataclass(frozen=True)
class Selection:
    """Suite/case picked by a name filter; ``None`` fields select everything."""

    suite: Optional[TestSuite] = None
    case: Optional[TestCase] = None

    @property
    def force_run(self) -> bool:
        return self.case is not None

    def includes_suite(self, suite: TestSuite) -> bool:
        return self.suite is None or self.suite is suite

    def includes_case(self, case: TestCase) -> bool:
        return self.case is None or self.case is case


def resolve_filter(suites: Sequence[TestSuite], name: str) -> Optional[Selection]:
    """Match ``name`` against suite names, then case names (case-insensitive).

    Returns ``None`` when nothing matches.
    """

    wanted = name.casefold()
    for suite in suites:
        if suite.name.casefold() == wanted:
            return Selection(suite=suite)
    for suite in suites:
        for case in suite.cases:
            if case.name.casefold() == wanted:
                return Selection(suite=suite, case=case)
    return None


def list_suites(suites: Sequence[TestSuite], log: HarnessLog) -> None:
    for suite in suites:
        log.info(f"Test suite: {suite.name}")
        for case in suite.cases:
            log.info(f"      test: {case.name}{'' if case.enabled else ' (disabled)'}")


class RunOrchestrator:
    """Drives suites -> cases -> iterations and aggregates the counters."""

    def __init__(
        self,
        config: Optional[HarnessConfig] = None,
        *,
        log: Optional[HarnessLog] = None,
        executor: Optional[CaseExecutor] = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._config = config or HarnessConfig()
        self._log = log or HarnessLog(use_color=self._config.use_color)
        self._executor = executor or CaseExecutor(log=self._log, timeout_s=self._config.timeout_s)
        self._clock = clock

    def run(
        self,
        suites: Sequence[TestSuite],
        *,
        run_seed: Optional[str] = None,
        exec_key: int = INVALID_EXEC_KEY,
        filter: Optional[str] = None,
        iterations: int = 1,
    ) -> RunResult:
        log = self._log
        iterations = max(iterations, 1)

        try:
            check_exec_key(exec_key)
        except InvalidArgumentError as exc:
            log.error(str(exc))
            return RunResult(exit_code=EXIT_SETUP_FAILURE)

        try:
            seed = run_seed if run_seed else generate_run_seed(RUN_SEED_LENGTH)
        except (HarnessError, MemoryError) as exc:
            log.error(f"Generating a random seed failed: {exc}")
            return RunResult(exit_code=EXIT_SETUP_FAILURE)

        result = RunResult(exit_code=EXIT_OK, seed=seed)
        run_start = self._clock()
        log.info(f"::::: Test Run /w seed '{seed}' started\n")

        result.total_cases = sum(len(suite.cases) for suite in suites)
        if result.total_cases == 0:
            log.error("No tests to run?")
            result.exit_code = EXIT_NO_TESTS
            return result

        selection = Selection()
        if filter:
            matched = resolve_filter(suites, filter)
            if matched is None:
                log.error(f"Filter '{filter}' did not match any test suite/case.")
                list_suites(suites, log)
                log.info(f"Exit code: {EXIT_SETUP_FAILURE}")
                result.exit_code = EXIT_SETUP_FAILURE
                return result
            selection = matched
            if selection.case is not None:
                log.info(f"Filtering: running only test '{selection.case.name}' in suite '{selection.suite.name}'")
            else:
                log.info(f"Filtering: running only suite '{selection.suite.name}'")

        for suite_index, suite in enumerate(suites, start=1):
            if not selection.includes_suite(suite):
                log.info(f"===== Test Suite {suite_index}: '{suite.name}' {log.colored('skipped', COLOR_BLUE)}\n")
                continue
            report = self._run_suite(suite_index, suite, seed, selection, exec_key, iterations, result)
            result.suites.append(report)

        result.runtime_s = self._elapsed(run_start)
        log.info(f"Total Run runtime: {result.runtime_s:.1f} sec")
        log.summary("Run", result.totals)
        if result.totals.failed == 0:
            result.exit_code = EXIT_OK
            log.final_result("Run /w seed", seed, "Passed", COLOR_GREEN)
        else:
            result.exit_code = EXIT_FAILURES
            log.final_result("Run /w seed", seed, "Failed", COLOR_RED)

        if result.failures:
            log.info("Harness input to repro failures:")
            for record in result.failures:
                log.repro(record)
        log.info(f"Exit code: {result.exit_code}")
        return result

    def _run_suite(
        self,
        suite_index: int,
        suite: TestSuite,
        seed: str,
        selection: Selection,
        exec_key: int,
        iterations: int,
        result: RunResult,
    ) -> SuiteReport:
        log = self._log
        report = SuiteReport(index=suite_index, name=suite.name, counters=Counters())
        suite_start = self._clock()
        log.info(f"===== Test Suite {suite_index}: '{suite.name}' started\n")

        for case_index, case in enumerate(suite.cases, start=1):
            label = f"{suite_index}.{case_index}"
            if not selection.includes_case(case):
                log.info(f"===== Test Case {label}: '{case.name}' {log.colored('skipped', COLOR_BLUE)}\n")
                continue
            force_run = selection.force_run
            if force_run and not case.enabled:
                log.info("Force run of disabled test since test filter was set")

            case_start = self._clock()
            log.info(log.colored(f"----- Test Case {label}: '{case.name}' started", COLOR_YELLOW))
            if case.description:
                log.info(f"Test Description: '{case.description}'")

            outcomes: List[str] = []
            for iteration in range(1, iterations + 1):
                if exec_key != INVALID_EXEC_KEY:
                    key = exec_key
                else:
                    key = derive_exec_key(seed, suite.name, case.name, iteration)
                log.info(f"Test Iteration {iteration}: execKey {key}")
                outcome = self._executor.execute(suite, case, key, force_run=force_run)
                outcomes.append(outcome)
                report.counters.record(outcome)
                result.totals.record(outcome)
                if outcome in FAILING_RESULTS:
                    result.failures.append(
                        FailureRecord(
                            suite_name=suite.name, case=case, seed=seed, iteration=iteration, exec_key=key
                        )
                    )

            runtime = self._elapsed(case_start)
            if iterations > 1:
                log.info(f"Runtime of {iterations} iterations: {runtime:.1f} sec")
                log.info(f"Average Test runtime: {runtime / iterations:.5f} sec")
            else:
                log.info(f"Total Test runtime: {runtime:.1f} sec")
            worst = _worst(outcomes)
            if worst != SKIPPED:
                log.result("Test", case.name, worst)

        report.runtime_s = self._elapsed(suite_start)
        log.info(f"Total Suite runtime: {report.runtime_s:.1f} sec")
        log.summary("Suite", report.counters)
        log.final_result(
            "Suite",
            suite.name,
            "Passed" if report.passed else "Failed",
            COLOR_GREEN if report.passed else COLOR_RED,
        )
        return report

    def _elapsed(self, start: float) -> float:
        return max(self._clock() - start, 0.0)


def _worst(outcomes: Sequence[str]) -> str:
    for candidate in _RESULT_SEVERITY:
        if candidate in outcomes:
            return candidate
    return SKIPPED


def run_suites(
    suites: Sequence[TestSuite],
    run_seed: Optional[str] = None,
    exec_key: int = INVALID_EXEC_KEY,
    filter: Optional[str] = None,
    iterations: int = 1,
    *,
    config: Optional[HarnessConfig] = None,
    log: Optional[HarnessLog] = None,
) -> int:
    """Run ``suites`` and return the process exit status.

    0 when every executed case passed, 1 on any failure, 2 when the seed could
    not be generated or the filter matched nothing, -1 when there are no tests.
    """

    orchestrator = RunOrchestrator(config, log=log)
    return orchestrator.run(
        suites,
        run_seed=run_seed,
        exec_key=exec_key,
        filter=filter,
        iterations=iterations,
    ).exit_code
