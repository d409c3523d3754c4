"""Terminal log lines emitted while a run progresses."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import click
from colorama import Fore, Style

if TYPE_CHECKING:
    from seedtest.core.models import Counters, FailureRecord

COLOR_RED = Fore.RED
COLOR_GREEN = Fore.GREEN
COLOR_YELLOW = Fore.LIGHTYELLOW_EX
COLOR_BLUE = Fore.LIGHTBLUE_EX

RESULT_LABELS = {
    "passed": ("Passed", COLOR_GREEN),
    "failed": ("Failed", COLOR_RED),
    "no_asserts": ("No Asserts", COLOR_BLUE),
    "setup_failure": ("Failed (Setup)", COLOR_RED),
    "skipped": ("Skipped", COLOR_BLUE),
}


class HarnessLog:
    """Writes harness progress to stdout.

    The ``Summary``, ``>>> Kind 'name': Result`` and ``--seed``/``--filter``
    line shapes are scraped by downstream tooling and must stay stable.
    """

    def __init__(self, *, use_color: bool = True) -> None:
        self._use_color = use_color

    def info(self, message: str) -> None:
        click.echo(message)

    def error(self, message: str) -> None:
        click.echo(message)

    def colored(self, text: str, color: Optional[str]) -> str:
        if not self._use_color or not color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"

    def final_result(self, kind: str, name: str, label: str, color: Optional[str] = None) -> None:
        prefix = self.colored(f">>> {kind} '{name}':", COLOR_YELLOW)
        self.info(f"{prefix} {self.colored(label, color)}")

    def result(self, kind: str, name: str, result: str) -> None:
        label, color = RESULT_LABELS.get(result, (result, None))
        self.final_result(kind, name, label, color)

    def summary(self, kind: str, counters: "Counters") -> None:
        failed_color = COLOR_GREEN if counters.failed == 0 else COLOR_RED
        self.info(
            f"{kind} Summary: Total={counters.total} "
            + self.colored(f"Passed={counters.passed}", COLOR_GREEN)
            + " "
            + self.colored(f"Failed={counters.failed}", failed_color)
            + " "
            + self.colored(f"Skipped={counters.skipped}", COLOR_BLUE)
        )

    def repro(self, record: "FailureRecord") -> None:
        self.info(self.colored(f" {record.repro_args()}", COLOR_RED))
