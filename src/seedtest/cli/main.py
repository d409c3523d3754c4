"""CLI entry point for seedtest."""
from __future__ import annotations

import sys
from typing import Optional, Sequence, Tuple

import click

from seedtest import __version__
from seedtest.config import HarnessConfig, load_config
from seedtest.core import MAX_EXEC_KEY, RunOrchestrator, TestSuite, generate_run_seed, list_suites
from seedtest.reporting import HarnessLog
from seedtest.utils import resolve_suites


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"seedtest {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the seedtest version and exit.",
)
def cli() -> None:
    """Top level CLI group for seedtest."""


@cli.command()
@click.option("--suites", "suite_paths", multiple=True, help="Suites to load as module:attr (repeatable).")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML config file; command line options take precedence.",
)
@click.option("--seed", type=str, help="Run seed to reuse instead of generating one.")
@click.option("--exec-key", type=click.IntRange(min=0, max=MAX_EXEC_KEY), help="Fixed execution key for every case.")
@click.option("--filter", "name_filter", type=str, help="Run only the suite or case with this name.")
@click.option("--iterations", type=click.IntRange(min=1), help="Iterations per case.")
@click.option("--timeout", "timeout_s", type=click.FloatRange(min=0), help="Per-case timeout in seconds.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
def run(
    suite_paths: Tuple[str, ...],
    config_path: Optional[str],
    seed: Optional[str],
    exec_key: Optional[int],
    name_filter: Optional[str],
    iterations: Optional[int],
    timeout_s: Optional[float],
    no_color: bool,
) -> None:
    """Execute test suites and exit with the run status."""

    config = _build_config(
        config_path,
        suites=suite_paths or None,
        seed=seed,
        exec_key=exec_key,
        filter=name_filter,
        iterations=iterations,
        timeout_s=timeout_s,
        use_color=False if no_color else None,
    )
    suites = _load_suites(config.suites)
    orchestrator = RunOrchestrator(config)
    result = orchestrator.run(
        suites,
        run_seed=config.seed,
        exec_key=config.exec_key,
        filter=config.filter,
        iterations=config.iterations,
    )
    raise click.exceptions.Exit(result.exit_code)


@cli.command(name="list")
@click.option("--suites", "suite_paths", multiple=True, help="Suites to load as module:attr (repeatable).")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="YAML config file.")
def list_command(suite_paths: Tuple[str, ...], config_path: Optional[str]) -> None:
    """List suites and cases without running them."""

    config = _build_config(config_path, suites=suite_paths or None)
    list_suites(_load_suites(config.suites), HarnessLog(use_color=config.use_color))


@cli.command()
@click.option("--length", type=int, default=16, show_default=True, help="Number of characters.")
def seed(length: int) -> None:
    """Print a freshly generated run seed."""

    try:
        click.echo(generate_run_seed(length))
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--length") from exc


def _build_config(config_path: Optional[str], **overrides: object) -> HarnessConfig:
    try:
        base = load_config(config_path) if config_path else HarnessConfig()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    return base.merged(**overrides)


def _load_suites(paths: Sequence[str]) -> list[TestSuite]:
    if not paths:
        raise click.UsageError("No suites given; pass --suites or set 'suites' in the config file.")
    try:
        return resolve_suites(paths)
    except (ImportError, AttributeError, TypeError, ValueError) as exc:
        raise click.ClickException(f"Unable to load suites: {exc}") from exc


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="seedtest", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
