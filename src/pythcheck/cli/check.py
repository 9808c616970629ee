from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from pythcheck import __version__
from pythcheck.config import resolve_jobs
from pythcheck.core.check import check_path
from pythcheck.errors import ConfigError, DiscoveryError
from pythcheck.log import configure_logging
from pythcheck.models import Policy, RunReport

console = Console()
err_console = Console(stderr=True)


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def _emit(line: str) -> None:
    console.print(line, markup=False, highlight=False, soft_wrap=True)


def _render_text(report: RunReport) -> None:
    for file_report in report.files:
        if file_report.error is not None:
            position = file_report.error.position
            location = f"{file_report.path}:{position}" if position else str(file_report.path)
            _emit(f"{location}: error: {file_report.error.message}")
        for violation in file_report.violations:
            _emit(f"{violation.path}:{violation.position}: {violation.describe()}")

    colour = "green" if report.is_clean else "red"
    summary = (
        f"Checked {_plural(report.files_checked, 'file')}, {_plural(report.functions_checked, 'function')}: "
        f"{_plural(report.violation_count, 'violation')}, {_plural(report.error_count, 'error')}"
    )
    console.print(f"[{colour}]{escape(summary)}[/{colour}]", highlight=False, soft_wrap=True)


def _render_json(report: RunReport) -> None:
    console.out(report.model_dump_json(indent=2), highlight=False)


def _names(values: list[str] | None, default: tuple[str, ...]) -> tuple[str, ...]:
    """Use the defaults when the option is absent; an empty value disables the rule."""
    if not values:
        return default
    return tuple(value for value in values if value)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"pythcheck {__version__}", highlight=False)
        raise typer.Exit()


def check(
    path: Annotated[Path, typer.Argument(exists=True, help="File or directory to check, walked recursively.")],
    ignore_hidden: Annotated[
        bool, typer.Option("--ignore-hidden", help="Skip files and directories whose name starts with '.'.")
    ] = False,
    ignore_tests: Annotated[bool, typer.Option("--ignore-tests", help="Skip test directories and test files.")] = False,
    ignore_return: Annotated[bool, typer.Option("--ignore-return", help="Do not require return type hints.")] = False,
    test_dir: Annotated[
        list[str] | None,
        typer.Option("--test-dir", help="Directory name treated as a test directory (repeatable; '' disables)."),
    ] = None,
    test_pattern: Annotated[
        list[str] | None,
        typer.Option("--test-pattern", help="Filename glob treated as a test file (repeatable; '' disables)."),
    ] = None,
    jobs: Annotated[int | None, typer.Option("--jobs", "-j", help="Worker processes (default: CPU count).")] = None,
    output_format: Annotated[OutputFormat, typer.Option("--format", help="Output format.")] = OutputFormat.TEXT,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", "-V", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Check Python files for functions missing parameter or return type hints."""
    configure_logging(verbose)

    defaults = Policy()
    policy = Policy(
        ignore_return=ignore_return,
        ignore_hidden=ignore_hidden,
        ignore_tests=ignore_tests,
        test_dir_names=_names(test_dir, defaults.test_dir_names),
        test_file_patterns=_names(test_pattern, defaults.test_file_patterns),
    )

    try:
        workers = resolve_jobs(jobs)
        report = check_path(path, policy, workers)
    except (ConfigError, DiscoveryError) as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from None

    if output_format is OutputFormat.JSON:
        _render_json(report)
    else:
        _render_text(report)

    if not report.is_clean:
        raise typer.Exit(code=1)
