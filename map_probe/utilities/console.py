"""
Console output utilities.

This module provides functions for the plain token output of single-check
commands and the rich table rendering used by the report command.
"""

import json
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from ..domain.probe_result import ProbeResult
from .formatters import format_verdict


def print_token(token: str) -> None:
    """Print a machine-stable result token."""
    print(token)


def print_error_code(code: str) -> None:
    """Print a stable error code."""
    print(code)


def build_report_table(results: Sequence[ProbeResult], title: str) -> Table:
    """Build a rich table of probe results."""
    table = Table(title=title, show_lines=False)
    table.add_column("Check", style="cyan", no_wrap=True)
    table.add_column("Subject")
    table.add_column("Observed")
    table.add_column("Expected", style="dim")
    table.add_column("Detail", style="dim")
    table.add_column("Verdict", no_wrap=True)

    for result in results:
        table.add_row(
            result.check.value,
            result.subject,
            result.observed,
            result.expectation,
            result.detail,
            format_verdict(result.passed),
        )
    return table


def print_report_table(
    results: Sequence[ProbeResult], title: str, console: Console | None = None
) -> None:
    """Render probe results as a table."""
    console = console or Console()
    console.print(build_report_table(results, title))
    passed = sum(1 for result in results if result.passed)
    console.print(f"{passed}/{len(results)} checks passed")


def print_report_json(results: Sequence[ProbeResult]) -> None:
    """Print probe results as a JSON list."""
    print(json.dumps([result.to_dict() for result in results], indent=2))
