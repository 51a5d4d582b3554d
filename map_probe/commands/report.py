"""
Report command - Run every check against the active profile.
"""

from ..services.probe_service import MapSemanticsProbe
from ..utilities.console import print_error_code, print_report_json, print_report_table
from ..utilities.constants import InvalidPassCount, ReportFailed
from .core import CommandResult


def report_command(
    probe: MapSemanticsProbe, output_format: str = "table", passes: int | None = None
) -> CommandResult:
    """Render all probe results; fails when any check does not pass"""
    try:
        results = probe.run_report(passes)
    except InvalidPassCount as e:
        print_error_code(e.code)
        return CommandResult.validation_error(e)

    if output_format == "json":
        print_report_json(results)
    else:
        profile = probe.profile
        print_report_table(results, title=f"Map semantics: {profile.name} ({profile.description})")

    failed = [result for result in results if not result.passed]
    if failed:
        error = ReportFailed(f"{len(failed)} checks did not match the {probe.profile.name} profile")
        return CommandResult.failure(error, data=results)
    return CommandResult.success(results)
