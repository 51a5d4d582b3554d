"""
Iteration-stability command - Traverse an unmutated container repeatedly.
"""

from ..services.probe_service import MapSemanticsProbe
from ..utilities.console import print_error_code, print_token
from ..utilities.constants import DEFAULT_ROSTER, DuplicatePolicy, InvalidPassCount, IterationOrder
from ..utilities.formatters import format_stability
from .core import CommandResult


def iteration_stability_command(
    probe: MapSemanticsProbe,
    passes: int | None = None,
    order: IterationOrder | None = None,
) -> CommandResult:
    """Print ``stable`` or ``unstable`` for the sample roster"""
    passes = probe.settings.passes if passes is None else passes
    container = probe.build_with_duplicates(
        DEFAULT_ROSTER,
        DuplicatePolicy.LAST_WINS,
        iteration_order=order or probe.profile.iteration_order,
    )

    try:
        stable = probe.iteration_stability(container, passes)
    except InvalidPassCount as e:
        print_error_code(e.code)
        return CommandResult.validation_error(e)

    token = format_stability(stable)
    print_token(token)
    return CommandResult.success(token)
