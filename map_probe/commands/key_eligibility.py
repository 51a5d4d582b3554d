"""
Key-eligibility command - Report whether a key kind may be used as a map key.
"""

from ..services.probe_service import MapSemanticsProbe
from ..utilities.console import print_error_code, print_token
from ..utilities.constants import InvalidKeyKind
from .core import CommandResult


def key_eligibility_command(probe: MapSemanticsProbe, kind: str) -> CommandResult:
    """Print ``accepted`` or ``rejected:<reason>`` for a key kind"""
    try:
        eligibility = probe.check_key_eligibility(kind)
    except InvalidKeyKind as e:
        print_error_code(e.code)
        return CommandResult.validation_error(e)

    token = str(eligibility)
    print_token(token)
    return CommandResult.success(token)
