"""
Duplicates command - Build a container from pairs that repeat a key.
"""

from collections.abc import Sequence

from ..services.probe_service import MapSemanticsProbe, first_duplicate_key
from ..utilities.console import print_error_code, print_token
from ..utilities.constants import (
    DEFAULT_DUPLICATE_PAIRS,
    TOKEN_NO_DUPLICATE,
    DuplicateKeyAtConstruction,
    DuplicatePolicy,
)
from ..utilities.formatters import format_value
from .core import CommandResult


def duplicates_command(
    probe: MapSemanticsProbe,
    policy: DuplicatePolicy | None = None,
    pairs: Sequence[tuple[str, str]] | None = None,
) -> CommandResult:
    """Print the value the duplicated key resolves to under ``policy``"""
    pairs = list(pairs) if pairs else list(DEFAULT_DUPLICATE_PAIRS)

    try:
        container = probe.build_with_duplicates(pairs, policy)
    except DuplicateKeyAtConstruction as e:
        print_error_code(e.code)
        return CommandResult.failure(e)

    key = first_duplicate_key(pairs)
    if key is None:
        print_token(TOKEN_NO_DUPLICATE)
        return CommandResult.success(TOKEN_NO_DUPLICATE)

    token = format_value(container.lookup(key))
    print_token(token)
    return CommandResult.success(token)
