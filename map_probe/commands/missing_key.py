"""
Missing-key command - Show what a lookup of an absent key returns.
"""

from ..domain.container import ValueType
from ..services.probe_service import MapSemanticsProbe
from ..utilities.console import print_token
from ..utilities.constants import DEFAULT_MISSING_KEY, DEFAULT_ROSTER, MissPolicy
from ..utilities.formatters import format_value
from .core import CommandResult


def missing_key_command(
    probe: MapSemanticsProbe,
    policy: MissPolicy | None = None,
    key: str = DEFAULT_MISSING_KEY,
    value_type: ValueType = ValueType.STR,
) -> CommandResult:
    """Query ``key`` on a container and print the value or ``not-found``"""
    container = probe.new_container(miss_policy=policy, value_type=value_type)

    # The sample roster only fits a str-valued container
    if value_type is ValueType.STR:
        for name, hero in DEFAULT_ROSTER:
            container.put(name, hero)

    token = format_value(probe.query_missing_key(container, key))
    print_token(token)

    result = CommandResult.success(token)
    result.add_metadata("policy", container.miss_policy.value)
    return result
