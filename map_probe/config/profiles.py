"""
Language profiles.

A profile bundles the map policies of one reference language so the
probe can emulate it and declare what each check is expected to observe.
"""

from dataclasses import dataclass

from ..utilities.constants import (
    DuplicatePolicy,
    IterationOrder,
    MissPolicy,
    ProbeConfigError,
)


@dataclass(frozen=True)
class LanguageProfile:
    """Map semantics of one reference language."""

    name: str
    description: str
    miss_policy: MissPolicy
    duplicate_policy: DuplicatePolicy
    iteration_order: IterationOrder
    iteration_guaranteed: bool


PYTHON_PROFILE = LanguageProfile(
    name="python",
    description="dict: KeyError on miss, last literal key wins, insertion-ordered",
    miss_policy=MissPolicy.EXPLICIT_SIGNAL,
    duplicate_policy=DuplicatePolicy.LAST_WINS,
    iteration_order=IterationOrder.INSERTION,
    iteration_guaranteed=True,
)

GO_PROFILE = LanguageProfile(
    name="go",
    description="map: zero value on miss, duplicate literal keys rejected, unordered",
    miss_policy=MissPolicy.DEFAULT_ON_MISS,
    duplicate_policy=DuplicatePolicy.REJECT,
    iteration_order=IterationOrder.RANDOMIZED,
    iteration_guaranteed=False,
)

PROFILES: dict[str, LanguageProfile] = {
    PYTHON_PROFILE.name: PYTHON_PROFILE,
    GO_PROFILE.name: GO_PROFILE,
}


def get_profile(name: str) -> LanguageProfile:
    """
    Look up a profile by name.

    Raises:
        ProbeConfigError: If no profile has that name
    """
    try:
        return PROFILES[name.strip().lower()]
    except (KeyError, AttributeError):
        known = ", ".join(sorted(PROFILES))
        raise ProbeConfigError(f"Unknown profile {name!r}; expected one of: {known}") from None
