"""
Central probe service.

Provides the four semantic checks (key eligibility, missing-key lookup,
duplicate resolution, iteration stability) and a report that runs them
all against a language profile's declared expectations.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from ..config import LanguageProfile, ProbeSettings, get_environment_config
from ..domain.container import AssociativeContainer, ValueType
from ..domain.key_candidate import KeyCandidate, KeyEligibility, KeyKind
from ..domain.probe_result import ProbeResult
from ..utilities.constants import (
    DEFAULT_DUPLICATE_PAIRS,
    DEFAULT_MISSING_KEY,
    DEFAULT_ROSTER,
    DuplicateKeyAtConstruction,
    DuplicatePolicy,
    IterationOrder,
    MissPolicy,
    ProbeCheck,
)
from ..utilities.formatters import format_stability, format_value
from ..utilities.validators import validate_pass_count

logger = logging.getLogger(__name__)

# Declared verdicts the key-eligibility rules must reproduce
EXPECTED_KEY_VERDICTS: dict[KeyKind, str] = {
    KeyKind.INT: "accepted",
    KeyKind.FLOAT: "accepted",
    KeyKind.NAN: "rejected:structurally-invalid",
    KeyKind.STR: "accepted",
    KeyKind.BYTES: "accepted",
    KeyKind.BOOL: "accepted",
    KeyKind.TUPLE: "accepted",
    KeyKind.NESTED_TUPLE: "accepted",
    KeyKind.FROZENSET: "accepted",
    KeyKind.TUPLE_WITH_LIST: "rejected:unhashable",
    KeyKind.TUPLE_WITH_OBJECT: "rejected:structurally-invalid",
    KeyKind.LIST: "rejected:unhashable",
    KeyKind.BYTEARRAY: "rejected:unhashable",
    KeyKind.SET: "rejected:unhashable",
    KeyKind.DICT: "rejected:unhashable",
    KeyKind.OBJECT: "rejected:structurally-invalid",
    KeyKind.FUNCTION: "rejected:structurally-invalid",
}


def first_duplicate_key(pairs: Iterable[tuple[Any, Any]]) -> Any | None:
    """Return the first key that appears more than once, or None."""
    seen = set()
    for key, _ in pairs:
        if key in seen:
            return key
        seen.add(key)
    return None


def expected_duplicate_outcome(pairs: Sequence[tuple[Any, Any]], policy: DuplicatePolicy) -> str:
    """Declared outcome of building ``pairs`` under ``policy``."""
    if policy is DuplicatePolicy.REJECT:
        return DuplicateKeyAtConstruction.code
    key = first_duplicate_key(pairs)
    values = [value for k, value in pairs if k == key]
    chosen = values[0] if policy is DuplicatePolicy.FIRST_WINS else values[-1]
    return format_value(chosen)


class MapSemanticsProbe:
    """
    Runs semantic checks against configurable associative containers.

    Policies not passed explicitly fall back to the active profile.
    """

    def __init__(self, settings: ProbeSettings):
        """
        Initialize the probe.

        Args:
            settings: Resolved runtime settings, including the active profile
        """
        self.settings = settings
        logger.debug(f"Probe initialized with profile {settings.profile.name}")

    @property
    def profile(self) -> LanguageProfile:
        return self.settings.profile

    def new_container(
        self,
        miss_policy: MissPolicy | None = None,
        value_type: ValueType = ValueType.STR,
        iteration_order: IterationOrder | None = None,
    ) -> AssociativeContainer:
        """Create an empty container using profile defaults for unset policies."""
        return AssociativeContainer(
            miss_policy=miss_policy or self.profile.miss_policy,
            value_type=value_type,
            iteration_order=iteration_order or self.profile.iteration_order,
            seed=self.settings.seed,
        )

    def check_key_eligibility(self, kind: KeyKind | str) -> KeyEligibility:
        """
        Probe whether a key kind may be used as a map key.

        Raises:
            InvalidKeyKind: If the kind is not catalogued
        """
        candidate = KeyCandidate.sample(kind)
        eligibility = candidate.assess()
        logger.info(f"Key kind {candidate}: {eligibility}")
        return eligibility

    def query_missing_key(self, container: AssociativeContainer, key: Any) -> Any:
        """
        Look up a key expected to be absent.

        Returns the container's zero value or ``NOT_FOUND`` depending on
        its miss policy. A key that turns out to be present returns its
        stored value.
        """
        if key in container:
            logger.warning(f"Key {key!r} is present; returning stored value")
        result = container.lookup(key)
        logger.info(f"Lookup of {key!r} under {container.miss_policy} returned {result!r}")
        return result

    def build_with_duplicates(
        self,
        pairs: Sequence[tuple[Any, Any]],
        policy: DuplicatePolicy | None = None,
        **container_options: Any,
    ) -> AssociativeContainer:
        """
        Build a container from pairs that may repeat keys.

        Raises:
            DuplicateKeyAtConstruction: Under the reject policy
        """
        policy = policy or self.profile.duplicate_policy
        container_options.setdefault("miss_policy", self.profile.miss_policy)
        container_options.setdefault("iteration_order", self.profile.iteration_order)
        container_options.setdefault("seed", self.settings.seed)

        logger.info(f"Building container from {len(pairs)} pairs under {policy}")
        try:
            return AssociativeContainer.from_pairs(pairs, policy, **container_options)
        except DuplicateKeyAtConstruction as e:
            logger.info(f"Construction rejected: {e}")
            raise

    def iteration_stability(self, container: AssociativeContainer, passes: int) -> bool:
        """
        Traverse ``container`` ``passes`` times and compare the key sequences.

        Raises:
            InvalidPassCount: If fewer than two passes are requested
        """
        validate_pass_count(passes)
        traversals = [container.traverse() for _ in range(passes)]
        stable = all(traversal == traversals[0] for traversal in traversals[1:])
        logger.info(f"{passes} traversals of {len(container)} keys: {format_stability(stable)}")
        return stable

    def run_report(self, passes: int | None = None) -> list[ProbeResult]:
        """
        Run every check against the active profile's expectations.

        Raises:
            InvalidPassCount: If fewer than two passes are requested
        """
        passes = self.settings.passes if passes is None else passes
        validate_pass_count(passes)
        logger.info(f"Running report for profile {self.profile.name}")

        results = [self._eligibility_result(kind) for kind in KeyKind]
        results.append(self._missing_key_result())
        results.append(self._duplicates_result())
        results.append(self._iteration_result(passes))

        failures = [result for result in results if not result.passed]
        if failures:
            logger.warning(f"{len(failures)} of {len(results)} checks failed")
        return results

    def _eligibility_result(self, kind: KeyKind) -> ProbeResult:
        candidate = KeyCandidate.sample(kind)
        return ProbeResult(
            check=ProbeCheck.KEY_ELIGIBILITY,
            subject=kind.value,
            observed=str(candidate.assess()),
            expected=EXPECTED_KEY_VERDICTS[kind],
            detail=candidate.category.value,
        )

    def _missing_key_result(self) -> ProbeResult:
        container = self.build_with_duplicates(DEFAULT_ROSTER, DuplicatePolicy.LAST_WINS)
        observed = self.query_missing_key(container, DEFAULT_MISSING_KEY)
        if self.profile.miss_policy is MissPolicy.DEFAULT_ON_MISS:
            expected = format_value(container.value_type.zero())
        else:
            expected = "not-found"
        return ProbeResult(
            check=ProbeCheck.MISSING_KEY,
            subject=DEFAULT_MISSING_KEY,
            observed=format_value(observed),
            expected=expected,
            detail=self.profile.miss_policy.value,
        )

    def _duplicates_result(self) -> ProbeResult:
        policy = self.profile.duplicate_policy
        key = first_duplicate_key(DEFAULT_DUPLICATE_PAIRS)
        try:
            container = self.build_with_duplicates(DEFAULT_DUPLICATE_PAIRS, policy)
            observed = format_value(container.lookup(key))
        except DuplicateKeyAtConstruction as e:
            observed = e.code
        return ProbeResult(
            check=ProbeCheck.DUPLICATES,
            subject=key,
            observed=observed,
            expected=expected_duplicate_outcome(DEFAULT_DUPLICATE_PAIRS, policy),
            detail=policy.value,
        )

    def _iteration_result(self, passes: int) -> ProbeResult:
        container = self.build_with_duplicates(DEFAULT_ROSTER, DuplicatePolicy.LAST_WINS)
        stable = self.iteration_stability(container, passes)
        expected = format_stability(True) if self.profile.iteration_guaranteed else None
        return ProbeResult(
            check=ProbeCheck.ITERATION_STABILITY,
            subject=f"{passes} passes",
            observed=format_stability(stable),
            expected=expected,
            detail=container.iteration_order.value,
        )


def create_probe(settings: ProbeSettings | None = None) -> MapSemanticsProbe:
    """
    Factory function to create a probe.

    Args:
        settings: Runtime settings; loaded from the environment when omitted

    Returns:
        Configured MapSemanticsProbe instance
    """
    return MapSemanticsProbe(settings or get_environment_config())
