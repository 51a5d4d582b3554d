"""
ProbeResult value object.

Records the outcome of one semantic check against a declared expectation.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from ..utilities.constants import ProbeCheck

UNSPECIFIED = "unspecified"


@dataclass(frozen=True)
class ProbeResult:
    """
    Outcome of a single probe check.

    ``expected`` of ``None`` means the modeled language makes no promise,
    so any observation passes.
    """

    check: ProbeCheck
    subject: str
    observed: str
    expected: str | None = None
    detail: str = ""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def passed(self) -> bool:
        """Whether the observation satisfies the expectation."""
        return self.expected is None or self.observed == self.expected

    @property
    def expectation(self) -> str:
        return UNSPECIFIED if self.expected is None else self.expected

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary representation."""
        return {
            "check": self.check.value,
            "subject": self.subject,
            "observed": self.observed,
            "expected": self.expectation,
            "passed": self.passed,
            "detail": self.detail,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        verdict = "PASS" if self.passed else "FAIL"
        return f"{verdict}: {self.check.value}[{self.subject}] {self.observed} (expected {self.expectation})"
