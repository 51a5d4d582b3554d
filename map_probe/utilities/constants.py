"""
Constants, enums and the error taxonomy shared across the probe.

Centralizes policy names, defaults and the exceptions raised by the
domain and service layers so every module reports the same stable codes.
"""

from enum import Enum

# Default settings
DEFAULT_PROFILE = "python"
DEFAULT_PASSES = 5
DEFAULT_MISSING_KEY = "Batman"
DEFAULT_LOG_LEVEL = "WARNING"
MIN_PASSES = 2

# Sample data
DEFAULT_ROSTER = [
    ("Green Lantern", "Hal Jordan"),
    ("Flash", "Barry Allen"),
    ("Wonder Woman", "Diana Prince"),
    ("Aquaman", "Arthur Curry"),
    ("Martian Manhunter", "J'onn J'onzz"),
]

DEFAULT_DUPLICATE_PAIRS = [
    ("Green Lantern", "John Stewart"),
    ("Green Lantern", "Hal Jordan"),
]

# Output tokens
TOKEN_ACCEPTED = "accepted"
TOKEN_REJECTED = "rejected"
TOKEN_STABLE = "stable"
TOKEN_UNSTABLE = "unstable"
TOKEN_NO_DUPLICATE = "no-duplicate-key"

# Report output formats
REPORT_FORMATS = ("table", "json")

# Emoji constants for report output
EMOJI_SUCCESS = "✅"
EMOJI_ERROR = "❌"


class MissPolicy(Enum):
    """What a container returns when a missing key is queried."""

    DEFAULT_ON_MISS = "default-on-miss"
    EXPLICIT_SIGNAL = "explicit-signal"

    def __str__(self) -> str:
        return self.value


class DuplicatePolicy(Enum):
    """How duplicate keys are resolved during bulk construction."""

    FIRST_WINS = "first-wins"
    LAST_WINS = "last-wins"
    REJECT = "reject"

    def __str__(self) -> str:
        return self.value


class IterationOrder(Enum):
    """Traversal order a container exposes."""

    INSERTION = "insertion"
    RANDOMIZED = "randomized"

    def __str__(self) -> str:
        return self.value


class RejectionReason(Enum):
    """Why a key candidate was refused."""

    UNHASHABLE = "unhashable"
    STRUCTURALLY_INVALID = "structurally-invalid"

    def __str__(self) -> str:
        return self.value


class ProbeCheck(Enum):
    """The semantic checks a probe can run."""

    KEY_ELIGIBILITY = "key-eligibility"
    MISSING_KEY = "missing-key"
    DUPLICATES = "duplicates"
    ITERATION_STABILITY = "iteration-stability"

    def __str__(self) -> str:
        return self.value


class ProbeError(Exception):
    """Base class for probe errors carrying a stable error code."""

    code = "probe-error"


class InvalidKeyKind(ProbeError):
    """Raised when a key kind name is not in the catalogue."""

    code = "invalid-key-kind"


class DuplicateKeyAtConstruction(ProbeError):
    """Raised when the reject policy meets a repeated key."""

    code = "duplicate-key-at-construction"

    def __init__(self, key):
        super().__init__(f"Duplicate key at construction: {key!r}")
        self.key = key


class InvalidPassCount(ProbeError):
    """Raised when fewer than two traversals are requested."""

    code = "invalid-pass-count"


class IneligibleKey(ProbeError):
    """Raised when a container is asked to store an ineligible key."""

    code = "ineligible-key"

    def __init__(self, key, reason: RejectionReason):
        super().__init__(f"Key {key!r} is not eligible: {reason.value}")
        self.key = key
        self.reason = reason


class IneligibleValue(ProbeError):
    """Raised when a container is asked to store its own absence signal."""

    code = "ineligible-value"


class ReportFailed(ProbeError):
    """Raised when a report observes behavior its profile does not declare."""

    code = "report-failed"


class ProbeConfigError(ProbeError):
    """Raised for unknown profiles or malformed settings."""

    code = "invalid-configuration"
