"""
Utilities package for the map semantics probe.

This package contains constants and the error taxonomy, input validators,
formatters, and console output helpers.
"""

from .constants import (
    DuplicateKeyAtConstruction,
    DuplicatePolicy,
    IneligibleKey,
    IneligibleValue,
    InvalidKeyKind,
    InvalidPassCount,
    IterationOrder,
    MissPolicy,
    ProbeConfigError,
    ProbeError,
    RejectionReason,
)
from .formatters import format_eligibility, format_stability, format_value, format_verdict
from .validators import parse_pair, validate_pass_count

__all__ = [
    # Constants and errors
    "DuplicateKeyAtConstruction",
    "DuplicatePolicy",
    "IneligibleKey",
    "IneligibleValue",
    "InvalidKeyKind",
    "InvalidPassCount",
    "IterationOrder",
    "MissPolicy",
    "ProbeConfigError",
    "ProbeError",
    "RejectionReason",
    # Formatting utilities
    "format_eligibility",
    "format_stability",
    "format_value",
    "format_verdict",
    # Validation utilities
    "parse_pair",
    "validate_pass_count",
]
