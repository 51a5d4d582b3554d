"""
Domain value objects for the map semantics probe.
"""

from .container import NOT_FOUND, AssociativeContainer, Missing, ValueType
from .key_candidate import KeyCandidate, KeyCategory, KeyEligibility, KeyKind, assess_key
from .probe_result import ProbeResult

__all__ = [
    "NOT_FOUND",
    "AssociativeContainer",
    "KeyCandidate",
    "KeyCategory",
    "KeyEligibility",
    "KeyKind",
    "Missing",
    "ProbeResult",
    "ValueType",
    "assess_key",
]
