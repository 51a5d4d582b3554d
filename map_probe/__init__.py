"""
Map Semantics Probe - demonstrate and verify dictionary/map semantics.

This package provides tools for:
- Key eligibility checks (hashability and structural comparability)
- Missing-key lookups under zero-value or explicit-signal policies
- Duplicate-key resolution during bulk construction
- Iteration-order stability across repeated traversals

Policies are injectable, so one container can emulate the maps of either
reference language.
"""

__version__ = "1.0.0"
__description__ = "Probe and compare dictionary/map semantics across languages"

from .config import LanguageProfile, ProbeSettings, get_environment_config, get_profile
from .domain import NOT_FOUND, AssociativeContainer, KeyCandidate, KeyKind, ProbeResult, ValueType
from .services import MapSemanticsProbe, create_probe
from .utilities.constants import (
    DuplicateKeyAtConstruction,
    DuplicatePolicy,
    InvalidKeyKind,
    InvalidPassCount,
    IterationOrder,
    MissPolicy,
    ProbeError,
)

__all__ = [
    "NOT_FOUND",
    "AssociativeContainer",
    "DuplicateKeyAtConstruction",
    "DuplicatePolicy",
    "InvalidKeyKind",
    "InvalidPassCount",
    "IterationOrder",
    "KeyCandidate",
    "KeyKind",
    "LanguageProfile",
    "MapSemanticsProbe",
    "MissPolicy",
    "ProbeError",
    "ProbeResult",
    "ProbeSettings",
    "ValueType",
    "create_probe",
    "get_environment_config",
    "get_profile",
]
