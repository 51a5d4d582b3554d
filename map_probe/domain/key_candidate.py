"""
KeyCandidate value object and key eligibility probing.

Provides the catalogue of key kinds with a representative sample for
each, and the structural checks that decide whether a value may serve
as a map key.
"""

import dataclasses
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..utilities.constants import InvalidKeyKind, RejectionReason
from ..utilities.formatters import format_eligibility


class KeyCategory(Enum):
    """Structural category of a key kind."""

    PRIMITIVE = "primitive"
    COMPOSITE_FIXED_SIZE = "composite-fixed-size"
    COMPOSITE_VARIABLE_SIZE = "composite-variable-size"
    REFERENCE_TYPE = "reference-type"


def _sample_function():
    return "Hal Jordan"


class KeyKind(Enum):
    """Catalogue of key kinds the probe knows how to sample."""

    INT = "int"
    FLOAT = "float"
    NAN = "nan"
    STR = "str"
    BYTES = "bytes"
    BOOL = "bool"
    TUPLE = "tuple"
    NESTED_TUPLE = "nested-tuple"
    FROZENSET = "frozenset"
    TUPLE_WITH_LIST = "tuple-with-list"
    TUPLE_WITH_OBJECT = "tuple-with-object"
    LIST = "list"
    BYTEARRAY = "bytearray"
    SET = "set"
    DICT = "dict"
    OBJECT = "object"
    FUNCTION = "function"

    @classmethod
    def parse(cls, name: str) -> "KeyKind":
        """
        Look up a kind by its command-line name.

        Raises:
            InvalidKeyKind: If the name is not catalogued
        """
        try:
            return cls(name.strip().lower())
        except (ValueError, AttributeError):
            raise InvalidKeyKind(f"Unknown key kind: {name!r}") from None

    @classmethod
    def names(cls) -> list[str]:
        """All catalogued kind names."""
        return [kind.value for kind in cls]


# Factories build a fresh sample per call so mutable samples are never shared
_CATALOGUE: dict[KeyKind, tuple[KeyCategory, Callable[[], Any]]] = {
    KeyKind.INT: (KeyCategory.PRIMITIVE, lambda: 42),
    KeyKind.FLOAT: (KeyCategory.PRIMITIVE, lambda: 2.5),
    KeyKind.NAN: (KeyCategory.PRIMITIVE, lambda: float("nan")),
    KeyKind.STR: (KeyCategory.PRIMITIVE, lambda: "Green Lantern"),
    KeyKind.BYTES: (KeyCategory.PRIMITIVE, lambda: b"GL"),
    KeyKind.BOOL: (KeyCategory.PRIMITIVE, lambda: True),
    KeyKind.TUPLE: (KeyCategory.COMPOSITE_FIXED_SIZE, lambda: ("Hal", "Jordan")),
    KeyKind.NESTED_TUPLE: (KeyCategory.COMPOSITE_FIXED_SIZE, lambda: ((1, 2), ("a", "b"))),
    KeyKind.FROZENSET: (KeyCategory.COMPOSITE_FIXED_SIZE, lambda: frozenset({"a", "b"})),
    KeyKind.TUPLE_WITH_LIST: (KeyCategory.COMPOSITE_FIXED_SIZE, lambda: (1, [2, 3])),
    KeyKind.TUPLE_WITH_OBJECT: (KeyCategory.COMPOSITE_FIXED_SIZE, lambda: (1, object())),
    KeyKind.LIST: (KeyCategory.COMPOSITE_VARIABLE_SIZE, lambda: [1, 2]),
    KeyKind.BYTEARRAY: (KeyCategory.COMPOSITE_VARIABLE_SIZE, lambda: bytearray(b"GL")),
    KeyKind.SET: (KeyCategory.COMPOSITE_VARIABLE_SIZE, lambda: {1, 2}),
    KeyKind.DICT: (KeyCategory.REFERENCE_TYPE, lambda: {"a": 1}),
    KeyKind.OBJECT: (KeyCategory.REFERENCE_TYPE, object),
    KeyKind.FUNCTION: (KeyCategory.REFERENCE_TYPE, lambda: _sample_function),
}


@dataclass(frozen=True)
class KeyEligibility:
    """Verdict on whether a value may be used as a key."""

    accepted: bool
    reason: RejectionReason | None = None

    @classmethod
    def accept(cls) -> "KeyEligibility":
        return cls(accepted=True)

    @classmethod
    def reject(cls, reason: RejectionReason) -> "KeyEligibility":
        return cls(accepted=False, reason=reason)

    def __str__(self) -> str:
        return format_eligibility(self.accepted, self.reason)


def _has_identity_equality(value: Any) -> bool:
    return type(value).__eq__ is object.__eq__


def _is_singleton(value: Any) -> bool:
    """Values with exactly one instance, whose identity is their value."""
    return value is None or value is Ellipsis or isinstance(value, (Enum, type))


def _elements(value: Any) -> Iterable[Any]:
    if isinstance(value, (tuple, frozenset)):
        return value
    if dataclasses.is_dataclass(value):
        return [getattr(value, f.name) for f in dataclasses.fields(value) if f.compare]
    return ()


def _structural_reason(value: Any) -> RejectionReason | None:
    # NaN never equals itself, so lookups by an equal key can never succeed
    if isinstance(value, float) and math.isnan(value):
        return RejectionReason.STRUCTURALLY_INVALID
    if _is_singleton(value):
        return None
    if _has_identity_equality(value):
        return RejectionReason.STRUCTURALLY_INVALID
    for element in _elements(value):
        reason = _structural_reason(element)
        if reason is not None:
            return reason
    return None


def assess_key(value: Any) -> KeyEligibility:
    """
    Decide whether ``value`` is eligible as a map key.

    A key must hash, must equal itself, and must compare by value rather
    than by identity. Singletons (``None``, ``Ellipsis``, enum members and
    classes) are the exception, since their identity is their value.
    Tuples, frozensets and dataclass instances are eligible only when all
    of their compared elements are.
    """
    try:
        hash(value)
    except TypeError:
        return KeyEligibility.reject(RejectionReason.UNHASHABLE)

    reason = _structural_reason(value)
    if reason is not None:
        return KeyEligibility.reject(reason)
    return KeyEligibility.accept()


@dataclass(frozen=True)
class KeyCandidate:
    """
    A value being tested for eligibility as a key.

    Tagged with its catalogue kind and structural category.
    """

    kind: KeyKind
    category: KeyCategory
    value: Any

    @classmethod
    def sample(cls, kind: KeyKind | str) -> "KeyCandidate":
        """Build the representative candidate for a kind."""
        if not isinstance(kind, KeyKind):
            kind = KeyKind.parse(kind)
        category, factory = _CATALOGUE[kind]
        return cls(kind=kind, category=category, value=factory())

    def assess(self) -> KeyEligibility:
        """Probe this candidate's eligibility."""
        return assess_key(self.value)

    def __str__(self) -> str:
        return f"{self.kind.value} ({self.category.value})"
