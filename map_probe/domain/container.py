"""
AssociativeContainer: a configurable key-value map.

Models the map semantics of either reference language through injected
policies: what a missing-key lookup returns, how duplicate keys are
resolved at construction, and the order traversals observe.
"""

import logging
import random
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any

from ..utilities.constants import (
    DuplicateKeyAtConstruction,
    DuplicatePolicy,
    IneligibleKey,
    IneligibleValue,
    IterationOrder,
    MissPolicy,
)
from .key_candidate import assess_key

logger = logging.getLogger(__name__)


def _require_eligible(key: Any) -> None:
    eligibility = assess_key(key)
    if not eligibility.accepted:
        raise IneligibleKey(key, eligibility.reason)


class Missing(Enum):
    """Explicit absence signal, distinct from every storable value."""

    NOT_FOUND = "not-found"

    def __repr__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    def __bool__(self) -> bool:
        return False


NOT_FOUND = Missing.NOT_FOUND


class ValueType(Enum):
    """Declared value type of a container, which fixes its zero value."""

    STR = "str"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    BYTES = "bytes"
    LIST = "list"
    DICT = "dict"

    def __str__(self) -> str:
        return self.value

    def zero(self) -> Any:
        """Return a fresh zero value for this type."""
        return _ZERO_FACTORIES[self]()


_ZERO_FACTORIES = {
    ValueType.STR: str,
    ValueType.INT: int,
    ValueType.FLOAT: float,
    ValueType.BOOL: bool,
    ValueType.BYTES: bytes,
    ValueType.LIST: list,
    ValueType.DICT: dict,
}


class AssociativeContainer:
    """
    Key-value container with at most one value per key.

    Storage keeps insertion order; ``IterationOrder.RANDOMIZED`` starts
    every traversal at a random offset into that order. Passing ``seed``
    makes the sequence of offsets reproducible.
    """

    def __init__(
        self,
        miss_policy: MissPolicy = MissPolicy.EXPLICIT_SIGNAL,
        value_type: ValueType = ValueType.STR,
        iteration_order: IterationOrder = IterationOrder.INSERTION,
        seed: int | None = None,
    ):
        self.miss_policy = miss_policy
        self.value_type = value_type
        self.iteration_order = iteration_order
        self._entries: dict[Any, Any] = {}
        self._rng = random.Random(seed)

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[Any, Any]],
        duplicate_policy: DuplicatePolicy = DuplicatePolicy.LAST_WINS,
        **options: Any,
    ) -> "AssociativeContainer":
        """
        Build a container from ordered pairs under a duplicate policy.

        Raises:
            DuplicateKeyAtConstruction: Under ``REJECT`` when a key repeats
            IneligibleKey: If any key is not eligible
        """
        container = cls(**options)
        for key, value in pairs:
            if key in container:
                if duplicate_policy is DuplicatePolicy.REJECT:
                    raise DuplicateKeyAtConstruction(key)
                if duplicate_policy is DuplicatePolicy.FIRST_WINS:
                    logger.debug(f"Keeping first value for duplicate key {key!r}")
                    continue
                logger.debug(f"Overwriting duplicate key {key!r}")
            container.put(key, value)
        return container

    def put(self, key: Any, value: Any) -> None:
        """
        Store ``value`` under ``key``, replacing any previous value.

        Raises:
            IneligibleKey: If the key is not eligible
            IneligibleValue: If the value is ``NOT_FOUND``
        """
        _require_eligible(key)
        if value is NOT_FOUND:
            raise IneligibleValue(f"Cannot store {NOT_FOUND} under {key!r}")
        self._entries[key] = value

    def lookup(self, key: Any) -> Any:
        """
        Return the value for ``key``.

        For an absent key, returns the zero value of the declared value
        type under ``DEFAULT_ON_MISS`` and ``NOT_FOUND`` under
        ``EXPLICIT_SIGNAL``.

        Raises:
            IneligibleKey: If the key could never be stored
        """
        _require_eligible(key)
        if key in self._entries:
            return self._entries[key]
        if self.miss_policy is MissPolicy.DEFAULT_ON_MISS:
            return self.value_type.zero()
        return NOT_FOUND

    def traverse(self) -> list[Any]:
        """Perform one full traversal and return the keys in visit order."""
        keys = list(self._entries)
        if self.iteration_order is IterationOrder.RANDOMIZED and keys:
            offset = self._rng.randrange(len(keys))
            keys = keys[offset:] + keys[:offset]
        return keys

    def __contains__(self, key: Any) -> bool:
        # Membership only; an unhashable key can never be present
        try:
            return key in self._entries
        except TypeError:
            return False

    def __getitem__(self, key: Any) -> Any:
        return self.lookup(key)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.traverse())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"AssociativeContainer({self._entries!r}, miss_policy={self.miss_policy.value}, "
            f"iteration_order={self.iteration_order.value})"
        )
