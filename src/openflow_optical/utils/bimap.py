"""Immutable bidirectional mapping used for wire-code tables."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Generic, TypeVar

from openflow_optical.errors import NoMappingFoundError

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")


class BiMap(Generic[K, V]):
    """A read-only one-to-one mapping with a precomputed inverse.

    Both directions are plain dict lookups.  The instance cannot be mutated
    after construction.

    Args:
        mapping: Forward entries.  Values must be unique and hashable.

    Raises:
        ValueError: If two keys map to the same value.
    """

    __slots__ = ("_forward", "_inverse")

    _forward: Mapping[K, V]
    _inverse: BiMap[V, K]

    def __init__(self, mapping: Mapping[K, V]) -> None:
        forward: dict[K, V] = dict(mapping)
        reverse: dict[V, K] = {}
        for key, value in forward.items():
            if value in reverse:
                raise ValueError(
                    f"Value {value!r} is mapped by both {reverse[value]!r} and {key!r}"
                )
            reverse[value] = key
        object.__setattr__(self, "_forward", MappingProxyType(forward))
        inverse = BiMap.__new__(BiMap)
        object.__setattr__(inverse, "_forward", MappingProxyType(reverse))
        object.__setattr__(inverse, "_inverse", self)
        object.__setattr__(self, "_inverse", inverse)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def inverse(self) -> BiMap[V, K]:
        """Return the reverse view (value to key)."""
        return self._inverse

    def as_dict(self) -> Mapping[K, V]:
        """Return a read-only mapping of the forward entries."""
        return self._forward

    def __getitem__(self, key: K) -> V:
        return self._forward[key]

    def __contains__(self, key: object) -> bool:
        try:
            return key in self._forward
        except TypeError:
            return False

    def __iter__(self) -> Iterator[K]:
        return iter(self._forward)

    def __len__(self) -> int:
        return len(self._forward)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._forward)!r})"


def lookup(bimap: BiMap[K, T], value: object, output_type: type[T]) -> T:
    """Look up *value* in *bimap*, failing loudly on a miss.

    Args:
        bimap: The table to search, already oriented in the wanted direction.
        value: Key to look up.  Unhashable keys count as a miss.
        output_type: Type of the result, reported in the error.

    Returns:
        The mapped value.

    Raises:
        NoMappingFoundError: If *value* is not a key of *bimap*.
    """
    if value not in bimap:
        logger.debug("No %s mapping for %r", output_type.__name__, value)
        raise NoMappingFoundError(value, output_type)
    return bimap[value]  # type: ignore[index]
