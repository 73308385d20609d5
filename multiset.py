"""A generic multiset (bag) container.

A `Multiset` tracks, for every distinct hashable value, how many times it
occurs. Mutating operations work in place; the multiset algebra (union,
intersection, sum, difference) always builds a new instance and leaves both
operands untouched.
"""

import logging
from collections.abc import Callable, ItemsView, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, NamedTuple, Optional

from counter import Counter

logger = logging.getLogger(__name__)

_PREFIX = "Multiset{"
_SUFFIX = "}"
_SEPARATOR = ", "


class Entry(NamedTuple):
    """Result of `Multiset.get`. Unpacks as `value, count, found`."""

    value: Any
    count: int
    found: bool


class Multiset[T]:
    """An unordered collection of values with multiplicities.

    `len()` counts duplicates, `cardinality()` counts distinct values.
    Values are compared by equality, so `T` must be hashable.

    Not thread-safe: guard a shared instance with a lock of your own.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._elements: Counter[T] = Counter()
        self._total = 0
        self._capacity = 0
        for value in values:
            self.insert(value)

    @classmethod
    def new(cls) -> "Multiset[T]":
        """Constructs an empty multiset."""
        return cls()

    @classmethod
    def with_capacity(cls, n: int) -> "Multiset[T]":
        """Constructs an empty multiset with a capacity hint of `n`.

        The hint does not bound the size of the multiset and does not count
        towards its length. Python dicts grow on demand, so the hint is only
        recorded (see `capacity`)."""
        if n < 0:
            raise ValueError(f"Capacity must be non-negative, got {n}")
        inst = cls()
        inst._capacity = n
        logger.debug(f"Created multiset with capacity hint {n}")
        return inst

    @classmethod
    def from_counts(cls, counts: Mapping[T, int]) -> "Multiset[T]":
        """Constructs a multiset from a mapping of value to multiplicity."""
        inst = cls.with_capacity(len(counts))
        for value, n in counts.items():
            inst.insert_many(value, n)
        return inst

    @property
    def capacity(self) -> int:
        return self._capacity

    # Mutation

    def insert(self, v: T) -> int:
        """Inserts one occurrence of `v`. Returns the previous multiplicity."""
        return self.insert_many(v, 1)

    def insert_many(self, v: T, n: int) -> int:
        """Inserts `n` occurrences of `v`. Returns the previous multiplicity.

        Inserting zero occurrences leaves the multiset unchanged."""
        if n < 0:
            raise ValueError(
                f"Cannot insert a negative number of occurrences ({n}) of {v!r}"
            )
        previous = self._elements[v]
        if n == 0:
            return previous

        self._elements[v] = previous + n
        self._total += n
        return previous

    def remove(self, v: T) -> int:
        """Removes one occurrence of `v`. Returns the previous multiplicity."""
        previous = self._elements[v]
        if previous == 0:
            return 0

        self._total -= 1
        if previous == 1:
            del self._elements[v]
        else:
            self._elements[v] = previous - 1
        return previous

    def replace(self, v: T) -> int:
        """Sets the multiplicity of `v` to exactly one. Returns the previous multiplicity."""
        previous = self._elements[v]
        self._elements[v] = 1
        self._total += 1 - previous
        return previous

    # Queries

    def get(self, v: T) -> Entry:
        """Returns the stored value equal to `v` with its multiplicity.

        `Entry(None, 0, False)` if `v` is not in the multiset."""
        count = self._elements[v]
        if count == 0:
            return Entry(None, 0, False)
        # dict keeps the first inserted key, which may differ in identity from `v`.
        # The identity check matches values unequal to themselves, like NaN.
        stored = next((key for key in self._elements if key is v or key == v), v)
        return Entry(stored, count, True)

    def contains(self, v: T) -> int:
        """Returns the multiplicity of `v`, zero if absent."""
        return self._elements[v]

    def is_empty(self) -> bool:
        return self._total == 0

    def len(self) -> int:
        """Number of values in the multiset, duplicates counted."""
        return self._total

    def cardinality(self) -> int:
        """Number of distinct values in the multiset."""
        return len(self._elements)

    def each(self, visitor: Callable[[T, int], Any]) -> None:
        """Calls `visitor(value, multiplicity)` for every distinct value.

        Iteration order is unspecified and stops as soon as `visitor` returns
        a truthy value. The visitor must not mutate the multiset; adding or
        removing values mid-iteration raises `RuntimeError`."""
        for value, count in self._elements.items():
            if visitor(value, count):
                break

    def items(self) -> ItemsView[T, int]:
        """Read-only view of `(value, multiplicity)` pairs."""
        return MappingProxyType(self._elements).items()

    def clone(self) -> "Multiset[T]":
        """Returns an independent copy of the multiset."""
        inst = self.__class__()
        inst._elements = Counter(self._elements)
        inst._total = self._total
        inst._capacity = self._capacity
        return inst

    def equal(self, other: "Multiset[T]") -> bool:
        """Whether both multisets hold the same values with the same multiplicities."""
        return self._total == other._total and self._elements == other._elements

    def string(self) -> str:
        """Renders as `Multiset{k1:m1, k2:m2}` with keys sorted by their string form."""
        entries = sorted(
            ((str(value), count) for value, count in self._elements.items()),
            key=lambda entry: entry[0],
        )
        body = _SEPARATOR.join(f"{key}:{count}" for key, count in entries)
        return f"{_PREFIX}{body}{_SUFFIX}"

    # Algebra

    def union(self, other: Optional["Multiset[T]"] = None) -> "Multiset[T]":
        """Maximum multiplicity of each value found in either multiset."""
        return self._from_counter(self._elements | _counts_of(other), "union")

    def intersection(self, other: Optional["Multiset[T]"] = None) -> "Multiset[T]":
        """Minimum multiplicity of each value found in both multisets."""
        return self._from_counter(self._elements & _counts_of(other), "intersection")

    def sum(self, other: Optional["Multiset[T]"] = None) -> "Multiset[T]":
        """Multiplicities of both multisets added together."""
        return self._from_counter(self._elements + _counts_of(other), "sum")

    def difference(self, other: Optional["Multiset[T]"] = None) -> "Multiset[T]":
        """Multiplicities of `other` taken away, dropping values that reach zero."""
        return self._from_counter(self._elements - _counts_of(other), "difference")

    def _from_counter(self, counts: Counter[T], operation: str) -> "Multiset[T]":
        inst = self.__class__()
        inst._capacity = len(counts)
        inst._elements = counts
        inst._total = counts.total()
        logger.debug(
            f"{operation} produced {inst._total} values ({len(counts)} distinct)"
        )
        return inst

    # Python protocols

    def __len__(self) -> int:
        return self._total

    def __contains__(self, v: object) -> bool:
        return self._elements.get(v, 0) > 0  # type: ignore[call-overload]

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Multiset):
            return NotImplemented
        return self.equal(other)

    def __str__(self) -> str:
        return self.string()

    __repr__ = __str__

    def __copy__(self) -> "Multiset[T]":
        return self.clone()

    def __or__(self, other: object) -> "Multiset[T]":
        if not isinstance(other, Multiset):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> "Multiset[T]":
        if not isinstance(other, Multiset):
            return NotImplemented
        return self.intersection(other)

    def __add__(self, other: object) -> "Multiset[T]":
        if not isinstance(other, Multiset):
            return NotImplemented
        return self.sum(other)

    def __sub__(self, other: object) -> "Multiset[T]":
        if not isinstance(other, Multiset):
            return NotImplemented
        return self.difference(other)


def _counts_of[T](other: Optional[Multiset[T]]) -> Counter[T]:
    """A missing operand counts as the empty multiset."""
    if other is None:
        return Counter()
    return other._elements


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    a = Multiset.from_counts({"a": 2, "b": 3, "c": 1, "d": 2})
    b = Multiset.from_counts({"b": 2, "c": 3, "d": 2, "e": 1})
    print(f"{a} | {b} = {a.union(b)}")
    print(f"{a} & {b} = {a.intersection(b)}")
    print(f"{a} + {b} = {a.sum(b)}")
    print(f"{a} - {b} = {a.difference(b)}")
