from typing import Mapping


# A dict-backed Counter; the storage behind Multiset
class Counter[T](dict[T, int]):
    """A Counter of hashable items that never keeps a non-positive count."""

    def __missing__(self, key: T) -> int:
        "The count of elements not in the Counter is zero."
        # Needed so that self[missing_item] does not raise KeyError
        return 0

    def total(self) -> int:
        return sum(self.values())

    def __add__(self, other: Mapping[T, int]) -> "Counter[T]":
        result = Counter[T]()
        for key in set(self) | set(other):
            new_count = self.get(key, 0) + other.get(key, 0)
            if new_count > 0:
                result[key] = new_count
        return result

    def __or__(self, other: Mapping[T, int]) -> "Counter[T]":
        result = Counter[T]()
        for key in set(self) | set(other):
            new_count = max(self.get(key, 0), other.get(key, 0))
            if new_count > 0:
                result[key] = new_count
        return result

    def __and__(self, other: Mapping[T, int]) -> "Counter[T]":
        result = Counter[T]()
        # Only keys present on both sides can survive
        for key in set(self) & set(other):
            new_count = min(self[key], other[key])
            if new_count > 0:
                result[key] = new_count
        return result

    def __sub__(self, other: Mapping[T, int]) -> "Counter[T]":
        result = Counter[T]()
        for key in self:
            new_count = self[key] - other.get(key, 0)
            if new_count > 0:
                result[key] = new_count
        return result
