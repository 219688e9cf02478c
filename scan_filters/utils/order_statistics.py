from typing import Tuple

from sortedcontainers import SortedList


class ColumnWindow:
    """
    Sorted multiset of the most recent samples seen at one column.

    Insertion, removal of one occurrence and positional access are all
    O(log D), so the median is located by rank instead of by re-sorting.
    For a window of size k the upper middle sits at rank k // 2 and the lower
    middle at rank (k - 1) // 2; the two ranks coincide when k is odd.
    """

    def __init__(self):
        self._values = SortedList()

    def __len__(self) -> int:
        return len(self._values)

    def add(self, value: float):
        self._values.add(value)

    def evict(self, value: float):
        """Remove exactly one occurrence of value. Raises ValueError if it is absent."""
        self._values.remove(value)

    def clear(self):
        self._values.clear()

    @property
    def median_ranks(self) -> Tuple[int, int]:
        k = len(self._values)
        if k == 0:
            raise IndexError("median of an empty window")
        return (k - 1) // 2, k // 2

    def median(self) -> float:
        lower, upper = self.median_ranks
        if lower == upper:
            return self._values[upper]
        # halve before adding so large samples cannot overflow
        return self._values[lower] / 2.0 + self._values[upper] / 2.0

    def values(self) -> list:
        return list(self._values)
