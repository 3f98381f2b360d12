"""Ordered set with order-statistic queries."""

from sortedcontainers import SortedList


class OrderedSet:
    """A sorted set supporting lookup by rank and rank of a key."""

    def __init__(self, items=()):
        self._items = SortedList(set(items))

    def add(self, value):
        """Insert ``value`` unless it is already present."""
        if value not in self._items:
            self._items.add(value)

    def discard(self, value):
        """Remove ``value`` if present."""
        self._items.discard(value)

    def find_by_order(self, index):
        """Return the element with ``index`` smaller elements."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"order {index} out of range")
        return self._items[index]

    def order_of_key(self, value):
        """Return the number of elements strictly less than ``value``."""
        return self._items.bisect_left(value)

    def __len__(self):
        return len(self._items)

    def __contains__(self, value):
        return value in self._items

    def __iter__(self):
        return iter(self._items)

    def __repr__(self):
        return f"OrderedSet({list(self._items)!r})"