import logging
from typing import TypeVar, Generic, List, Iterable, Iterator, Optional

T = TypeVar('T')

logger = logging.getLogger(__name__)


class DynamicContainer(Generic[T]):
    """Growable sequence with swap-based O(1) removal.

    Elements keep insertion order until a removal happens: removing the
    element at ``i`` moves the last live element into slot ``i``. Lookups are
    linear scans over the live slots ``0..size-1``.
    """

    DEFAULT_CAPACITY = 1

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 0:
            raise ValueError("capacity must be a non-negative integer")
        self._data: List[Optional[T]] = [None] * capacity
        self._capacity: int = capacity
        self._size: int = 0
        self._modifications: int = 0

    def ensure_capacity(self, min_capacity: int) -> None:
        if min_capacity <= self._capacity:
            return
        new_data: List[Optional[T]] = [None] * min_capacity
        for i in range(self._size):
            new_data[i] = self._data[i]
        logger.debug("DynamicContainer: growing storage %d -> %d", self._capacity, min_capacity)
        self._data = new_data
        self._capacity = min_capacity

    def add(self, element: T) -> None:
        if self._size == self._capacity:
            new_cap = 1 if self._capacity == 0 else self._capacity * 2
            self.ensure_capacity(new_cap)
        self._data[self._size] = element
        self._size += 1
        self._modifications += 1

    def add_all(self, elements: Iterable[T]) -> None:
        """Append every element in order.

        Unlike ``add`` this grows to exactly ``size + len(elements)`` in a
        single allocation instead of doubling.
        """
        items = list(elements)
        new_size = self._size + len(items)
        if new_size >= self._capacity:
            self.ensure_capacity(new_size)
        for item in items:
            self._data[self._size] = item
            self._size += 1
        if items:
            self._modifications += 1

    def at(self, index: int) -> T:
        if index < 0 or index >= self._size:
            raise IndexError("DynamicContainer.at: index out of range")
        return self._data[index]  # type: ignore[return-value]

    def contains(self, element: T) -> bool:
        return self.find(element) != -1

    def contains_all(self, elements: Iterable[T]) -> bool:
        for element in elements:
            if not self.contains(element):
                return False
        return True

    def find(self, element: T) -> int:
        for i in range(self._size):
            item = self._data[i]
            if item is element or item == element:
                return i
        return -1

    def last_added_index(self) -> int:
        """Index written by the most recent add.

        Only meaningful until the next removal, which may move another
        element into that slot. Returns -1 on an empty container.
        """
        return self._size - 1

    def remove_at(self, index: int) -> bool:
        if index < 0 or index >= self._size:
            return False
        last = self._size - 1
        if index != last:
            self._data[index], self._data[last] = self._data[last], self._data[index]
        self._size = last
        self._modifications += 1
        return True

    def remove_element(self, element: T) -> bool:
        return self.remove_at(self.find(element))

    def remove_all(self, elements: Iterable[T]) -> bool:
        """Remove one occurrence per requested element.

        Duplicates in ``elements`` each remove another occurrence, as long as
        one is still present.
        """
        changed = False
        for element in list(elements):
            if self.remove_element(element):
                changed = True
        return changed

    def retain_all(self, elements: Iterable[T]) -> bool:
        """Remove every live element not present in ``elements``.

        Note: Walks a snapshot of the live elements, since removal relocates them.
        """
        keep = list(elements)
        changed = False
        for element in self.to_array():
            if element not in keep and self.remove_element(element):
                changed = True
        return changed

    def clear(self) -> None:
        self._size = 0
        self._modifications += 1

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def to_array(self) -> List[T]:
        return self._data[:self._size]  # type: ignore[return-value]

    def copy(self) -> 'DynamicContainer[T]':
        clone: DynamicContainer[T] = DynamicContainer(self._capacity)
        for i in range(self._size):
            clone._data[i] = self._data[i]
        clone._size = self._size
        return clone

    def _iterate(self, size: int, expected: int) -> Iterator[T]:
        for i in range(size):
            if self._modifications != expected:
                raise RuntimeError("DynamicContainer changed during iteration")
            yield self._data[i]  # type: ignore[misc]
        if self._modifications != expected:
            raise RuntimeError("DynamicContainer changed during iteration")

    def __iter__(self) -> Iterator[T]:
        return self._iterate(self._size, self._modifications)

    def __getitem__(self, index: int) -> T:
        return self.at(index)

    def __contains__(self, element: object) -> bool:
        return self.contains(element)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicContainer):
            return NotImplemented
        if other is self:
            return True
        if other._capacity != self._capacity or other._size != self._size:
            return False
        for i in range(self._size):
            mine, theirs = self._data[i], other._data[i]
            if mine is not theirs and mine != theirs:
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + ", ".join(str(self._data[i]) for i in range(self._size)) + "]"

    def __repr__(self) -> str:
        items = ", ".join(repr(self._data[i]) for i in range(self._size))
        return f"DynamicContainer([{items}], capacity={self._capacity})"
