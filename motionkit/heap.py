"""A mutable binary min-heap whose elements record their own position.

Each element stored in an :class:`IntrusiveHeap` must be a :class:`HeapElement`.
The element keeps its index in the heap, so membership tests take constant time.
Updating the position of an element whose priority has changed takes
logarithmic time.
"""

from __future__ import annotations

import operator
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar


class HeapElement:
    """Base class for objects that can live in an :class:`IntrusiveHeap`.

    An index of 0 means the element is not currently in a heap.
    """

    _heap_index: int = 0

    def __init__(self) -> None:
        self._heap_index = 0


T = TypeVar("T", bound=HeapElement)


class IntrusiveHeap(Generic[T]):
    """Binary heap ordered by ``compare(a, b)``, which is true when ``a`` comes first.

    Priorities are not stored; they are read through ``compare`` whenever
    elements are ordered. After changing an element's priority, call
    :meth:`update`, :meth:`increase` or :meth:`decrease`. After changing many
    priorities at once, call :meth:`make`.
    """

    def __init__(
        self,
        compare: Optional[Callable[[T, T], bool]] = None,
        elements: Optional[Iterable[T]] = None,
    ) -> None:
        self._compare: Callable[[T, T], bool] = compare if compare is not None else operator.lt
        # Slot 0 is unused so that children of i are 2i and 2i + 1.
        self._data: list[Optional[T]] = [None]
        if elements is not None:
            self._make_heap(elements)

    # -- queries ---------------------------------------------------------

    def min(self) -> T:
        """Return the first element without removing it."""
        if len(self._data) <= 1:
            raise IndexError("min() of an empty heap")
        return self._data[1]

    def __len__(self) -> int:
        return len(self._data) - 1

    def __iter__(self) -> Iterator[T]:
        return iter(self._data[1:])

    def __bool__(self) -> bool:
        return len(self._data) > 1

    def __contains__(self, e: object) -> bool:
        return isinstance(e, HeapElement) and e._heap_index != 0

    def contains(self, e: T) -> bool:
        """Return whether ``e`` is currently stored in a heap."""
        self._check_element(e)
        return e._heap_index != 0

    # -- modification ----------------------------------------------------

    def clear(self) -> None:
        """Remove every element, marking each as no longer in a heap."""
        for e in self._data[1:]:
            e._heap_index = 0
        del self._data[1:]

    def push(self, e: T) -> None:
        """Insert ``e``."""
        self._check_element(e)
        e._heap_index = len(self._data)
        self._data.append(e)
        self._percolate_up(len(self._data) - 1)

    def pop(self) -> T:
        """Remove and return the first element."""
        if len(self._data) <= 1:
            raise IndexError("pop() from an empty heap")
        top = self._data[1]
        top._heap_index = 0
        self._data[1] = self._data[-1]
        self._data.pop()
        self._percolate_down(1)
        return top

    def update(self, e: T) -> None:
        """Restore the order after ``e``'s priority changed in either direction."""
        self._require_member(e)
        self._percolate_up(e._heap_index)
        self._percolate_down(e._heap_index)

    def increase(self, e: T) -> None:
        """Restore the order after ``e`` moved later in the ordering."""
        self._require_member(e)
        self._percolate_down(e._heap_index)

    def decrease(self, e: T) -> None:
        """Restore the order after ``e`` moved earlier in the ordering."""
        self._require_member(e)
        self._percolate_up(e._heap_index)

    def erase(self, e: T) -> None:
        """Remove ``e`` from the heap."""
        self._require_member(e)
        pos = e._heap_index
        last = self._data[-1]
        self._data[pos] = last
        last._heap_index = pos
        e._heap_index = 0
        self._data.pop()
        if pos < len(self._data):
            self.update(self._data[pos])

    def make(self) -> None:
        """Reorder the whole heap in linear time after many priorities changed."""
        for i in range((len(self._data) - 1) >> 1, 0, -1):
            self._percolate_down(i)

    def swap(self, other: "IntrusiveHeap[T]") -> None:
        """Exchange contents and ordering with ``other``."""
        if other is self:
            return
        self._data, other._data = other._data, self._data
        self._compare, other._compare = other._compare, self._compare

    def check_heap(self) -> bool:
        """Return whether every parent strictly precedes its children."""
        if len(self._data) <= 1:
            return True
        stack = [1]
        size = len(self._data)
        while stack:
            index = stack.pop()
            for child in ((index << 1) + 1, index << 1):
                if child < size:
                    if not self._compare(self._data[index], self._data[child]):
                        return False
                    stack.append(child)
        return True

    # -- internals -------------------------------------------------------

    @staticmethod
    def _check_element(e: object) -> None:
        if not isinstance(e, HeapElement):
            raise TypeError(f"heap elements must be HeapElement instances, got {type(e).__name__}")

    def _require_member(self, e: T) -> None:
        self._check_element(e)
        if e._heap_index == 0:
            raise ValueError("element is not in the heap")

    def _make_heap(self, elements: Iterable[T]) -> None:
        items = list(elements)
        for e in items:
            self._check_element(e)
        self._data = [None, *items]
        for i, e in enumerate(items, start=1):
            e._heap_index = i
        for i in range(len(items) >> 1, 0, -1):
            self._percolate_down(i)

    def _percolate_down(self, pivot: int) -> None:
        data = self._data
        size = len(data)
        if pivot >= size:
            return
        less = self._compare
        tmp = data[pivot]
        left = pivot << 1
        while left < size:
            right = left + 1
            s = right
            if right >= size or less(data[left], data[right]):
                s = left
            if not less(data[s], tmp):
                break
            data[pivot] = data[s]
            data[pivot]._heap_index = pivot
            pivot = s
            left = pivot << 1
        data[pivot] = tmp
        tmp._heap_index = pivot

    def _percolate_up(self, pivot: int) -> None:
        data = self._data
        less = self._compare
        tmp = data[pivot]
        while pivot != 1:
            p = pivot >> 1
            if less(data[p], tmp):
                break
            data[pivot] = data[p]
            data[pivot]._heap_index = pivot
            pivot = p
        data[pivot] = tmp
        tmp._heap_index = pivot