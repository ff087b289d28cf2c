"""A typed list whose items are deep-copied through a :class:`CType`."""

from __future__ import annotations

import functools
import sys
from typing import Any, Callable, Iterable, Iterator, List, Optional, TextIO

from .ctype import CType, ctype_size_t

__all__ = ["CAList"]

Predicate = Callable[[Any], bool]
Mapper = Callable[[Any], Any]

_NOT_EMPTY = "calist cannot be empty!"
_SAME_TYPE = "calist must have the same type!"
_INDEX_BOUNDED = "index must be less than the size of calist!"
_INDEX_BOUNDED_INCLUSIVE = "index must not exceed the size of calist!"
_END_AFTER_START = "The ending index cannot be less than the starting index!"


class CAList:
    """A growable list of items that all share one :class:`CType`.

    Every item stored is a copy made by the descriptor's ``dup``, so values
    passed in are never shared with the list.  Equality of items is decided
    by the descriptor's ``compare``.  Capacity is tracked explicitly and
    doubles when an insertion finds the list full.
    """

    def __init__(self, ctype: CType, capacity: int = 1) -> None:
        if not isinstance(ctype, CType):
            raise TypeError("ctype must be a CType")
        if capacity <= 0:
            raise ValueError("The initial capacity of calist cannot be zero!")
        self._ctype = ctype
        self._items: List[Any] = []
        self._capacity = capacity

    # ---- properties and dunders -------------------------------------------

    @property
    def ctype(self) -> CType:
        """The descriptor shared by every item."""
        return self._ctype

    @property
    def capacity(self) -> int:
        """The number of items the list can hold before it grows."""
        return self._capacity

    def __repr__(self) -> str:
        return f"CAList({self._ctype.name}, {self})"

    def __str__(self) -> str:
        return "[" + ", ".join(self._ctype.format(x) for x in self._items) + "]"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CAList):
            return NotImplemented
        if len(self._items) != len(other._items) or self._ctype is not other._ctype:
            return False
        return all(
            self._ctype.compare(a, b) == 0 for a, b in zip(self._items, other._items)
        )

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __setitem__(self, index: int, item: Any) -> None:
        self.set(index, item)

    def __contains__(self, item: Any) -> bool:
        return self.index(item) is not None

    # ---- helpers ----------------------------------------------------------

    def _check_index(self, index: int, inclusive: bool = False) -> None:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError("index must be an integer")
        if inclusive:
            if not 0 <= index <= len(self._items):
                raise IndexError(_INDEX_BOUNDED_INCLUSIVE)
            return
        if not self._items:
            raise IndexError(_NOT_EMPTY)
        if not 0 <= index < len(self._items):
            raise IndexError(_INDEX_BOUNDED)

    def _check_range(self, start: int, stop: int) -> None:
        self._check_index(start)
        if stop < start:
            raise IndexError(_END_AFTER_START)
        if stop > len(self._items):
            raise IndexError(_INDEX_BOUNDED_INCLUSIVE)

    def _require_items(self) -> None:
        if not self._items:
            raise ValueError(_NOT_EMPTY)

    def _grow_if_full(self) -> None:
        if len(self._items) >= self._capacity:
            self.reserve(max(1, self._capacity * 2))

    def _matches(self, item: Any, stored: Any) -> bool:
        return self._ctype.compare(item, stored) == 0

    def _source_values(self, src: Iterable[Any]) -> List[Any]:
        if isinstance(src, CAList):
            if src._ctype is not self._ctype:
                raise TypeError(_SAME_TYPE)
            return list(src._items)
        return list(src)

    def _new_like(self) -> "CAList":
        return CAList(self._ctype)

    # ---- whole-list operations --------------------------------------------

    def copy(self) -> "CAList":
        """Return a deep copy with the same type, items and capacity."""
        duplicate = CAList(self._ctype, self._capacity)
        duplicate._items = [self._ctype.dup(x) for x in self._items]
        return duplicate

    def clear(self) -> None:
        """Remove every item, keeping the capacity."""
        self._items.clear()

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write the list as ``[X, Y, ...]`` followed by a newline."""
        (file if file is not None else sys.stdout).write(f"{self}\n")

    def is_empty(self) -> bool:
        """Return True if the list holds no items."""
        return not self._items

    def reserve(self, n: int) -> None:
        """Make sure the list can hold at least ``n`` items."""
        if n > self._capacity:
            self._capacity = n

    def reclaim(self) -> None:
        """Shrink the capacity to the current size."""
        self._capacity = len(self._items)

    # ---- element access ---------------------------------------------------

    def get(self, index: int) -> Any:
        """Return the item at ``index``."""
        self._check_index(index)
        return self._items[index]

    def set(self, index: int, item: Any) -> None:
        """Replace the item at ``index`` with a copy of ``item``."""
        self._check_index(index)
        self._items[index] = self._ctype.dup(item)

    def swap(self, i: int, j: int) -> None:
        """Exchange the items at positions ``i`` and ``j``."""
        self._check_index(i)
        self._check_index(j)
        self._items[i], self._items[j] = self._items[j], self._items[i]

    # ---- insertion --------------------------------------------------------

    def append(self, item: Any) -> None:
        """Add a copy of ``item`` at the back."""
        value = self._ctype.dup(item)
        self._grow_if_full()
        self._items.append(value)

    def extend(self, src: Iterable[Any]) -> None:
        """Append copies of every item of ``src`` (a list of the same type or any iterable)."""
        for value in self._source_values(src):
            self.append(value)

    def insert(self, index: int, item: Any) -> None:
        """Insert a copy of ``item`` before position ``index``."""
        self._check_index(index, inclusive=True)
        value = self._ctype.dup(item)
        self._grow_if_full()
        self._items.insert(index, value)

    def insert_front(self, item: Any) -> None:
        """Insert a copy of ``item`` at the front."""
        self.insert(0, item)

    def insert_all(self, index: int, src: Iterable[Any]) -> None:
        """Insert copies of every item of ``src`` before position ``index``."""
        values = self._source_values(src)
        self._check_index(index, inclusive=True)
        copies = [self._ctype.dup(v) for v in values]
        self.reserve(len(self._items) + len(copies))
        self._items[index:index] = copies

    # ---- removal ----------------------------------------------------------

    def pop(self, index: int) -> Any:
        """Remove and return the item at ``index``."""
        self._check_index(index)
        return self._items.pop(index)

    def remove(self, item: Any) -> Optional[int]:
        """Remove the first item equal to ``item``; return its position or None."""
        self._require_items()
        position = self.index(item)
        if position is not None:
            del self._items[position]
        return position

    def remove_last(self, item: Any) -> Optional[int]:
        """Remove the last item equal to ``item``; return its position or None."""
        self._require_items()
        position = self.index_last(item)
        if position is not None:
            del self._items[position]
        return position

    def remove_all(self, item: Any) -> int:
        """Remove every item equal to ``item``; return how many were removed."""
        self._require_items()
        return self.remove_if(lambda stored: self._matches(item, stored))

    def remove_if(self, pred: Predicate) -> int:
        """Remove every item for which ``pred`` is true; return how many were removed."""
        self._require_items()
        kept = [x for x in self._items if not pred(x)]
        removed = len(self._items) - len(kept)
        self._items = kept
        return removed

    def remove_range(self, start: int, stop: int) -> None:
        """Remove the items from ``start`` up to but not including ``stop``."""
        self._check_range(start, stop)
        del self._items[start:stop]

    # ---- searching --------------------------------------------------------

    def index(self, item: Any) -> Optional[int]:
        """Return the first position of ``item``, or None if absent."""
        return next(
            (i for i, stored in enumerate(self._items) if self._matches(item, stored)),
            None,
        )

    def index_last(self, item: Any) -> Optional[int]:
        """Return the last position of ``item``, or None if absent."""
        for i in reversed(range(len(self._items))):
            if self._matches(item, self._items[i]):
                return i
        return None

    def index_all(self, item: Any) -> "CAList":
        """Return a size_t list of every position holding ``item``."""
        return self.index_all_if(lambda stored: self._matches(item, stored))

    def index_all_if(self, pred: Predicate) -> "CAList":
        """Return a size_t list of every position whose item satisfies ``pred``."""
        indices = CAList(ctype_size_t())
        indices.extend(i for i, stored in enumerate(self._items) if pred(stored))
        return indices

    def count(self, item: Any) -> int:
        """Return how many items equal ``item``."""
        return sum(1 for stored in self._items if self._matches(item, stored))

    # ---- replacement ------------------------------------------------------

    def replace(self, old: Any, new: Any) -> Optional[int]:
        """Replace the first ``old`` with ``new``; return its position or None."""
        position = self.index(old)
        if position is not None:
            self.set(position, new)
        return position

    def replace_last(self, old: Any, new: Any) -> Optional[int]:
        """Replace the last ``old`` with ``new``; return its position or None."""
        position = self.index_last(old)
        if position is not None:
            self.set(position, new)
        return position

    def replace_all(self, old: Any, new: Any) -> int:
        """Replace every ``old`` with ``new``; return how many were replaced."""
        if new is None:
            raise ValueError("The new item cannot be None")
        return self.replace_if(new, lambda stored: self._matches(old, stored))

    def replace_if(self, new: Any, pred: Predicate) -> int:
        """Replace every item satisfying ``pred`` with ``new``; return the count."""
        if new is None:
            raise ValueError("The replacement item cannot be None")
        total = 0
        for i, stored in enumerate(self._items):
            if pred(stored):
                self._items[i] = self._ctype.dup(new)
                total += 1
        return total

    # ---- ordering ---------------------------------------------------------

    def sort(self) -> None:
        """Sort the items in ascending order of the descriptor's comparison."""
        self._items.sort(key=functools.cmp_to_key(self._ctype.compare))

    def bsearch(self, item: Any) -> Optional[int]:
        """Binary-search a sorted list for ``item``; return a position or None."""
        low, high = 0, len(self._items) - 1
        while low <= high:
            mid = (low + high) // 2
            order = self._ctype.compare(self._items[mid], item)
            if order == 0:
                return mid
            if order < 0:
                low = mid + 1
            else:
                high = mid - 1
        return None

    def reverse(self) -> None:
        """Reverse the order of the items in place."""
        self._items.reverse()

    # ---- derived lists ----------------------------------------------------

    def slice(self, start: int, stop: int) -> "CAList":
        """Return a new list of copies of the items from ``start`` to ``stop - 1``."""
        self._check_range(start, stop)
        sub = self._new_like()
        sub.reserve(stop - start)
        sub.extend(self._items[start:stop])
        return sub

    def filter(self, pred: Predicate) -> "CAList":
        """Return a new list of copies of the items that satisfy ``pred``."""
        filtered = self._new_like()
        filtered.extend(x for x in self._items if pred(x))
        return filtered

    def foreach(self, func: Mapper) -> None:
        """Apply ``func`` to every item.

        A value returned by ``func`` (other than None) replaces the item;
        ``func`` may instead mutate a mutable item in place and return None.
        """
        for i, stored in enumerate(self._items):
            result = func(stored)
            if result is not None:
                self._items[i] = self._ctype.dup(result)

    def unique(self) -> "CAList":
        """Return a new list holding the first occurrence of each distinct item."""
        distinct = self._new_like()
        for stored in self._items:
            if stored not in distinct:
                distinct.append(stored)
        return distinct

    def remove_dup(self) -> int:
        """Keep only the first occurrence of each item; return how many were removed."""
        distinct = self.unique()
        removed = len(self._items) - len(distinct)
        self._items = distinct._items
        return removed