"""Dynamically resizable sliding window backed by a circular buffer."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from numbers import Integral
from typing import TYPE_CHECKING, Any, Generic, Iterator, List, Optional, TypeVar

from .exceptions import InvalidArgumentError
from .logging_utils import log_event

if TYPE_CHECKING:
    from .config import WindowSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CAPACITY = 8


def _is_int(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


class SlidingWindow(Generic[T]):
    """Count-based sliding window with O(1) amortized operations at both ends.

    Elements are addressed by logical index:
        0           -> oldest element
        size() - 1  -> newest element

    Reads and removals on an empty window (or with a bad index) return
    ``None`` instead of raising. Capacity doubles when a push would overflow
    it and never shrinks.
    """

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY, values: Optional[Sequence[T]] = None) -> None:
        if not _is_int(initial_capacity) or initial_capacity < 1:
            raise InvalidArgumentError(f"initial_capacity must be an integer >= 1 (got {initial_capacity!r})")
        if values is not None and (
            not isinstance(values, Sequence) or isinstance(values, (str, bytes, bytearray))
        ):
            raise InvalidArgumentError(f"values must be a sequence (got {type(values).__name__})")

        self._data: List[Optional[T]] = [None] * int(initial_capacity)
        self._head = 0
        self._size = 0

        if values is not None:
            self.push(*values)

    @classmethod
    def from_settings(cls, settings: "WindowSettings", values: Optional[Sequence[T]] = None) -> "SlidingWindow[T]":
        return cls(initial_capacity=settings.initial_capacity, values=values)

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        """Number of allocated slots."""
        return len(self._data)

    def is_empty(self) -> bool:
        return self._size == 0

    def oldest(self) -> Optional[T]:
        if self._size == 0:
            return None
        return self._data[self._head]

    def newest(self) -> Optional[T]:
        if self._size == 0:
            return None
        return self._data[(self._head + self._size - 1) % len(self._data)]

    def get(self, index: Any) -> Optional[T]:
        """Return the element at logical ``index`` or ``None`` when out of range.

        Negative and non-integral indices are treated as out of range.
        """
        if not _is_int(index) or index < 0 or index >= self._size:
            return None
        return self._data[(self._head + int(index)) % len(self._data)]

    def values(self) -> List[T]:
        """Snapshot of the window contents, oldest first."""
        cap = len(self._data)
        head = self._head
        return [self._data[(head + i) % cap] for i in range(self._size)]  # type: ignore[misc]

    def clear(self) -> "SlidingWindow[T]":
        """Empty the window. Capacity is kept."""
        self._data = [None] * len(self._data)
        self._head = 0
        self._size = 0
        return self

    def push(self, *items: T) -> "SlidingWindow[T]":
        """Append ``items`` at the newest end, in argument order."""
        for item in items:
            self._ensure_capacity_for(1)
            tail = (self._head + self._size) % len(self._data)
            self._data[tail] = item
            self._size += 1
        return self

    def shift(self) -> Optional[T]:
        """Remove and return the oldest element."""
        if self._size == 0:
            return None

        idx = self._head
        value = self._data[idx]
        self._data[idx] = None
        self._head = (idx + 1) % len(self._data)
        self._size -= 1

        if self._size == 0:
            self._head = 0
        return value

    def pop(self) -> Optional[T]:
        """Remove and return the newest element."""
        if self._size == 0:
            return None

        idx = (self._head + self._size - 1) % len(self._data)
        value = self._data[idx]
        self._data[idx] = None
        self._size -= 1

        if self._size == 0:
            self._head = 0
        return value

    def slide(self, item: T) -> Optional[T]:
        """Evict the oldest element and admit ``item`` as the newest.

        On an empty window this is a plain push and returns ``None``, so the
        first call seeds the window with one element.
        """
        if self._size == 0:
            self.push(item)
            return None

        cap = len(self._data)
        idx = self._head
        old = self._data[idx]
        self._data[idx] = None
        self._head = (idx + 1) % cap
        # Same slot as the evicted one when size == capacity.
        self._data[(self._head + self._size - 1) % cap] = item
        return old

    def _ensure_capacity_for(self, additions: int) -> None:
        required = self._size + additions
        cap = len(self._data)
        if required <= cap:
            return

        new_cap = cap * 2
        while new_cap < required:
            new_cap *= 2

        resized: List[Optional[T]] = [None] * new_cap
        for i in range(self._size):
            resized[i] = self._data[(self._head + i) % cap]

        self._data = resized
        self._head = 0
        log_event(logger, "window_grown", level=logging.DEBUG, old_capacity=cap, new_capacity=new_cap, size=self._size)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return iter(self.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SlidingWindow):
            return NotImplemented
        return self.values() == other.values()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.values()!r}, capacity={len(self._data)})"
