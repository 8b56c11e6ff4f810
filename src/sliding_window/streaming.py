"""Window buffering utilities for streaming pipelines."""

from __future__ import annotations

import logging
from typing import Generic, Iterable, List, Optional, TypeVar

from .config import WindowSettings
from .exceptions import InvalidArgumentError
from .logging_utils import log_event
from .window import SlidingWindow, _is_int

logger = logging.getLogger(__name__)

T = TypeVar("T")


class WindowBuffer(Generic[T]):
    """Rolling buffer that emits fixed-size windows with optional overlap."""

    def __init__(self, window_size: int, step_size: Optional[int] = None, *, initial_capacity: Optional[int] = None) -> None:
        if not _is_int(window_size) or window_size <= 0:
            raise InvalidArgumentError("window_size must be a positive integer")
        if step_size is not None and (not _is_int(step_size) or step_size <= 0):
            raise InvalidArgumentError("step_size must be a positive integer")
        self.window_size = int(window_size)
        self.step_size = int(step_size) if step_size else self.window_size
        self._buffer: SlidingWindow[T] = SlidingWindow(self.window_size if initial_capacity is None else initial_capacity)

    @classmethod
    def from_settings(cls, settings: WindowSettings) -> "WindowBuffer[T]":
        if settings.window_size is None:
            raise InvalidArgumentError("window_size is required to build a WindowBuffer")
        return cls(settings.window_size, settings.step_size, initial_capacity=settings.initial_capacity)

    def extend(self, samples: Iterable[T]) -> List[List[T]]:
        self._buffer.push(*samples)
        windows: list[list[T]] = []
        while self._buffer.size() >= self.window_size:
            windows.append([self._buffer.get(idx) for idx in range(self.window_size)])  # type: ignore[misc]
            for _ in range(self.step_size):
                if self._buffer.is_empty():
                    break
                self._buffer.shift()
        if windows:
            log_event(logger, "windows_emitted", level=logging.DEBUG, count=len(windows), pending=self._buffer.size())
        return windows

    def reset(self) -> None:
        self._buffer.clear()

    def __len__(self) -> int:
        return len(self._buffer)
