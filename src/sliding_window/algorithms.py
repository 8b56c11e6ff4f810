"""Two-pointer and rolling-window algorithms built on SlidingWindow."""

from __future__ import annotations

import operator
from typing import Any, Callable, List, Mapping, Sequence, Tuple

import numpy as np

from .exceptions import InvalidArgumentError
from .window import SlidingWindow, _is_int


def _check_window_size(window_size: int) -> None:
    if not _is_int(window_size) or window_size < 1:
        raise InvalidArgumentError(f"window_size must be an integer >= 1 (got {window_size!r})")


def shortest_subarray_with_sum(values: Sequence[float], target: float) -> int:
    """Length of the shortest contiguous run whose sum is at least ``target``.

    Assumes non-negative values, so the running sum only grows as the right
    edge advances and only shrinks as the left edge does. Returns 0 when no
    run qualifies. A ``target <= 0`` is met by any single value, so the result
    is 1 for non-empty input and 0 for empty input.
    """

    window: SlidingWindow[float] = SlidingWindow()
    total = 0.0
    best = 0
    for value in values:
        window.push(value)
        total += value
        while not window.is_empty() and total >= target:
            if best == 0 or window.size() < best:
                best = window.size()
            total -= window.shift()  # type: ignore[operator]
    return best


def moving_sum(values: Sequence[float], window_size: int) -> List[float]:
    """Sum of every full window of ``window_size`` consecutive values."""

    _check_window_size(window_size)
    window: SlidingWindow[float] = SlidingWindow(window_size)
    total = 0
    sums: list[float] = []
    for value in values:
        if window.size() < window_size:
            window.push(value)
            total += value
        else:
            total += value - window.slide(value)  # type: ignore[operator]
        if window.size() == window_size:
            sums.append(total)
    return sums


def _moving_extreme(
    values: Sequence[Any], window_size: int, dominates: Callable[[Any, Any], bool]
) -> List[Any]:
    _check_window_size(window_size)
    # (index, value) pairs; values are monotonic from oldest to newest.
    queue: SlidingWindow[Tuple[int, Any]] = SlidingWindow()
    result: list[Any] = []
    for idx, value in enumerate(values):
        while not queue.is_empty() and not dominates(queue.newest()[1], value):  # type: ignore[index]
            queue.pop()
        queue.push((idx, value))
        if queue.oldest()[0] <= idx - window_size:  # type: ignore[index]
            queue.shift()
        if idx >= window_size - 1:
            result.append(queue.oldest()[1])  # type: ignore[index]
    return result


def moving_max(values: Sequence[Any], window_size: int) -> List[Any]:
    """Maximum of every full window, in O(n) via a monotonic queue."""

    return _moving_extreme(values, window_size, operator.gt)


def moving_min(values: Sequence[Any], window_size: int) -> List[Any]:
    """Minimum of every full window, in O(n) via a monotonic queue."""

    return _moving_extreme(values, window_size, operator.lt)


def window_stats(window: SlidingWindow[float]) -> Mapping[str, float]:
    """Compute basic descriptive statistics for the current window contents."""

    if window.is_empty():
        return {"mean": 0.0, "std": 0.0, "min": 0.0, "max": 0.0}

    arr = np.asarray(window.values(), dtype=float)
    return {
        "mean": float(np.mean(arr)),
        "std": float(np.std(arr)),
        "min": float(np.min(arr)),
        "max": float(np.max(arr)),
    }
