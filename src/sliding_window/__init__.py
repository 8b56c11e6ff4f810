"""Dynamically resizable count-based sliding window."""

from importlib import metadata

from .algorithms import moving_max, moving_min, moving_sum, shortest_subarray_with_sum, window_stats
from .config import WindowSettings, load_window_settings, validate_settings
from .exceptions import InvalidArgumentError, SlidingWindowError
from .logging_utils import configure_logging, configure_logging_from_settings, log_event
from .streaming import WindowBuffer
from .window import DEFAULT_CAPACITY, SlidingWindow

try:
    __version__ = metadata.version("dynamic-sliding-window")
except metadata.PackageNotFoundError:  # pragma: no cover - fallback for source checkouts
    __version__ = "0.3.0"

__all__ = [
    "SlidingWindow",
    "DEFAULT_CAPACITY",
    "WindowBuffer",
    "WindowSettings",
    "load_window_settings",
    "validate_settings",
    "SlidingWindowError",
    "InvalidArgumentError",
    "configure_logging",
    "configure_logging_from_settings",
    "log_event",
    "shortest_subarray_with_sum",
    "moving_sum",
    "moving_max",
    "moving_min",
    "window_stats",
    "__version__",
]
