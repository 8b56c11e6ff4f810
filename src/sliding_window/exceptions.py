class SlidingWindowError(Exception):
    """Base exception for sliding window errors."""


class InvalidArgumentError(SlidingWindowError, ValueError):
    """Argument rejected at construction or configuration time."""
