"""A guard that runs a callback when a scope is left."""

from __future__ import annotations

from typing import Callable, Optional


class ScopeExit:
    """Runs a callback when the ``with`` block ends, unless released."""

    def __init__(self, callback: Optional[Callable[[], None]] = None) -> None:
        self._callback = callback

    def reset(self, callback: Optional[Callable[[], None]] = None) -> None:
        """Run the current callback, if any, and replace it with ``callback``."""
        current, self._callback = self._callback, None
        if current is not None:
            current()
        self._callback = callback

    def release(self) -> None:
        """Drop the current callback without running it."""
        self._callback = None

    def __enter__(self) -> "ScopeExit":
        return self

    def __exit__(self, *args: object) -> None:
        self.reset()