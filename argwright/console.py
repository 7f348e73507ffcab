"""Console information for the standard output stream."""

from __future__ import annotations

import os
from typing import Optional

STDOUT_FILENO = 1


def get_console_width() -> Optional[int]:
    """Return the column count of the terminal on standard output, or None if unknown."""
    try:
        size = os.get_terminal_size(STDOUT_FILENO)
    except (OSError, ValueError):
        return None
    return size.columns