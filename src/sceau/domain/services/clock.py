"""
Millisecond wall clock used for session issuance and expiry checks.
"""

import time
from typing import Callable

Clock = Callable[[], int]


def now_ms() -> int:
    """Current time in milliseconds since epoch."""
    return int(time.time() * 1000)
