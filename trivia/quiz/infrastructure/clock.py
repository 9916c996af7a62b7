"""MonotonicClock — production Clock backed by time.monotonic."""

import time


class MonotonicClock:
    """Satisfies the Clock protocol structurally."""

    def now(self) -> float:
        return time.monotonic()
