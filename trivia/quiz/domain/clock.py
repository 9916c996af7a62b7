"""Clock Protocol — monotonic time source used to compute the session deadline."""

from typing import Protocol


class Clock(Protocol):
    def now(self) -> float: ...
