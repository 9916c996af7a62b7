"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_file_loaded(self, path: str, keys: list[str]) -> None: ...

    def config_resolved(
        self,
        path: str,
        separator: str,
        duration_seconds: int,
        timed: bool,
        log_format: str,
    ) -> None: ...
