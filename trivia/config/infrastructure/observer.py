"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_file_loaded(self, path: str, keys: list[str]) -> None:
        self._log.info("config.file_loaded", path=path, keys=keys)

    def config_resolved(
        self,
        path: str,
        separator: str,
        duration_seconds: int,
        timed: bool,
        log_format: str,
    ) -> None:
        self._log.debug(
            "config.resolved",
            path=path,
            separator=separator,
            duration_seconds=duration_seconds,
            timed=timed,
            log_format=log_format,
        )
