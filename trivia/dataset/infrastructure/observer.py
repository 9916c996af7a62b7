"""Structlog implementation of the DatasetObserver port."""

import structlog


class StructlogDatasetObserver:
    """Delegates dataset domain events to structlog.

    Satisfies the DatasetObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def dataset_loading_started(self, path: str) -> None:
        self._log.info("dataset.loading_started", path=path)

    def dataset_format_detected(self, path: str, source_format: str) -> None:
        self._log.debug(
            "dataset.format_detected", path=path, source_format=source_format
        )

    def dataset_record_loaded(
        self, index: int, prompt: str, expected_answer: str
    ) -> None:
        self._log.debug(
            "dataset.record_loaded",
            index=index,
            prompt=prompt,
            expected_answer=expected_answer,
        )

    def dataset_loading_completed(
        self, path: str, total_records: int, sha256: str
    ) -> None:
        self._log.info(
            "dataset.loading_completed",
            path=path,
            total_records=total_records,
            sha256=sha256,
        )

    def dataset_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("dataset.loading_failed", path=path, reason=reason)
