"""YAML settings loader — merges a settings file with command-line overrides."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from trivia.config.domain.observer import ConfigObserver
from trivia.config.domain.settings import QuizSettings
from trivia.config.infrastructure.errors import ConfigLoadError, ConfigValidationError


class YamlSettingsLoader:
    """Loads, merges, validates, and returns QuizSettings."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(
        self,
        path: Path | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> QuizSettings:
        """
        Build QuizSettings from built-in defaults, the YAML file, then overrides.

        Override entries whose value is None are treated as not given, so an
        unset command-line option never hides a value from the file.

        Raises:
            ConfigLoadError: if path does not exist or is not valid YAML.
            ConfigValidationError: if the file is not a mapping or the merged
                values violate the QuizSettings schema.
        """
        raw: dict[str, Any] = {}
        if path is not None:
            raw = _parse_yaml(path=path)
            self._observer.config_file_loaded(
                path=str(path), keys=sorted(str(key) for key in raw)
            )

        given = {
            key: value
            for key, value in (overrides or {}).items()
            if value is not None
        }
        settings = _build_settings(merged={**raw, **given})

        self._observer.config_resolved(
            path=str(settings.path),
            separator=settings.separator,
            duration_seconds=settings.duration_seconds,
            timed=settings.timed,
            log_format=settings.log_format,
        )
        return settings


def _parse_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except OSError as exc:
        raise ConfigLoadError(path=path, reason=f"cannot read file ({exc})") from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason=f"invalid YAML ({exc})") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigValidationError(
            f"top level of {path} must be a mapping, got {type(data).__name__}"
        )
    return data


def _build_settings(merged: dict[str, Any]) -> QuizSettings:
    try:
        return QuizSettings.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
