from __future__ import annotations

import os
from typing import Any, Literal

from pydantic import BaseModel, ValidationError

from build_annotator.core.exceptions import ConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class AnnotationConfig(BaseModel):
    """Per-job toggle for the annotation step.

    Persisted by the host next to the job configuration. Only declared
    fields are accepted, so nothing unintended ends up in the stored record.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    enabled: bool = False

    def to_job_config(self) -> dict[str, Any]:
        """Serialize to the plain dict the host stores with the job."""
        return self.model_dump()

    @classmethod
    def from_job_config(cls, data: dict[str, Any] | None) -> AnnotationConfig:
        """Load a config previously produced by :meth:`to_job_config`.

        ``None`` (a job that never configured the step) yields the defaults.

        Raises:
            ConfigurationError: If *data* has unknown keys or a non-boolean ``enabled``.
        """
        if data is None:
            return cls()
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid annotation job config: {exc.error_count()} error(s)",
                code="ERR_JOB_CONFIG",
                details={"errors": exc.errors(include_url=False)},
            ) from exc


class AnnotatorSettings(BaseModel):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_json: bool = True
    default_enabled: bool = False
    """Toggle state given to jobs that add the step without choosing one."""

    @classmethod
    def from_env(cls) -> AnnotatorSettings:
        """Create :class:`AnnotatorSettings` from ``BUILD_ANNOTATOR_*`` environment variables.

        Reads the following env vars (all optional):

        * ``BUILD_ANNOTATOR_LOG_LEVEL`` → ``log_level`` (``DEBUG``, ``INFO``, ``WARNING``, ``ERROR``)
        * ``BUILD_ANNOTATOR_LOG_JSON`` → ``log_json``
        * ``BUILD_ANNOTATOR_ENABLED`` → ``default_enabled``

        Boolean variables accept ``1/true/yes/on`` and ``0/false/no/off``
        (case-insensitive). Any variable that is not set or is empty is left
        at its default value.

        Raises:
            ConfigurationError: If a variable holds an unrecognised value.
        """
        kwargs: dict[str, Any] = {}

        log_level = os.environ.get("BUILD_ANNOTATOR_LOG_LEVEL")
        if log_level:
            kwargs["log_level"] = log_level.upper()

        log_json = os.environ.get("BUILD_ANNOTATOR_LOG_JSON")
        if log_json:
            kwargs["log_json"] = _parse_bool("BUILD_ANNOTATOR_LOG_JSON", log_json)

        enabled = os.environ.get("BUILD_ANNOTATOR_ENABLED")
        if enabled:
            kwargs["default_enabled"] = _parse_bool("BUILD_ANNOTATOR_ENABLED", enabled)

        try:
            return cls(**kwargs)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid annotator settings: {exc.error_count()} error(s)",
                code="ERR_SETTINGS",
                details={"errors": exc.errors(include_url=False)},
            ) from exc

    def annotation_config(self) -> AnnotationConfig:
        """Return the job config a newly configured job starts with."""
        return AnnotationConfig(enabled=self.default_enabled)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"{name} must be a boolean, got {raw!r}",
        code="ERR_SETTINGS",
        details={"variable": name, "value": raw},
    )
