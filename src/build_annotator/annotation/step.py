"""Post-build step that writes the build trigger into the build description."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog

from build_annotator.__version__ import __version__
from build_annotator.annotation.composer import DescriptionComposer
from build_annotator.annotation.resolver import CauseResolver
from build_annotator.core.config import AnnotationConfig
from build_annotator.core.constants import DISPLAY_NAME
from build_annotator.core.exceptions import describe_error
from build_annotator.core.types import Cause, WriteIntent
from build_annotator.host.base import BuildProtocol
from build_annotator.plugins.base import PostBuildStep, StepMetadata

logger = structlog.get_logger(__name__)


class AnnotationStep(PostBuildStep):
    """Records who or what started a build as the first line of its description.

    The step is best-effort: whatever happens while reading causes or
    writing the description, :meth:`perform` reports success and the build
    result is never affected.

    Usage::

        step = AnnotationStep(enabled=True)
        step.perform(build)   # always True
    """

    name = "add-user-in-build-history"

    def __init__(
        self,
        enabled: bool = False,
        *,
        config: AnnotationConfig | None = None,
        resolver: CauseResolver | None = None,
        composer: DescriptionComposer | None = None,
    ) -> None:
        self._config = config if config is not None else AnnotationConfig(enabled=enabled)
        self._resolver = resolver or CauseResolver()
        self._composer = composer or DescriptionComposer()

    def __repr__(self) -> str:
        return f"AnnotationStep(enabled={self.enabled})"

    @property
    def config(self) -> AnnotationConfig:
        return self._config

    @property
    def enabled(self) -> bool:
        return self._config.enabled

    @property
    def display_name(self) -> str:
        """Label shown in the job's post-build configuration."""
        return DISPLAY_NAME

    def metadata(self) -> StepMetadata:
        return StepMetadata(
            name=self.name,
            display_name=DISPLAY_NAME,
            version=__version__,
            description="Prepends the build trigger to the build description.",
        )

    def run(
        self,
        config: AnnotationConfig,
        causes: Sequence[Cause],
        current_description: str | None,
    ) -> WriteIntent:
        """Decide what, if anything, to write into the build description."""
        if not config.enabled:
            logger.debug("annotation_disabled")
            return WriteIntent.no_write()

        rendered = self._resolver.resolve(causes)
        if rendered is None:
            logger.debug("annotation_skipped", cause_count=len(causes))
            return WriteIntent.no_write()

        logger.debug("annotation_resolved", description=rendered)
        return WriteIntent.write(self._composer.compose(rendered, current_description))

    def perform(self, build: BuildProtocol) -> bool:
        """Annotate *build* once. Always returns ``True``.

        ``job`` and ``number`` of the build are bound to the logging context
        for the duration of the call.
        """
        with structlog.contextvars.bound_contextvars(**_build_context(build)):
            if not self._config.enabled:
                logger.debug("annotation_disabled")
                return True

            try:
                intent = self.run(self._config, build.get_causes(), build.get_description())
                if intent.should_write:
                    build.set_description(intent.description)
                    logger.info("annotation_written")
            except Exception as exc:  # noqa: BLE001
                logger.warning(
                    "annotation_failed",
                    error_type=type(exc).__name__,
                    error=describe_error(exc),
                )
            return True


def _build_context(build: object) -> dict[str, Any]:
    context: dict[str, Any] = {}
    for field in ("job", "number"):
        try:
            value = getattr(build, field, None)
        except Exception:  # noqa: BLE001
            continue
        if isinstance(value, (str, int)):
            context[field] = value
    return context
