"""Pick the primary trigger of a build and render it."""
from __future__ import annotations

from collections.abc import Sequence

import structlog

from build_annotator.core.exceptions import describe_error
from build_annotator.core.types import Cause

logger = structlog.get_logger(__name__)


class CauseResolver:
    """Renders the primary (first recorded) cause of a build.

    Only ``causes[0]`` is considered: a build has one instigator for
    annotation purposes, whether a user or an upstream system.
    """

    def resolve(self, causes: Sequence[Cause]) -> str | None:
        """Return the rendered primary cause, or ``None`` when there is nothing to render.

        Never raises. A host that hands over an unreadable cause gets
        ``None`` and a warning in the log.
        """
        try:
            if not causes:
                logger.debug("no_causes_recorded")
                return None
            primary = causes[0]
            rendered = primary.render()
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "cause_resolution_failed",
                error_type=type(exc).__name__,
                error=describe_error(exc),
            )
            return None
        if not rendered:
            logger.debug("primary_cause_has_no_description", cause_kind=_cause_kind(primary))
            return None
        return rendered


def _cause_kind(cause: object) -> str:
    try:
        return str(getattr(cause, "kind", "unknown"))
    except Exception:  # noqa: BLE001
        return "unknown"
