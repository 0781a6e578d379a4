from __future__ import annotations

from enum import StrEnum

DISPLAY_NAME = "Insert User in Build History"


class CauseKind(StrEnum):
    USER = "user"
    UPSTREAM = "upstream"
    REMOTE = "remote"
    TIMER = "timer"
    SCM = "scm"
    OTHER = "other"


class BuildResult(StrEnum):
    SUCCESS = "success"
    UNSTABLE = "unstable"
    FAILURE = "failure"
    ABORTED = "aborted"
    NOT_BUILT = "not_built"


class StepMonitor(StrEnum):
    """How much a post-build step must wait on earlier builds of the same job."""

    NONE = "none"
