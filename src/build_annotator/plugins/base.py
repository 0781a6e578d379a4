"""Base classes for post-build step plugins."""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import StrEnum
from typing import Any

from pydantic import BaseModel

from build_annotator.core.constants import StepMonitor
from build_annotator.host.base import BuildProtocol


class BuildHook(StrEnum):
    """Hook points a host exposes to build steps."""

    POST_BUILD = "post_build"


class StepMetadata(BaseModel):
    """Metadata describing a post-build step."""

    name: str
    display_name: str
    version: str = "0.1.0"
    description: str = ""


class PostBuildStep(ABC):
    """Base class for post-build steps.

    Subclass this to create a step. Implement :meth:`metadata` to identify
    the step and :meth:`perform` to do the work once per finished build,
    whatever its result.

    Optionally override :meth:`setup` / :meth:`teardown` for lifecycle management.
    """

    @abstractmethod
    def metadata(self) -> StepMetadata:
        """Return metadata describing this step."""
        ...

    @abstractmethod
    def perform(self, build: BuildProtocol) -> bool:
        """Run against a finished build. Return ``True`` to report success."""
        ...

    @property
    def required_monitor(self) -> StepMonitor:
        return StepMonitor.NONE

    def is_applicable(self, job_type: str) -> bool:
        """Whether the step can be added to jobs of *job_type*."""
        return True

    def hooks(self) -> dict[BuildHook, Callable[..., Any]]:
        """Return a mapping of hook points to handler callables."""
        return {BuildHook.POST_BUILD: self.perform}

    def setup(self) -> None:
        """Called when the step is registered. Override for initialisation logic."""

    def teardown(self) -> None:
        """Called when the step is unregistered. Override for cleanup logic."""
