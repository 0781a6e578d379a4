"""Registration table for post-build steps."""
from __future__ import annotations

from typing import Any

import structlog

from build_annotator.core.config import AnnotationConfig
from build_annotator.host.base import BuildProtocol
from build_annotator.plugins.base import BuildHook, PostBuildStep, StepMetadata
from build_annotator.plugins.hooks import HookManager

logger = structlog.get_logger(__name__)


class StepRegistry:
    """Explicit table of the post-build steps a host runs.

    Steps are added with :meth:`register`; nothing is discovered implicitly.
    """

    def __init__(self) -> None:
        self._steps: dict[str, PostBuildStep] = {}
        self._hooks = HookManager()

    def register(self, step: PostBuildStep) -> None:
        """Register a step and wire its hooks.

        Calls :meth:`PostBuildStep.setup` before wiring hooks so the step can
        initialise resources.

        Raises:
            ValueError: If a step with the same name is already registered.
        """
        meta = step.metadata()
        if meta.name in self._steps:
            raise ValueError(f"Step '{meta.name}' already registered")
        step.setup()
        for hook, handler in step.hooks().items():
            self._hooks.register(hook, handler)
        self._steps[meta.name] = step
        logger.info("step_registered", step=meta.name, version=meta.version)

    def unregister(self, name: str) -> None:
        """Unregister a step by name, removing its hooks and calling its teardown.

        Raises:
            KeyError: If no step with the given name is registered.
        """
        if name not in self._steps:
            raise KeyError(f"Step '{name}' not registered")
        step = self._steps.pop(name)
        for hook, handler in step.hooks().items():
            try:
                self._hooks.unregister(hook, handler)
            except ValueError:
                pass  # already removed
        step.teardown()
        logger.info("step_unregistered", step=name)

    def get(self, name: str) -> PostBuildStep | None:
        return self._steps.get(name)

    def list_steps(self) -> list[StepMetadata]:
        """Return metadata for all registered steps."""
        return [step.metadata() for step in self._steps.values()]

    def run_post_build(self, build: BuildProtocol) -> list[Any]:
        """Run every post-build handler once against *build*."""
        return self._hooks.dispatch(BuildHook.POST_BUILD, build=build)

    @property
    def hooks(self) -> HookManager:
        """Access the hook manager for dispatching events."""
        return self._hooks


def default_registry(config: AnnotationConfig | None = None) -> StepRegistry:
    """Return a registry holding the annotation step configured with *config*."""
    from build_annotator.annotation.step import AnnotationStep

    registry = StepRegistry()
    registry.register(AnnotationStep(config=config or AnnotationConfig()))
    return registry
