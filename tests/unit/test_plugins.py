"""Tests for plugins/: registry, hooks, and step lifecycle."""
from __future__ import annotations

from typing import Any

import pytest
from structlog.testing import capture_logs

from build_annotator.annotation.step import AnnotationStep
from build_annotator.core.config import AnnotationConfig
from build_annotator.core.types import Cause
from build_annotator.host.base import BuildProtocol
from build_annotator.host.memory import InMemoryBuild
from build_annotator.plugins.base import BuildHook, PostBuildStep, StepMetadata
from build_annotator.plugins.hooks import HookManager
from build_annotator.plugins.registry import StepRegistry, default_registry


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class RecordingStep(PostBuildStep):
    """A minimal step for testing."""

    def __init__(self, name: str = "recording", version: str = "1.0.0") -> None:
        self._name = name
        self._version = version
        self.setup_called = False
        self.teardown_called = False
        self.builds: list[BuildProtocol] = []

    def metadata(self) -> StepMetadata:
        return StepMetadata(name=self._name, display_name="Recording", version=self._version)

    def perform(self, build: BuildProtocol) -> bool:
        self.builds.append(build)
        return True

    def setup(self) -> None:
        self.setup_called = True

    def teardown(self) -> None:
        self.teardown_called = True


class BrokenStep(PostBuildStep):
    """Step whose perform always raises."""

    def metadata(self) -> StepMetadata:
        return StepMetadata(name="broken", display_name="Broken")

    def perform(self, build: BuildProtocol) -> bool:
        raise RuntimeError("step exploded")


# ---------------------------------------------------------------------------
# Registry tests
# ---------------------------------------------------------------------------


def test_register_step() -> None:
    registry = StepRegistry()
    registry.register(RecordingStep())

    names = [m.name for m in registry.list_steps()]
    assert names == ["recording"]


def test_duplicate_registration_raises() -> None:
    registry = StepRegistry()
    registry.register(RecordingStep())
    with pytest.raises(ValueError, match="already registered"):
        registry.register(RecordingStep())


def test_unregister_step() -> None:
    registry = StepRegistry()
    step = RecordingStep()
    registry.register(step)
    registry.unregister("recording")

    assert registry.list_steps() == []
    assert step.teardown_called
    assert registry.run_post_build(InMemoryBuild()) == []
    assert step.builds == []


def test_unregister_nonexistent_raises() -> None:
    registry = StepRegistry()
    with pytest.raises(KeyError, match="not registered"):
        registry.unregister("nonexistent")


def test_setup_called_on_register() -> None:
    registry = StepRegistry()
    step = RecordingStep()
    assert not step.setup_called
    registry.register(step)
    assert step.setup_called


def test_get_step() -> None:
    registry = StepRegistry()
    step = RecordingStep()
    registry.register(step)
    assert registry.get("recording") is step
    assert registry.get("missing") is None


def test_run_post_build_invokes_each_step_once() -> None:
    registry = StepRegistry()
    first = RecordingStep(name="first")
    second = RecordingStep(name="second")
    registry.register(first)
    registry.register(second)
    build = InMemoryBuild()

    assert registry.run_post_build(build) == [True, True]
    assert first.builds == [build]
    assert second.builds == [build]


def test_broken_step_does_not_stop_others() -> None:
    registry = StepRegistry()
    good = RecordingStep(name="good")
    registry.register(BrokenStep())
    registry.register(good)

    with capture_logs() as logs:
        results = registry.run_post_build(InMemoryBuild())

    assert results == [None, True]
    assert len(good.builds) == 1
    errors = [e for e in logs if e["event"] == "step_hook_error"]
    assert errors[0]["hook"] == "post_build"
    assert errors[0]["error"] == "step exploded"


def test_default_registry_annotates_builds() -> None:
    registry = default_registry(AnnotationConfig(enabled=True))
    build = InMemoryBuild(causes=[Cause(short_description="Started by user alice")])

    assert registry.run_post_build(build) == [True]
    assert build.get_description() == "Started by user alice"


def test_default_registry_is_disabled_by_default() -> None:
    registry = default_registry()
    step = registry.get(AnnotationStep.name)
    assert isinstance(step, AnnotationStep)
    assert step.enabled is False


# ---------------------------------------------------------------------------
# HookManager tests
# ---------------------------------------------------------------------------


def test_hook_manager_dispatch_passes_kwargs() -> None:
    calls: list[dict[str, Any]] = []
    manager = HookManager()
    manager.register(BuildHook.POST_BUILD, lambda **kw: calls.append(kw))

    manager.dispatch(BuildHook.POST_BUILD, build="b1")
    assert calls == [{"build": "b1"}]


def test_hook_manager_unregister_unknown_raises() -> None:
    manager = HookManager()
    with pytest.raises(ValueError):
        manager.unregister(BuildHook.POST_BUILD, lambda **kw: None)


def test_hook_manager_dispatch_without_handlers() -> None:
    assert HookManager().dispatch(BuildHook.POST_BUILD, build=None) == []
