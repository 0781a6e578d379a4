"""Post-build step plugin system."""
from __future__ import annotations

from build_annotator.plugins.base import BuildHook, PostBuildStep, StepMetadata
from build_annotator.plugins.hooks import HookManager
from build_annotator.plugins.registry import StepRegistry, default_registry

__all__ = [
    "BuildHook",
    "PostBuildStep",
    "StepMetadata",
    "HookManager",
    "StepRegistry",
    "default_registry",
]
