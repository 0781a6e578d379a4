"""build-annotator: record what started a build in its description."""

from build_annotator.__version__ import __version__

from build_annotator.annotation.composer import DescriptionComposer
from build_annotator.annotation.resolver import CauseResolver
from build_annotator.annotation.step import AnnotationStep
from build_annotator.core.config import AnnotationConfig, AnnotatorSettings
from build_annotator.core.constants import DISPLAY_NAME, BuildResult, CauseKind, StepMonitor
from build_annotator.core.exceptions import (
    AnnotatorError,
    ConfigurationError,
    DescriptionWriteError,
)
from build_annotator.core.types import Cause, WriteIntent
from build_annotator.host.base import Build, BuildProtocol
from build_annotator.host.memory import InMemoryBuild
from build_annotator.plugins import (
    BuildHook,
    HookManager,
    PostBuildStep,
    StepMetadata,
    StepRegistry,
    default_registry,
)
from build_annotator.utils.logging import configure_logging, get_logger

__all__ = [
    "__version__",
    "DISPLAY_NAME",
    "AnnotationStep",
    "CauseResolver",
    "DescriptionComposer",
    "AnnotationConfig",
    "AnnotatorSettings",
    "BuildResult",
    "CauseKind",
    "StepMonitor",
    "AnnotatorError",
    "ConfigurationError",
    "DescriptionWriteError",
    "Cause",
    "WriteIntent",
    "Build",
    "BuildProtocol",
    "InMemoryBuild",
    "BuildHook",
    "HookManager",
    "PostBuildStep",
    "StepMetadata",
    "StepRegistry",
    "default_registry",
    "configure_logging",
    "get_logger",
]
