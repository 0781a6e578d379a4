"""Trigger-cause annotation of build descriptions."""
from __future__ import annotations

from build_annotator.annotation.composer import DescriptionComposer
from build_annotator.annotation.resolver import CauseResolver
from build_annotator.annotation.step import AnnotationStep

__all__ = ["AnnotationStep", "CauseResolver", "DescriptionComposer"]
