from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from build_annotator.core.constants import BuildResult
from build_annotator.core.types import Cause


@runtime_checkable
class BuildProtocol(Protocol):
    """Structural type for a host build record.

    Post-build steps accept this Protocol so they work with any host
    (a real engine adapter, InMemoryBuild, etc.) without importing concrete classes.
    """

    def get_causes(self) -> Sequence[Cause]: ...

    def get_description(self) -> str | None: ...

    def set_description(self, description: str) -> None: ...


class Build(ABC):
    """Abstract base for host build records handed to post-build steps."""

    @property
    @abstractmethod
    def number(self) -> int: ...

    @property
    @abstractmethod
    def result(self) -> BuildResult: ...

    @abstractmethod
    def get_causes(self) -> Sequence[Cause]:
        """Causes in the order the host recorded them; index 0 is the primary trigger."""

    @abstractmethod
    def get_description(self) -> str | None: ...

    @abstractmethod
    def set_description(self, description: str) -> None: ...
