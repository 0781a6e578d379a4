from __future__ import annotations

from collections.abc import Sequence

from build_annotator.core.constants import BuildResult
from build_annotator.core.exceptions import DescriptionWriteError
from build_annotator.core.types import Cause
from build_annotator.host.base import Build


class InMemoryBuild(Build):
    """In-memory build record for hosts without a real engine, and for testing.

    Usage::

        build = InMemoryBuild(
            job="nightly",
            number=12,
            causes=[Cause(kind=CauseKind.USER, user_name="alice")],
            description="nightly run",
        )
        registry.run_post_build(build)
        build.finalize()

        assert build.description_writes == ["Started by user alice\\nnightly run"]
    """

    def __init__(
        self,
        job: str = "job",
        number: int = 1,
        *,
        result: BuildResult = BuildResult.SUCCESS,
        causes: Sequence[Cause] | None = None,
        description: str | None = None,
    ) -> None:
        self.job = job
        self._number = number
        self._result = result
        self._causes = list(causes or [])
        self._description = description
        self._finalized = False
        self.description_writes: list[str] = []

    def __repr__(self) -> str:
        return f"InMemoryBuild(job={self.job!r}, number={self._number})"

    @property
    def number(self) -> int:
        return self._number

    @property
    def result(self) -> BuildResult:
        return self._result

    @property
    def finalized(self) -> bool:
        return self._finalized

    def finalize(self) -> None:
        """Close the record; later description writes are rejected."""
        self._finalized = True

    def get_causes(self) -> list[Cause]:
        return list(self._causes)

    def get_description(self) -> str | None:
        return self._description

    def set_description(self, description: str) -> None:
        if self._finalized:
            raise DescriptionWriteError(
                f"Build {self.job}#{self._number} is finalized",
                code="ERR_FINALIZED",
                details={"job": self.job, "number": self._number},
            )
        self.description_writes.append(description)
        self._description = description
