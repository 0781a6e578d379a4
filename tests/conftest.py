"""Shared test fixtures."""
from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from build_annotator.core.constants import CauseKind
from build_annotator.core.types import Cause
from build_annotator.host.memory import InMemoryBuild


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


@pytest.fixture
def alice() -> Cause:
    return Cause(kind=CauseKind.USER, user_id="alice", user_name="alice")


@pytest.fixture
def build(alice: Cause) -> InMemoryBuild:
    return InMemoryBuild(job="nightly", number=12, causes=[alice])
