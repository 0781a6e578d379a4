from __future__ import annotations

from pydantic import BaseModel

from build_annotator.core.constants import CauseKind


class Cause(BaseModel):
    """One recorded trigger of a build.

    Causes are supplied by the host build engine in the order it recorded
    them. ``short_description`` wins when the host already rendered the
    cause; otherwise :meth:`render` builds one from ``kind`` and the
    kind-specific fields.

    Usage::

        Cause(kind=CauseKind.USER, user_name="alice").render()
        # -> "Started by user alice"
    """

    model_config = {"frozen": True}

    kind: CauseKind = CauseKind.OTHER
    short_description: str | None = None
    user_id: str | None = None
    user_name: str | None = None
    upstream_project: str | None = None
    upstream_build: int | None = None
    remote_addr: str | None = None
    note: str | None = None

    def render(self) -> str | None:
        """Return the short human-readable description, or ``None`` if there is none."""
        if self.short_description:
            return self.short_description

        if self.kind == CauseKind.USER:
            who = self.user_name or self.user_id
            return f"Started by user {who}" if who else "Started by anonymous user"
        if self.kind == CauseKind.UPSTREAM:
            if not self.upstream_project or self.upstream_build is None:
                return None
            return (
                f'Started by upstream project "{self.upstream_project}" '
                f"build number {self.upstream_build}"
            )
        if self.kind == CauseKind.REMOTE:
            if not self.remote_addr:
                return None
            text = f"Started by remote host {self.remote_addr}"
            if self.note:
                text += f" with note: {self.note}"
            return text
        if self.kind == CauseKind.TIMER:
            return "Started by timer"
        if self.kind == CauseKind.SCM:
            return "Started by an SCM change"
        return None


class WriteIntent(BaseModel):
    """Outcome of one annotation run: either leave the description alone or replace it."""

    model_config = {"frozen": True}

    description: str | None = None

    @classmethod
    def no_write(cls) -> WriteIntent:
        return cls()

    @classmethod
    def write(cls, description: str) -> WriteIntent:
        return cls(description=description)

    @property
    def should_write(self) -> bool:
        return self.description is not None
