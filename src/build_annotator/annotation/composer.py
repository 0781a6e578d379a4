from __future__ import annotations

DESCRIPTION_SEPARATOR = "\n"


class DescriptionComposer:
    """Prepends a rendered cause to a build description.

    The existing description is kept verbatim after a single newline.
    Composing twice prepends twice; the caller runs once per build.
    """

    def compose(self, rendered_cause: str | None, current: str | None) -> str:
        if rendered_cause is None:
            return current or ""
        if not current:
            return rendered_cause
        return rendered_cause + DESCRIPTION_SEPARATOR + current
