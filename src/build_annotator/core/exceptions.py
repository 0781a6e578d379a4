from __future__ import annotations

from typing import Any


class AnnotatorError(Exception):
    """Base exception for all build-annotator errors.

    Attributes:
        code: Optional machine-readable error code (e.g. ``"ERR_CONFIG"``).
        details: Arbitrary key/value context about the error.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class ConfigurationError(AnnotatorError): ...


class DescriptionWriteError(AnnotatorError): ...


def describe_error(exc: BaseException) -> str:
    """Return ``str(exc)``, or the exception type name when that fails."""
    try:
        return str(exc)
    except Exception:  # noqa: BLE001
        return type(exc).__name__
