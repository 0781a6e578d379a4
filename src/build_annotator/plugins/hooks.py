"""Hook dispatch manager for post-build steps."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from build_annotator.core.exceptions import describe_error
from build_annotator.plugins.base import BuildHook

logger = structlog.get_logger(__name__)


class HookManager:
    """Dispatches hooks to registered handlers.

    Errors from individual handlers are logged but never propagated,
    so one faulty step cannot fail the build or skip the steps after it.
    """

    def __init__(self) -> None:
        self._hooks: dict[BuildHook, list[Callable[..., Any]]] = {
            hook: [] for hook in BuildHook
        }

    def register(self, hook: BuildHook, handler: Callable[..., Any]) -> None:
        """Register a handler for the given hook point."""
        self._hooks[hook].append(handler)

    def unregister(self, hook: BuildHook, handler: Callable[..., Any]) -> None:
        """Remove a previously registered handler.

        Raises:
            ValueError: If the handler was not registered for the given hook.
        """
        self._hooks[hook].remove(handler)

    def dispatch(self, hook: BuildHook, **kwargs: Any) -> list[Any]:
        """Call every handler for the given hook exactly once, in registration order.

        Each handler receives ``**kwargs``. A handler that raises contributes
        ``None`` to the returned list.
        """
        results: list[Any] = []
        for handler in self._hooks.get(hook, []):
            try:
                results.append(handler(**kwargs))
            except Exception as exc:  # noqa: BLE001
                logger.warning("step_hook_error", hook=hook.value, error=describe_error(exc))
                results.append(None)
        return results
