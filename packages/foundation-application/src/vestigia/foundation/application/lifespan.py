"""Lifespan composition for worker processes.

Composes multiple :class:`~vestigia.foundation.application.LifespanContribution`
hooks into a single async context manager.
"""

from __future__ import annotations

import logging
from contextlib import AsyncExitStack, asynccontextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable
    from contextlib import AbstractAsyncContextManager

    from vestigia.foundation.application.contributions import LifespanContribution

logger = logging.getLogger(__name__)


def compose_lifespan(
    hooks: list[LifespanContribution],
) -> Callable[[Any], AbstractAsyncContextManager[None]]:
    """Create a composite lifespan from ordered :class:`LifespanContribution` hooks.

    Hooks are sorted by priority (ascending). Lower priority hooks start first
    and shut down last (stack semantics via :class:`AsyncExitStack`).

    Args:
        hooks: List of LifespanContribution instances.

    Returns:
        An async context manager factory taking the host object (a taskiq
        state, an application, or ``None``).
    """
    sorted_hooks = sorted(hooks, key=lambda h: h.priority)

    @asynccontextmanager
    async def lifespan(app: Any) -> AsyncIterator[None]:
        async with AsyncExitStack() as stack:
            for hook_contrib in sorted_hooks:
                logger.info(
                    "Entering lifespan hook (priority=%d): %r",
                    hook_contrib.priority,
                    hook_contrib.hook,
                )
                ctx = hook_contrib.hook(app)
                await stack.enter_async_context(ctx)
            yield

    return lifespan
