"""Contribution types for composing process lifecycles.

These dataclasses describe the startup/shutdown hooks that infrastructure
packages contribute to a worker process. They are framework-agnostic (no
taskiq, no SQLAlchemy) and live in the foundation layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Recommended lifespan priority constants
LIFESPAN_PRIORITY_OBSERVABILITY = 50
LIFESPAN_PRIORITY_PERSISTENCE = 75
LIFESPAN_PRIORITY_TASKIQ = 150
LIFESPAN_PRIORITY_LINKS = 300


@dataclass(frozen=True, slots=True)
class LifespanContribution:
    """Describes a lifespan hook to be composed into a process lifecycle.

    Attributes:
        hook: An async context manager factory ``(app) -> AsyncContextManager[None]``.
        priority: Ordering priority. Lower priorities start first (and shut down last).
    """

    hook: Any  # Callable[[Any], AsyncContextManager[None]]
    priority: int = 500
