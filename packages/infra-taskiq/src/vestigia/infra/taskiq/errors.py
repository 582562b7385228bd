"""TaskIQ error hierarchy for structured error handling.

Distinguishes transient failures (retryable by a later pipeline run)
from permanent ones.
"""

from __future__ import annotations


class TaskIQError(Exception):
    """Base exception for all TaskIQ infrastructure errors."""

    #: Whether this error type is considered transient (retryable).
    transient: bool = False


class TaskIQBrokerError(TaskIQError):
    """Raised when publishing a message to the broker fails.

    Typically transient: the broker may recover on retry.
    """

    transient: bool = True


class TaskIQScheduleError(TaskIQError):
    """Raised when a delayed schedule cannot be stored in the schedule source.

    Typically transient: the schedule source may recover on retry.
    """

    transient: bool = True
