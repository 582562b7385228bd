"""Domain exception hierarchy for type-safe error handling.

Exceptions carry a machine-readable error code and structured context so
that failures reported from deletion fan-outs can be logged uniformly,
whichever backing store they came from.

Example:
    >>> from vestigia.foundation.domain.exceptions import ExternalServiceError
    >>> raise ExternalServiceError("object_storage", "bucket unreachable")
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "DeletionEnqueueError",
    "DomainError",
    "ExternalServiceError",
    "ValidationError",
]


class DomainError(Exception):
    """Base class for all domain errors.

    Attributes:
        error_code: Machine-readable error code.
        message: Human-readable error description.
        context: Structured debugging information (domain, workspace_id, ...).

    Example:
        >>> raise DomainError("Operation failed", context={"domain": "go.example"})
        DomainError: Operation failed (domain=go.example)
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize domain error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class ValidationError(DomainError):
    """Raised when input fails domain validation rules.

    Attributes:
        error_code: "VALIDATION_ERROR" (class constant).
        field: Field path that failed validation.
        reason: Human-readable validation failure reason.

    Example:
        >>> raise ValidationError("domain", "Domain name must not be empty")
        ValidationError: Validation failed for 'domain': Domain name must not be empty
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        field: str,
        reason: str,
        **extra_context: Any,
    ) -> None:
        """Initialize validation error.

        Args:
            field: Field path that failed validation.
            reason: Human-readable validation failure reason.
            **extra_context: Additional debugging context.
        """
        self.field = field
        self.reason = reason
        message = f"Validation failed for '{field}': {reason}"
        context = {
            "field": field,
            "reason": reason,
            **extra_context,
        }
        super().__init__(message, context)


class ExternalServiceError(DomainError):
    """Raised when a call to a remote store or provider fails.

    Adapters translate client-library failures (HTTP status errors, SDK
    errors) into this type, chaining the original cause.

    Attributes:
        error_code: "EXTERNAL_SERVICE_ERROR" (class constant).
        service: Name of the remote collaborator (e.g. "hosting_provider").
        reason: Human-readable failure reason.

    Example:
        >>> raise ExternalServiceError("analytics", "HTTP 503", domain="go.example")
        ExternalServiceError: analytics call failed: HTTP 503 (service=analytics, ...)
    """

    error_code: str = "EXTERNAL_SERVICE_ERROR"

    def __init__(self, service: str, reason: str, **extra_context: Any) -> None:
        self.service = service
        self.reason = reason
        message = f"{service} call failed: {reason}"
        context = {"service": service, "reason": reason, **extra_context}
        super().__init__(message, context)


class DeletionEnqueueError(DomainError):
    """Raised when the scheduler rejects a deferred deletion job.

    The domain stays in its current intermediate state; a later run or an
    external sweep picks it up again.

    Attributes:
        error_code: "DELETION_ENQUEUE_FAILED" (class constant).
        domain: Domain whose cleanup could not be scheduled.
        workspace_id: Owning workspace carried by the job.
    """

    error_code: str = "DELETION_ENQUEUE_FAILED"

    def __init__(self, domain: str, workspace_id: str, reason: str = "") -> None:
        self.domain = domain
        self.workspace_id = workspace_id
        message = f"Failed to enqueue deletion of '{domain}'"
        context: dict[str, Any] = {"domain": domain, "workspace_id": workspace_id}
        if reason:
            context["reason"] = reason
        super().__init__(message, context)
