"""Exception hierarchy for axtract.

The walker, classifier and pattern library never raise for missing or
malformed data. These exceptions are raised by host bindings (the external
collaborators) and converted into explicit "not available" outcomes by
:class:`axtract.reader.ApplicationReader`.
"""

from typing import Any


class AxtractException(Exception):
    """Base exception for all axtract errors.

    Attributes:
        message: Human-readable error message
        error_code: Optional error code for programmatic handling
        context: Additional context information
    """

    def __init__(
        self, message: str, error_code: str | None = None, context: dict[str, Any] | None = None
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message
            error_code: Optional error code
            context: Optional context dictionary
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        """Return string representation."""
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class AccessibilityPermissionError(AxtractException):
    """The process is not trusted to query the accessibility API."""

    def __init__(self, message: str = "Accessibility permission not granted") -> None:
        super().__init__(message, error_code="PERMISSION_DENIED")


class TargetNotAvailableError(AxtractException):
    """The requested application or window is not available."""

    def __init__(
        self,
        message: str,
        *,
        bundle_id: str | None = None,
        reason: str = "WINDOW_NOT_FOUND",
    ) -> None:
        super().__init__(message, error_code=reason, context={"bundle_id": bundle_id})
        self.bundle_id = bundle_id
        self.reason = reason


class BackendUnavailableError(AxtractException):
    """A platform accessibility binding could not be loaded."""

    def __init__(self, backend: str, detail: str) -> None:
        super().__init__(
            f"Accessibility backend '{backend}' unavailable: {detail}",
            error_code="BACKEND_UNAVAILABLE",
            context={"backend": backend},
        )
        self.backend = backend
