from __future__ import annotations

from frame_promptly.core.exceptions.domain_error import DomainError


class InfraError(DomainError):
    """
    Base class for failures at the persistence / invocation boundary.
    ``retryable`` tells the retry policy whether another attempt may succeed.
    """

    def __init__(self, message: str, retryable: bool = False, status_code: int | None = None):
        self.message = message
        self.retryable = retryable
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.message}{code}"


class FunctionInvocationError(InfraError):
    """Raised when a remote function fails or answers with an error payload."""


class PersistenceError(InfraError):
    """Raised when a row-store operation fails."""


class DocumentProcessingError(InfraError):
    """Raised when an uploaded document cannot be converted to text."""
