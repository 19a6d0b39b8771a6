"""
Exception hierarchy for the document Q&A service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DocQAException(Exception):
    """Base exception for all document Q&A errors."""

    retryable: bool = False

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidInputError(DocQAException):
    """Raised when a request is malformed (missing URL, empty question list)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid input error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class UnsupportedTypeError(DocQAException):
    """Raised when a downloaded document cannot be turned into text."""

    def __init__(
        self,
        message: str,
        content_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if content_type:
            details["content_type"] = content_type
        super().__init__(message, details)


class DocumentFetchError(DocQAException):
    """Raised when a document cannot be downloaded."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        retryable: bool = True,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document fetch error.

        Args:
            message: Error message
            url: Document URL that failed
            status_code: HTTP status returned by the origin, if any
            retryable: False for client errors (4xx) that will not heal on retry
            details: Additional context
        """
        details = details or {}
        if url:
            details["url"] = url
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        self.retryable = retryable
        super().__init__(message, details)


class EmbeddingError(DocQAException):
    """Raised when embedding generation fails."""

    retryable = True


class VectorIndexError(DocQAException):
    """Raised when vector index operations fail."""

    retryable = True

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        namespace: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector index error.

        Args:
            message: Error message
            operation: Operation that failed (upsert, query, delete)
            namespace: Namespace the operation targeted
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        if namespace:
            details["namespace"] = namespace
        super().__init__(message, details)


class LLMError(DocQAException):
    """Raised when the language model call fails or times out."""

    retryable = True


def is_retryable(error: BaseException) -> bool:
    """
    Decide whether a failed request may be attempted again.

    Provider failures (embedding, index, LLM, transient download errors) are
    retryable; bad input and unsupported documents are not.

    Args:
        error: Exception raised by the request pipeline

    Returns:
        bool: True if the boundary should retry
    """
    if isinstance(error, DocQAException):
        return error.retryable
    return False
