"""
Exception hierarchy for the profanity classification service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ProfanityServiceException(Exception):
    """Base exception for all profanity service errors."""

    status_code: int = 500

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


class MessageValidationError(ProfanityServiceException):
    """Raised when a classification request is rejected before any query."""

    status_code = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class UnsupportedContentTypeError(MessageValidationError):
    """Raised when the request body is not declared as JSON."""

    status_code = 406

    def __init__(self, content_type: str | None = None) -> None:
        super().__init__(
            "JSON body expected.",
            details={"content_type": content_type},
        )


class InvalidJSONError(MessageValidationError):
    """Raised when the request body cannot be parsed as a JSON object."""

    def __init__(self) -> None:
        super().__init__("Request body must be a JSON object.")


class MissingMessageError(MessageValidationError):
    """Raised when the message field is absent or empty."""

    def __init__(self) -> None:
        super().__init__("Message argument is required.", field="message")


class MessageTooShortError(MessageValidationError):
    """Raised when the message has fewer tokens than required."""

    def __init__(self, word_count: int, min_words: int) -> None:
        super().__init__(
            f"Please enter a longer text, at least {min_words} words.",
            field="message",
            details={"word_count": word_count},
        )


class MessageTooLongError(MessageValidationError):
    """Raised when the message exceeds the token or character limit."""

    def __init__(
        self,
        word_count: int,
        character_count: int,
        max_words: int,
        max_characters: int,
    ) -> None:
        super().__init__(
            f"A message can only be up to {max_words} words or {max_characters} characters.",
            field="message",
            details={"word_count": word_count, "character_count": character_count},
        )


class EmptyAfterNormalizationError(MessageValidationError):
    """Raised when whitelist filtering leaves nothing to classify."""

    def __init__(self) -> None:
        super().__init__(
            "Message only contains whitelisted words, nothing left to classify.",
            field="message",
        )


class VectorStoreError(ProfanityServiceException):
    """Raised when similarity index operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (query, upsert)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class AggregateEmptyError(ProfanityServiceException):
    """Raised when a request produced no similarity scores at all."""

    def __init__(self, chunk_count: int) -> None:
        super().__init__(
            "No similarity scores were collected for the message",
            details={"chunk_count": chunk_count},
        )


class ClassificationTimeoutError(ProfanityServiceException):
    """Raised when similarity queries exceed the request timeout."""

    status_code = 504

    def __init__(self, timeout_seconds: float) -> None:
        super().__init__(
            "Classification timed out.",
            details={"timeout_seconds": timeout_seconds},
        )
