"""
Domain Layer Exceptions

This module defines the base exception class for the Domain Layer.
All domain-specific exceptions should inherit from DomainException.

Responsibility:
    - Base exception class for domain errors
    - Type-safe error handling across layers
    - Clear separation from framework exceptions

Architecture Notes:
    - Part of Shared Domain (used across all subdomains)
    - API Layer maps every DomainException to 400 Bad Request
    - Infrastructure Layer should not raise DomainException (use own exceptions)
"""


class DomainException(Exception):
    """
    Base exception for all domain layer errors.

    This exception serves as the root of the domain exception hierarchy.
    All domain-specific exceptions should inherit from this class to enable
    type-safe error handling in Application and API layers.

    Examples:
        >>> raise DomainException("Business rule violation")

        >>> try:
        ...     # domain operation
        ... except DomainException as e:
        ...     logger.error(f"Domain error: {e}")
    """

    def __init__(self, message: str) -> None:
        """
        Initialize domain exception with error message.

        Args:
            message: Human-readable error description
        """
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.__class__.__name__}: {self.message}"

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"{self.__class__.__name__}(message={self.message!r})"


class InvalidProjectError(DomainException):
    """
    Raised when a project update cannot be applied.

    This exception is raised when:
    - An update tries to blank a required field (name, company_name)
    - An update targets a project with a different id

    Examples:
        >>> raise InvalidProjectError("company_name cannot be empty", field_name="company_name")
    """

    def __init__(self, message: str, field_name: str | None = None) -> None:
        """
        Initialize project validation error.

        Args:
            message: Error description
            field_name: Name of field that caused error (optional)
        """
        self.field_name = field_name
        super().__init__(message)


class InvalidCallbackError(DomainException):
    """
    Raised when callback settings supplied by a caller are unusable.

    This exception is raised when:
    - callback_url is not an absolute http(s) URL
    - metadata is present but not a JSON object

    Examples:
        >>> raise InvalidCallbackError("callback_url must start with http", url="ftp://x")
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        """
        Initialize callback validation error.

        Args:
            message: Error description
            url: Offending callback URL (optional)
        """
        self.url = url
        super().__init__(message)
