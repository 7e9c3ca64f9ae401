"""Typed exception hierarchy for the content API client.

All exceptions inherit from ContentAPIError so callers can catch everything
raised by this library in one place. Transport failures are grouped under
TransportError and are passed through the client unchanged.
"""

from typing import Optional


class ContentAPIError(Exception):
    """Base exception for all content API client errors."""
    pass


class InvalidURLError(ContentAPIError):
    """Raised when an endpoint URL cannot be built from the API root."""

    def __init__(self, url: str, reason: Optional[str] = None):
        message = f"Invalid endpoint URL: {url}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.url = url
        self.reason = reason


class EncodingError(ContentAPIError):
    """Raised when an entity cannot be serialized to a request body."""

    def __init__(self, message: str):
        super().__init__(message)


class DecodingError(ContentAPIError):
    """Raised when a response body cannot be decoded into the expected shape."""

    def __init__(self, message: str):
        super().__init__(message)


class TransferError(ContentAPIError):
    """Raised when an opened attachment file cannot be copied into the body."""

    def __init__(self, file_path: str, reason: Optional[str] = None):
        message = f"Failed to read attachment {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.reason = reason


class ConfigError(ContentAPIError):
    """Raised when client configuration is missing or invalid."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message


class TransportError(ContentAPIError):
    """Base exception for failures reported by the HTTP transport."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class InvalidCredentialsError(TransportError):
    """Raised when the server rejects the configured credentials."""

    def __init__(self, user: str, endpoint: str, status_code: int = 401):
        super().__init__(
            f"API key is invalid (user: {user}, endpoint: {endpoint})",
            status_code=status_code,
        )
        self.user = user
        self.endpoint = endpoint


class ContentNotFoundError(TransportError):
    """Raised when the requested content does not exist."""

    def __init__(self, content_id: str):
        super().__init__(f"Content {content_id} not found", status_code=404)
        self.content_id = content_id


class APIUnreachableError(TransportError):
    """Raised when the API cannot be reached (timeout, refused connection)."""

    def __init__(self, endpoint: str):
        super().__init__(f"API is not available at {endpoint}")
        self.endpoint = endpoint


class APIAccessError(TransportError):
    """Raised for any other non-success response from the API."""

    def __init__(self, message: str = "Confluence API failure", status_code: Optional[int] = None):
        super().__init__(message, status_code=status_code)
