"""Client library for the Confluence content REST API.

Provides typed models for content and labels, request encoding, response
decoding, pagination of child pages and labels, and the ContentClient
facade that ties them to an HTTP transport.
"""

from .client import ContentClient
from .config import ClientConfig, load_config
from .errors import (
    ContentAPIError,
    InvalidURLError,
    EncodingError,
    DecodingError,
    TransferError,
    ConfigError,
    TransportError,
    InvalidCredentialsError,
    ContentNotFoundError,
    APIUnreachableError,
    APIAccessError,
)
from .models import (
    Ancestor,
    Body,
    Content,
    Label,
    LabelResult,
    PageRequest,
    PageResult,
    Space,
    Storage,
    Version,
)
from .transport import SessionTransport, Transport

__all__ = [
    "ContentClient",
    "ClientConfig",
    "load_config",
    "SessionTransport",
    "Transport",
    "Ancestor",
    "Body",
    "Content",
    "Label",
    "LabelResult",
    "PageRequest",
    "PageResult",
    "Space",
    "Storage",
    "Version",
    "ContentAPIError",
    "InvalidURLError",
    "EncodingError",
    "DecodingError",
    "TransferError",
    "ConfigError",
    "TransportError",
    "InvalidCredentialsError",
    "ContentNotFoundError",
    "APIUnreachableError",
    "APIAccessError",
]
