"""HTTP transport for the content API.

The client hands a complete ``requests.Request`` (method, absolute URL,
headers, body) to a Transport and gets back the raw response body. The
default SessionTransport sends it through the authenticated session of an
atlassian-python-api Confluence client and translates HTTP failures into
the TransportError hierarchy. It does not retry.
"""

import logging
import re
from typing import Optional, Protocol
from urllib.parse import urlsplit

import requests
from atlassian import Confluence
from requests.exceptions import ConnectionError, HTTPError, RequestException, Timeout

from .config import ClientConfig
from .errors import (
    APIAccessError,
    APIUnreachableError,
    ContentNotFoundError,
    InvalidCredentialsError,
    TransportError,
)

logger = logging.getLogger(__name__)

_CONTENT_ID_PATTERN = re.compile(r'/content/(\d+)')


class Transport(Protocol):
    """Sends a prepared request and returns the raw response body."""

    def send(self, request: requests.Request) -> bytes:
        ...


def sanitize_credentials(text: str) -> str:
    """Mask secrets in a message before it is logged or raised.

    Hides basic-auth user info in URLs, Authorization headers, Bearer
    tokens, password/token fields and the local part of e-mail addresses.
    """
    if not text:
        return text

    sanitized = re.sub(r'://([\w.-]+):([\w.-]+)@', r'://***:***@', text)
    sanitized = re.sub(
        r'Authorization:\s*[^\n\r]+',
        'Authorization: ***REDACTED***',
        sanitized,
        flags=re.IGNORECASE
    )
    sanitized = re.sub(
        r'Bearer\s+[^\s\n\r]+',
        'Bearer ***REDACTED***',
        sanitized,
        flags=re.IGNORECASE
    )
    sanitized = re.sub(
        r'(password|api_?token|token)["\']?\s*[:=]\s*["\']?([^"\'\s&]+)',
        r'\1=***REDACTED***',
        sanitized,
        flags=re.IGNORECASE
    )
    sanitized = re.sub(
        r'\b[\w.-]+@([\w.-]+\.[a-z]{2,})\b',
        r'***@\1',
        sanitized,
        flags=re.IGNORECASE
    )
    # Prefixed tokens (sk-*, xoxb-*) and bare tokens after "token"
    sanitized = re.sub(
        r'\b[a-zA-Z]{2,4}-[a-zA-Z0-9]{8,}\b',
        '***REDACTED***',
        sanitized
    )
    sanitized = re.sub(
        r'(with\s+token|token[:\s]+)["\']?([a-zA-Z0-9-]{8,})',
        r'\1***REDACTED***',
        sanitized,
        flags=re.IGNORECASE
    )
    return sanitized


class SessionTransport:
    """Default transport backed by an authenticated requests session.

    The Confluence client is created lazily on the first request, so
    constructing a transport never touches the network.

    Example:
        >>> transport = SessionTransport(load_config())
        >>> raw = transport.send(requests.Request("GET", url))
    """

    def __init__(self, config: ClientConfig):
        self._config = config
        self._client: Optional[Confluence] = None

    def _get_client(self) -> Confluence:
        if self._client is None:
            self._client = Confluence(
                url=self._config.url,
                username=self._config.user,
                password=self._config.api_token,
                cloud=True,
                timeout=self._config.timeout,
            )
        return self._client

    def send(self, request: requests.Request) -> bytes:
        """Send ``request`` and return the response body.

        Raises:
            InvalidCredentialsError: On 401/403
            ContentNotFoundError: On 404
            APIUnreachableError: On timeouts and connection failures
            APIAccessError: On any other failure
        """
        session = self._get_client()._session
        try:
            prepared = session.prepare_request(request)
            # Session.send alone ignores proxy and CA bundle environment variables
            settings = session.merge_environment_settings(prepared.url, {}, None, None, None)
            response = session.send(prepared, timeout=self._config.timeout, **settings)
            response.raise_for_status()
        except RequestException as e:
            raise self._translate_error(e, request) from e

        logger.debug(
            f"{request.method} {request.url} -> {response.status_code} "
            f"({len(response.content)} bytes)"
        )
        return response.content

    def _translate_error(self, exception: RequestException, request: requests.Request) -> TransportError:
        """Map a requests failure onto the TransportError hierarchy."""
        if isinstance(exception, (Timeout, ConnectionError)):
            logger.error(f"{request.method} {request.url} unreachable: {sanitize_credentials(str(exception))}")
            return APIUnreachableError(endpoint=self._config.url)

        status_code = None
        if isinstance(exception, HTTPError) and exception.response is not None:
            status_code = exception.response.status_code

        if status_code in (401, 403):
            return InvalidCredentialsError(
                user=self._config.user,
                endpoint=self._config.url,
                status_code=status_code,
            )

        if status_code == 404:
            match = _CONTENT_ID_PATTERN.search(urlsplit(request.url or "").path)
            return ContentNotFoundError(content_id=match.group(1) if match else "unknown")

        safe_error_msg = sanitize_credentials(str(exception))
        logger.error(f"API request failed: {request.method} {request.url} - {safe_error_msg}")
        if status_code is not None:
            return APIAccessError(
                f"Confluence API failure during {request.method} (HTTP {status_code})",
                status_code=status_code,
            )
        return APIAccessError(f"Confluence API failure during {request.method}")
