"""Endpoint URL construction for the content resource."""

from typing import Any, Mapping, Optional
from urllib.parse import urlsplit

from requests.exceptions import InvalidURL, MissingSchema
from requests.models import PreparedRequest

from .errors import InvalidURLError

CONTENT_PATH = "/content/"


def content_endpoint(
    api_root: str,
    content_path: str = "",
    params: Optional[Mapping[str, Any]] = None
) -> str:
    """Build the absolute URL of a content resource.

    The URL is ``api_root + "/content/" + content_path`` followed by the
    encoded query parameters, if any. ``content_path`` may be empty (the
    collection itself), an identifier, or an identifier with a
    sub-resource such as ``"123/label"`` or ``"123/child/attachment"``.

    Args:
        api_root: Absolute REST API root (e.g., https://x.atlassian.net/wiki/rest/api)
        content_path: Identifier and optional sub-resource path
        params: Optional query parameters

    Returns:
        The absolute URL as a string

    Raises:
        InvalidURLError: If the result is not an absolute http(s) URL
    """
    url = api_root.rstrip("/") + CONTENT_PATH + content_path

    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidURLError(url, str(e)) from e
    if parts.scheme not in ("http", "https"):
        raise InvalidURLError(url, "scheme must be http or https")
    if not parts.netloc:
        raise InvalidURLError(url, "missing host")
    root_parts = urlsplit(api_root)
    if root_parts.query or root_parts.fragment:
        raise InvalidURLError(url, "API root must not carry a query or fragment")

    # requests does the IDNA host check and query encoding for us
    prepared = PreparedRequest()
    try:
        prepared.prepare_url(url, dict(params) if params else None)
    except (InvalidURL, MissingSchema) as e:
        raise InvalidURLError(url, str(e)) from e
    return prepared.url  # type: ignore[return-value]
