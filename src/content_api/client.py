"""Content operations against the Confluence REST API.

ContentClient composes the endpoint builder, the request encoder, the
transport and the response decoder for each public operation. It holds no
state between calls apart from the API root and the transport.
"""

import logging
import re
from typing import Callable, List, Optional, Sequence, Union

import requests

from .config import load_config
from .decoder import decode_content, decode_label_result, decode_page_result
from .encoder import EncodedBody, encode_attachments, encode_json
from .endpoint import content_endpoint
from .models import Content, Label, LabelResult, PageRequest, PageResult
from .pagination import paginate
from .transport import SessionTransport, Transport

logger = logging.getLogger(__name__)

_CONTENT_ID_PATTERN = re.compile(r'^\d+$')


class ContentClient:
    """Create, read, update and delete content, labels and attachments.

    Transport, encoding and decoding errors propagate unchanged. The only
    failure that is not raised is an attachment file that cannot be opened,
    which is skipped.

    Usage:
        client = ContentClient.from_env()

        page = client.create_content(Content(
            type="page",
            title="Release notes",
            space=Space(key="TEAM"),
            body=Body(Storage(value="<p>Hello</p>", representation="storage")),
        ))
        children = client.get_child_pages(PageRequest(page, limit=50))
    """

    def __init__(self, api_root: str, transport: Transport):
        """Initialize the client.

        Args:
            api_root: Absolute REST API root (e.g., https://x.atlassian.net/wiki/rest/api)
            transport: Transport used to send every request
        """
        self.api_root = api_root
        self.transport = transport

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "ContentClient":
        """Build a client from environment configuration.

        Raises:
            ConfigError: If required configuration is missing
        """
        config = load_config(env_file)
        return cls(config.api_root, SessionTransport(config))

    def _validate_content_id(self, content_id: str) -> None:
        """Reject identifiers that are empty or not numeric.

        Identifiers become part of the URL path, so anything other than
        digits is refused before a request is built.

        Raises:
            ValueError: If content_id is not a valid numeric string
        """
        if not content_id or not str(content_id).strip():
            raise ValueError("content_id cannot be empty")
        if not _CONTENT_ID_PATTERN.match(str(content_id)):
            raise ValueError(
                f"Invalid content_id format: '{content_id}'. "
                f"Content IDs must contain only numeric characters."
            )

    def _join_expand(self, expand: Optional[Sequence[str]]) -> Optional[str]:
        """Comma-join expansion fields, rejecting a bare string.

        Raises:
            ValueError: If expand is a str instead of a sequence of field names
        """
        if isinstance(expand, str):
            raise ValueError(
                f"expand must be a list of field names, not a string: '{expand}'"
            )
        return ",".join(expand) if expand else None

    def _send(
        self,
        method: str,
        content_path: str = "",
        params: Optional[dict] = None,
        encoded: Optional[EncodedBody] = None
    ) -> bytes:
        url = content_endpoint(self.api_root, content_path, params)
        request = requests.Request(
            method,
            url,
            headers=dict(encoded.headers) if encoded else {},
            data=encoded.body if encoded else None,
        )
        return self.transport.send(request)

    def get_content(self, content_id: str, expand: Optional[Sequence[str]] = None) -> Content:
        """Fetch a single piece of content.

        Args:
            content_id: Identifier of the content
            expand: Optional fields to expand (e.g., ["body.storage", "version"])

        Returns:
            The decoded Content
        """
        self._validate_content_id(content_id)
        logger.debug(f"Fetching content: {content_id}")

        expansion = self._join_expand(expand)
        params = {"expand": expansion} if expansion else None
        content = decode_content(self._send("GET", content_id, params))

        logger.debug(f"  Fetched: {content.title} (v{content.version.number})")
        return content

    def create_content(self, content: Content) -> Content:
        """Create new content from ``content``, which must not have an id yet.

        Returns:
            The created Content as returned by the server

        Raises:
            ValueError: If content already has an id
        """
        if content.id:
            raise ValueError(
                f"Cannot create content that already has an id ({content.id})"
            )
        logger.debug(f"Creating content: {content.title}")

        encoded = encode_json(content)
        created = decode_content(self._send("POST", "", encoded=encoded))

        logger.debug(f"  Created: {created.id} (v{created.version.number})")
        return created

    def update_content(self, content: Content) -> Content:
        """Replace content with ``content``.

        ``content.version.number`` must be the new version number the
        server expects (current version + 1).

        Returns:
            The updated Content as returned by the server
        """
        self._validate_content_id(content.id)
        logger.debug(f"Updating content: {content.id} -> v{content.version.number}")

        encoded = encode_json(content)
        updated = decode_content(self._send("PUT", content.id, encoded=encoded))

        logger.debug(f"  Updated: {updated.id} (v{updated.version.number})")
        return updated

    def delete_content(self, content_id: str) -> None:
        """Delete the content with ``content_id``."""
        self._validate_content_id(content_id)
        logger.debug(f"Deleting content: {content_id}")

        self._send("DELETE", content_id)

    def add_label(self, content: Content) -> Content:
        """Add the label described by ``content.label_prefix``/``label_name``.

        ``content.id`` is the content the label is added to. See
        Content.for_label for building the payload.

        Returns:
            The server response decoded as Content
        """
        self._validate_content_id(content.id)
        logger.debug(f"Adding label '{content.label_name}' to content {content.id}")

        encoded = encode_json(content)
        return decode_content(self._send("POST", f"{content.id}/label", encoded=encoded))

    def add_attachments(self, content: Content) -> Content:
        """Upload ``content.attachments`` as attachments of ``content.id``.

        Files that cannot be opened are skipped; the rest are uploaded in
        order in a single multipart request.

        Returns:
            The server response decoded as Content

        Raises:
            TransferError: If an opened file cannot be read
        """
        self._validate_content_id(content.id)
        logger.debug(
            f"Uploading {len(content.attachments)} attachment(s) to content {content.id}"
        )

        encoded = encode_attachments(content.attachments)
        return decode_content(
            self._send("POST", f"{content.id}/child/attachment", encoded=encoded)
        )

    def get_child_pages(
        self,
        request: PageRequest,
        expand: Optional[Sequence[str]] = None
    ) -> List[Content]:
        """List every child page of ``request.content``.

        Windows of ``request.limit`` pages are fetched starting at
        ``request.start`` until a window comes back short.

        Returns:
            Child pages in server order
        """
        self._validate_content_id(request.content.id)
        logger.debug(f"Listing child pages of {request.content.id}")

        children = paginate(
            self._window_fetcher("child/page", expand, decode_page_result),
            request,
        )
        logger.debug(f"  Found {len(children)} child page(s)")
        return children

    def get_labels(
        self,
        request: PageRequest,
        expand: Optional[Sequence[str]] = None
    ) -> List[Label]:
        """List every label of ``request.content``.

        Returns:
            Labels in server order
        """
        self._validate_content_id(request.content.id)
        logger.debug(f"Listing labels of {request.content.id}")

        labels = paginate(
            self._window_fetcher("label", expand, decode_label_result),
            request,
        )
        logger.debug(f"  Found {len(labels)} label(s)")
        return labels

    def _window_fetcher(
        self,
        subresource: str,
        expand: Optional[Sequence[str]],
        decode: Callable[[bytes], Union[PageResult, LabelResult]]
    ) -> Callable[[PageRequest], Union[PageResult, LabelResult]]:
        """Return a function that fetches one listing window."""
        expansion = self._join_expand(expand)

        def _fetch(window: PageRequest):
            params = {"start": window.start, "limit": window.limit}
            if expansion:
                params["expand"] = expansion
            raw = self._send("GET", f"{window.content.id}/{subresource}", params)
            return decode(raw)

        return _fetch
