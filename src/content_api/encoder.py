"""Request body encoding.

Content and Label payloads are sent as JSON. Attachment uploads are sent as
multipart/form-data with one ``file`` part per local file, plus the
``X-Atlassian-Token: no-check`` header the server requires to skip its
XSRF token check on uploads.
"""

import json
import logging
import os
from contextlib import ExitStack
from typing import Dict, Iterable, List, NamedTuple, Tuple, Union

from urllib3 import encode_multipart_formdata

from .errors import EncodingError, TransferError
from .models import Content, Label

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
ATTACHMENT_FIELD = "file"
TOKEN_BYPASS_HEADER = ("X-Atlassian-Token", "no-check")


class EncodedBody(NamedTuple):
    """A serialized request body and the headers that describe it."""
    body: bytes
    headers: Dict[str, str]


def encode_json(entity: Union[Content, Label]) -> EncodedBody:
    """Serialize a Content or Label to a JSON request body.

    Raises:
        EncodingError: If the entity cannot be serialized
    """
    try:
        body = json.dumps(entity.to_api()).encode("utf-8")
    except (TypeError, ValueError, AttributeError) as e:
        raise EncodingError(
            f"Failed to encode {type(entity).__name__}: {e}"
        ) from e
    return EncodedBody(body=body, headers={"Content-Type": JSON_CONTENT_TYPE})


def encode_attachments(paths: Iterable[str]) -> EncodedBody:
    """Build a multipart/form-data body from local files.

    Files that cannot be opened are skipped with a warning. Every opened
    file is closed before this function returns, whichever file failed.
    Part order follows ``paths``.

    Args:
        paths: Local file paths; each part is named after the file's base name

    Returns:
        EncodedBody with the multipart body, its boundary content type and
        the token bypass header

    Raises:
        TransferError: If an opened file cannot be read
    """
    parts: List[Tuple[str, Tuple[str, bytes]]] = []

    with ExitStack() as stack:
        for path in paths:
            try:
                handle = stack.enter_context(open(path, "rb"))
            except OSError as e:
                logger.warning(f"Skipping attachment {path}: {e.strerror or e}")
                continue

            try:
                data = handle.read()
            except OSError as e:
                raise TransferError(path, e.strerror or str(e)) from e

            parts.append((ATTACHMENT_FIELD, (os.path.basename(path), data)))

    body, content_type = encode_multipart_formdata(parts)
    logger.debug(f"Encoded {len(parts)} attachment(s), {len(body)} bytes")

    header_name, header_value = TOKEN_BYPASS_HEADER
    return EncodedBody(
        body=body,
        headers={"Content-Type": content_type, header_name: header_value},
    )
