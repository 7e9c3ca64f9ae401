"""Response body decoding.

Each decode call either returns a fully built model or raises
DecodingError; nothing is partially decoded.
"""

import json
from typing import Any, Callable, TypeVar

from .errors import DecodingError
from .models import Content, LabelResult, PageResult

T = TypeVar('T')


def _decode(raw: bytes, build: Callable[[Any], T], shape: str) -> T:
    try:
        data = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as e:
        raise DecodingError(f"Response is not valid JSON ({shape}): {e}") from e

    try:
        return build(data)
    except (TypeError, AttributeError, RecursionError) as e:
        raise DecodingError(f"Response does not match {shape} shape: {e}") from e


def decode_content(raw: bytes) -> Content:
    """Decode a single content entity."""
    return _decode(raw, Content.from_api, "content")


def decode_page_result(raw: bytes) -> PageResult:
    """Decode one window of a child-page listing."""
    return _decode(raw, PageResult.from_api, "page result")


def decode_label_result(raw: bytes) -> LabelResult:
    """Decode one window of a label listing."""
    return _decode(raw, LabelResult.from_api, "label result")
