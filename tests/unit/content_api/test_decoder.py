"""Unit tests for content_api.decoder module."""

import json

import pytest

from src.content_api.decoder import decode_content, decode_label_result, decode_page_result
from src.content_api.encoder import encode_json
from src.content_api.errors import DecodingError
from src.content_api.models import Content, Label, LabelResult, PageResult
from tests.fixtures.api_responses import CONTENT_PAGE, label_window, page_window


def as_bytes(data) -> bytes:
    return json.dumps(data).encode("utf-8")


class TestDecodeContent:
    """Test cases for decode_content."""

    def test_decodes_page(self):
        """A content payload decodes into Content."""
        content = decode_content(as_bytes(CONTENT_PAGE))

        assert isinstance(content, Content)
        assert content.id == "123456"
        assert content.version.number == 3
        assert content.space.key == "TEST"

    def test_round_trip_with_encoder(self):
        """Bytes produced by the encoder decode back to an equal Content."""
        original = Content(id="5", title="Round trip", label_name="x")
        assert decode_content(encode_json(original).body) == original

    @pytest.mark.parametrize("raw", [b"", b"{", b"<html>502 Bad Gateway</html>", b"\xff\xfe\x00"])
    def test_malformed_json_raises(self, raw):
        """Bodies that are not JSON raise DecodingError."""
        with pytest.raises(DecodingError) as exc_info:
            decode_content(raw)
        assert "not valid JSON" in str(exc_info.value)

    @pytest.mark.parametrize("raw", [
        b"[]", b'"text"', b"42", b"null", b'{"id": 7}',
        b"[" * 200000 + b"]" * 200000,
    ])
    def test_shape_mismatch_raises(self, raw):
        """JSON of the wrong shape raises DecodingError."""
        with pytest.raises(DecodingError) as exc_info:
            decode_content(raw)
        assert "content" in str(exc_info.value)

    def test_error_chains_cause(self):
        """DecodingError keeps the underlying error as its cause."""
        with pytest.raises(DecodingError) as exc_info:
            decode_content(b"{")
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestDecodeResults:
    """Test cases for the listing envelope decoders."""

    def test_decode_page_result(self):
        """A child page window decodes into PageResult."""
        result = decode_page_result(as_bytes(page_window(["1", "2", "3"], start=0, limit=3)))

        assert isinstance(result, PageResult)
        assert [c.id for c in result.results] == ["1", "2", "3"]
        assert result.size == 3

    def test_decode_label_result(self):
        """A label window decodes into LabelResult."""
        result = decode_label_result(as_bytes(label_window(["x"], start=0, limit=5)))

        assert isinstance(result, LabelResult)
        assert result.results == [Label(name="x", prefix="global", id="1000")]

    def test_content_body_is_not_an_envelope(self):
        """A single entity is rejected where an envelope is expected."""
        with pytest.raises(DecodingError):
            decode_page_result(as_bytes(CONTENT_PAGE))

    def test_bad_item_fails_whole_window(self):
        """One malformed item fails the whole decode."""
        window = page_window(["1", "2"], start=0, limit=2)
        window["results"][1]["title"] = 99

        with pytest.raises(DecodingError):
            decode_page_result(as_bytes(window))

    @pytest.mark.parametrize("field,value", [("size", "2"), ("start", "zero"), ("results", {})])
    def test_bad_envelope_fields(self, field, value):
        """Envelope fields with wrong types raise DecodingError."""
        window = page_window(["1"], start=0, limit=1)
        window[field] = value

        with pytest.raises(DecodingError):
            decode_page_result(as_bytes(window))

    def test_deeply_nested_results_raise(self):
        """Nesting past the parser's recursion limit raises DecodingError."""
        raw = b'{"results": ' + b"[" * 200000 + b"]" * 200000 + b"}"

        with pytest.raises(DecodingError):
            decode_page_result(raw)
