"""Pytest configuration and fixtures for E2E tests.

E2E tests run against a live Confluence instance configured in .env.test
and are skipped when that file is absent.
"""

import logging
import uuid
from typing import Generator, List

import pytest

from src.content_api.client import ContentClient
from src.content_api.errors import TransportError
from src.content_api.transport import SessionTransport
from tests.fixtures.confluence_credentials import LiveCredentials, get_test_credentials

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session")
def test_credentials() -> LiveCredentials:
    """Load live credentials, skipping the E2E suite when unavailable."""
    try:
        return get_test_credentials()
    except FileNotFoundError as e:
        pytest.skip(str(e))


@pytest.fixture(scope="session")
def content_client(test_credentials: LiveCredentials) -> ContentClient:
    """Authenticated client shared by all E2E tests."""
    config = test_credentials.config
    return ContentClient(config.api_root, SessionTransport(config))


@pytest.fixture(scope="function")
def unique_title() -> str:
    """Title that will not collide with existing pages."""
    return f"E2E Content API {uuid.uuid4().hex[:8]}"


@pytest.fixture(scope="function")
def cleanup_content(content_client: ContentClient) -> Generator[List[str], None, None]:
    """Track created content ids and delete them after the test.

    Children are appended after their parents, so ids are deleted in
    reverse order.
    """
    content_ids: List[str] = []

    try:
        yield content_ids
    finally:
        for content_id in reversed(content_ids):
            try:
                content_client.delete_content(content_id)
                logger.info(f"Cleaned up test content: {content_id}")
            except TransportError as e:
                logger.warning(f"Failed to clean up content {content_id}: {e}")
