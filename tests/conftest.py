"""Root pytest configuration for all tests.

This conftest applies to all test types (unit, e2e).
"""

import logging

import pytest

from tests.fixtures.api_responses import API_ROOT
from tests.helpers.fake_transport import RecordingTransport

# Keep third-party HTTP chatter out of captured test logs.
logging.getLogger("atlassian").setLevel(logging.WARNING)
logging.getLogger("urllib3").setLevel(logging.WARNING)


@pytest.fixture
def transport() -> RecordingTransport:
    """Fresh recording transport with no queued responses."""
    return RecordingTransport()


@pytest.fixture
def api_root() -> str:
    """REST API root used by unit tests."""
    return API_ROOT
