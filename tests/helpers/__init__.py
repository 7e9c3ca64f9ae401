"""Test helper modules for content API testing.

- fake_transport: In-memory transport that records requests and replays responses
"""

from .fake_transport import RecordingTransport

__all__ = [
    'RecordingTransport',
]
