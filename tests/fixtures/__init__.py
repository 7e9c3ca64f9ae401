"""Test fixtures for content API tests.

This module provides:
- Canned REST payloads for content, child page and label listings
- Live test credentials (from .env.test) for E2E tests
"""

from .api_responses import (
    API_ROOT,
    CONTENT_PAGE,
    CREATED_PAGE,
    child_page,
    page_window,
    label_window,
)
from .confluence_credentials import get_test_credentials

__all__ = [
    'API_ROOT',
    'CONTENT_PAGE',
    'CREATED_PAGE',
    'child_page',
    'page_window',
    'label_window',
    'get_test_credentials',
]
