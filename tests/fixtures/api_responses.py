"""Canned content API payloads for testing.

Shapes follow the Confluence REST API v1 ``/rest/api/content`` resource.
"""

from typing import Any, Dict, List

API_ROOT = "https://test.atlassian.net/wiki/rest/api"

CONTENT_PAGE: Dict[str, Any] = {
    "id": "123456",
    "type": "page",
    "status": "current",
    "title": "Test Page",
    "body": {
        "storage": {
            "value": "<p>Hello</p>",
            "representation": "storage",
            "embeddedContent": [],
        },
        "_expandable": {"view": ""},
    },
    "version": {"number": 3, "minorEdit": False},
    "ancestors": [
        {"id": "100", "type": "page", "title": "Root"},
        {"id": "200", "type": "page", "title": "Parent"},
    ],
    "space": {"id": 98305, "key": "TEST", "name": "Test Space"},
    "_links": {"webui": "/spaces/TEST/pages/123456/Test+Page"},
}

CREATED_PAGE: Dict[str, Any] = {
    "id": "654321",
    "type": "page",
    "status": "current",
    "title": "Test",
    "version": {"number": 1},
    "space": {"key": "TEST"},
}


def child_page(page_id: str, title: str = "") -> Dict[str, Any]:
    """Minimal child page entry as returned in a listing window."""
    return {
        "id": page_id,
        "type": "page",
        "status": "current",
        "title": title or f"Child {page_id}",
    }


def page_window(ids: List[str], start: int, limit: int) -> Dict[str, Any]:
    """Child page listing window containing pages with ``ids``."""
    return {
        "results": [child_page(i) for i in ids],
        "start": start,
        "limit": limit,
        "size": len(ids),
        "_links": {"base": "https://test.atlassian.net/wiki"},
    }


def label_window(names: List[str], start: int, limit: int) -> Dict[str, Any]:
    """Label listing window containing labels with ``names``."""
    return {
        "results": [
            {"prefix": "global", "name": name, "id": str(1000 + n)}
            for n, name in enumerate(names, start=start)
        ],
        "start": start,
        "limit": limit,
        "size": len(names),
    }
