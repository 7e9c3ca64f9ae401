"""Pagination over windowed list endpoints.

The server returns one window of at most ``limit`` items per request.
A window that comes back full (``size == limit``) may be followed by more
data, so the next window starting at ``start + size`` is requested; any
shorter window ends the listing.

A listing whose last window is exactly full costs one extra request,
which returns an empty window (or whatever error the server reports for
it). A full window cannot be told apart from "more data follows".
"""

import logging
from typing import Callable, Iterator, List, Protocol, Sequence, TypeVar

from .models import PageRequest

logger = logging.getLogger(__name__)

T = TypeVar('T')


class Window(Protocol[T]):
    """Shape shared by PageResult and LabelResult."""
    results: Sequence[T]
    size: int


def iter_results(
    fetch: Callable[[PageRequest], Window[T]],
    request: PageRequest
) -> Iterator[T]:
    """Yield every item of a listing, window by window, in server order.

    Args:
        fetch: Issues one list request for a window and returns the decoded envelope
        request: First window; its ``limit`` is used for every window

    Yields:
        Items in the order the server returned them
    """
    while True:
        window = fetch(request)
        logger.debug(
            f"  Window start={request.start} limit={request.limit}: "
            f"{window.size} item(s)"
        )
        yield from window.results

        if window.size > 0 and window.size == request.limit:
            request = request.next_window(window.size)
        else:
            return


def paginate(
    fetch: Callable[[PageRequest], Window[T]],
    request: PageRequest
) -> List[T]:
    """Collect every item of a listing into one list.

    Errors from ``fetch`` propagate; no partial list is returned.
    """
    return list(iter_results(fetch, request))
