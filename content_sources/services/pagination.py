# This project was developed with assistance from AI tools.
"""Page-window parsing and collection metadata/link construction.

Everything here is a pure function of its inputs so list routes can build a
stable, link-navigable envelope around whatever page the store returned.
"""

from collections.abc import Sequence

from ..schemas import CollectionMetadata, NavigationLinks, PageWindow
from ..schemas.repository import RepositoryCollectionResponse, RepositoryResponse

DEFAULT_LIMIT = 100
DEFAULT_OFFSET = 0


def _parse_int(raw: str | None, minimum: int) -> int | None:
    """Return ``raw`` as an int when it is plain ASCII digits >= ``minimum``."""
    if raw is None:
        return None
    digits = raw.strip()
    if not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    return value if value >= minimum else None


def resolve_page_window(raw_limit: str | None, raw_offset: str | None) -> PageWindow:
    """Resolve query-string limit/offset into a PageWindow.

    Missing or malformed values fall back to the defaults instead of failing
    the request. No upper bound is applied to ``limit``.
    """
    limit = _parse_int(raw_limit, minimum=1)
    offset = _parse_int(raw_offset, minimum=0)
    return PageWindow(
        limit=DEFAULT_LIMIT if limit is None else limit,
        offset=DEFAULT_OFFSET if offset is None else offset,
    )


def last_page_offset(total: int, limit: int) -> int:
    """Offset of the page holding the final record (0 for an empty set)."""
    if total <= 0:
        return 0
    return ((total - 1) // limit) * limit


def _page_link(base_url: str, limit: int, offset: int) -> str:
    return f"{base_url}?limit={limit}&offset={offset}"


def build_collection_metadata(
    base_url: str,
    window: PageWindow,
    total: int,
) -> tuple[CollectionMetadata, NavigationLinks]:
    """Compute meta and navigation links for one page of a collection.

    Args:
        base_url: Request path without its query string.
        window: The page that was requested.
        total: Number of records matching the filter across all pages.
    """
    limit, offset = window.limit, window.offset
    meta = CollectionMetadata(count=total, offset=offset, limit=limit)

    links = NavigationLinks(
        first=_page_link(base_url, limit, 0),
        last=_page_link(base_url, limit, last_page_offset(total, limit)),
        next=_page_link(base_url, limit, offset + limit) if offset + limit < total else None,
        previous=_page_link(base_url, limit, max(0, offset - limit)) if offset > 0 else None,
    )
    return meta, links


def build_collection_response(
    base_url: str,
    window: PageWindow,
    total: int,
    data: Sequence[RepositoryResponse],
) -> RepositoryCollectionResponse:
    """Wrap a page of repositories in the collection envelope."""
    meta, links = build_collection_metadata(base_url, window, total)
    return RepositoryCollectionResponse(data=list(data), meta=meta, links=links)
