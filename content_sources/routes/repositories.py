# This project was developed with assistance from AI tools.
"""Repository CRUD routes scoped to the caller's organization."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..db import get_db
from ..middleware.identity import CurrentIdentity
from ..schemas.repository import (
    RepositoryCollectionResponse,
    RepositoryFilter,
    RepositoryRequest,
    RepositoryResponse,
)
from ..services.pagination import build_collection_response, resolve_page_window
from ..services.repository import RepositoryStore, SqlRepositoryStore

router = APIRouter()


def get_repository_store(session: AsyncSession = Depends(get_db)) -> RepositoryStore:
    """FastAPI dependency: the store for this request (overridden in tests)."""
    return SqlRepositoryStore(session)


Store = Annotated[RepositoryStore, Depends(get_repository_store)]


def _parse_versions(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ()
    return tuple(v.strip() for v in raw.split(",") if v.strip())


@router.get("/", response_model=RepositoryCollectionResponse)
async def list_repositories(
    request: Request,
    identity: CurrentIdentity,
    store: Store,
    limit: str | None = Query(default=None, description="Page size (default 100)."),
    offset: str | None = Query(default=None, description="Records to skip (default 0)."),
    search: str | None = Query(default=None, description="Substring match on name or URL."),
    arch: str | None = Query(default=None, description="Distribution architecture."),
    version: str | None = Query(default=None, description="Comma-separated distribution versions."),
) -> RepositoryCollectionResponse:
    """List the organization's repositories one page at a time.

    ``limit`` and ``offset`` are taken as raw strings so malformed values
    fall back to defaults instead of failing validation.
    """
    window = resolve_page_window(limit, offset)
    filters = RepositoryFilter(search=search, arch=arch, versions=_parse_versions(version))
    repos, total = await store.list(identity.org_id, window, filters)
    return build_collection_response(request.url.path, window, total, repos)


@router.get("/{uuid}", response_model=RepositoryResponse)
async def get_repository(uuid: str, identity: CurrentIdentity, store: Store) -> RepositoryResponse:
    """Get a single repository. Returns 404 when it does not belong to the org."""
    return await store.fetch(identity.org_id, uuid)


@router.post("/", response_model=RepositoryResponse, status_code=status.HTTP_201_CREATED)
async def create_repository(
    body: RepositoryRequest,
    identity: CurrentIdentity,
    store: Store,
) -> RepositoryResponse:
    """Create a repository owned by the caller's organization."""
    body.uuid = None
    body.account_id = identity.account_number
    body.org_id = identity.org_id
    body.fill_defaults()
    return await store.create(body)


@router.put("/{uuid}", response_model=RepositoryResponse)
async def full_update_repository(
    uuid: str,
    body: RepositoryRequest,
    identity: CurrentIdentity,
    store: Store,
) -> RepositoryResponse:
    """Replace a repository; fields left out of the body are reset to defaults."""
    body.fill_defaults()
    return await store.update(identity.org_id, uuid, body)


@router.patch("/{uuid}", response_model=RepositoryResponse)
async def partial_update_repository(
    uuid: str,
    body: RepositoryRequest,
    identity: CurrentIdentity,
    store: Store,
) -> RepositoryResponse:
    """Update only the fields present in the body."""
    return await store.update(identity.org_id, uuid, body)


@router.delete("/{uuid}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_repository(uuid: str, identity: CurrentIdentity, store: Store) -> Response:
    """Delete a repository."""
    await store.delete(identity.org_id, uuid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
