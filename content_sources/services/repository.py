# This project was developed with assistance from AI tools.
"""Repository store: the contract the routes depend on and its SQL implementation.

Every operation is scoped to an organization id. Failures surface as
``RepositoryStoreError`` so the route layer never sees SQLAlchemy exceptions.
"""

import logging
import uuid as uuid_lib
from typing import Protocol

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..db import RepositoryConfiguration
from ..schemas import PageWindow
from ..schemas.repository import (
    DEFAULT_DISTRIBUTION_ARCH,
    RepositoryFilter,
    RepositoryRequest,
    RepositoryResponse,
)
from .errors import RepositoryStoreError

logger = logging.getLogger(__name__)

_READ_ONLY_FIELDS = {"uuid", "account_id", "org_id"}

# PostgreSQL rejects LIMIT/OFFSET values outside bigint.
_SQL_BIGINT_MAX = 2**63 - 1


class RepositoryStore(Protocol):
    """Operations the repository routes need from persistence."""

    async def create(self, request: RepositoryRequest) -> RepositoryResponse: ...

    async def update(self, org_id: str, uuid: str, request: RepositoryRequest) -> RepositoryResponse: ...

    async def fetch(self, org_id: str, uuid: str) -> RepositoryResponse: ...

    async def list(
        self,
        org_id: str,
        window: PageWindow,
        filters: RepositoryFilter,
    ) -> tuple[list[RepositoryResponse], int]: ...

    async def delete(self, org_id: str, uuid: str) -> None: ...


def _apply_filters(stmt, org_id: str, filters: RepositoryFilter):
    """Scope a statement to the tenant and apply the optional list filters."""
    stmt = stmt.where(RepositoryConfiguration.org_id == org_id)
    if filters.search:
        like = f"%{filters.search}%"
        stmt = stmt.where(
            or_(
                RepositoryConfiguration.name.ilike(like),
                RepositoryConfiguration.url.ilike(like),
            )
        )
    if filters.arch:
        stmt = stmt.where(RepositoryConfiguration.distribution_arch == filters.arch)
    if filters.versions:
        stmt = stmt.where(RepositoryConfiguration.distribution_versions.overlap(list(filters.versions)))
    return stmt


def _require_name_and_url(name: str | None, url: str | None) -> None:
    if not name or not url:
        raise RepositoryStoreError.bad_validation("Repository name and URL are required")


class SqlRepositoryStore:
    """RepositoryStore backed by an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _execute(self, stmt):
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.exception("Repository query failed")
            raise RepositoryStoreError.internal(str(exc)) from exc

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            raise RepositoryStoreError.bad_validation(
                "Repository with this name or URL already exists"
            ) from exc
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.exception("Repository commit failed")
            raise RepositoryStoreError.internal(str(exc)) from exc

    async def _get_row(self, org_id: str, uuid: str) -> RepositoryConfiguration:
        stmt = select(RepositoryConfiguration).where(
            RepositoryConfiguration.org_id == org_id,
            RepositoryConfiguration.uuid == uuid,
        )
        row = (await self._execute(stmt)).scalar_one_or_none()
        if row is None:
            raise RepositoryStoreError.not_found(f"Could not find repository with UUID {uuid}")
        return row

    async def create(self, request: RepositoryRequest) -> RepositoryResponse:
        if not request.org_id:
            raise RepositoryStoreError.bad_validation("Organization ID is required")

        row = RepositoryConfiguration(
            uuid=str(uuid_lib.uuid4()),
            name=request.name,
            url=request.url,
            distribution_versions=list(request.distribution_versions or []),
            distribution_arch=request.distribution_arch or DEFAULT_DISTRIBUTION_ARCH,
            account_id=request.account_id,
            org_id=request.org_id,
        )
        _require_name_and_url(row.name, row.url)

        self.session.add(row)
        await self._commit()
        logger.info("Created repository %s for org %s", row.uuid, row.org_id)
        return RepositoryResponse.model_validate(row)

    async def update(self, org_id: str, uuid: str, request: RepositoryRequest) -> RepositoryResponse:
        """Apply every non-null field of ``request`` to the stored repository.

        Callers wanting full-replace semantics fill defaults on the request
        first; a partial request only touches the fields it carries.
        """
        row = await self._get_row(org_id, uuid)
        changes = request.model_dump(exclude_none=True, exclude=_READ_ONLY_FIELDS)
        _require_name_and_url(changes.get("name", row.name), changes.get("url", row.url))
        for field, value in changes.items():
            setattr(row, field, value)

        await self._commit()
        return RepositoryResponse.model_validate(row)

    async def fetch(self, org_id: str, uuid: str) -> RepositoryResponse:
        return RepositoryResponse.model_validate(await self._get_row(org_id, uuid))

    async def list(
        self,
        org_id: str,
        window: PageWindow,
        filters: RepositoryFilter,
    ) -> tuple[list[RepositoryResponse], int]:
        """Return one page of the tenant's repositories plus the total match count."""
        count_stmt = _apply_filters(
            select(func.count()).select_from(RepositoryConfiguration), org_id, filters
        )
        total = (await self._execute(count_stmt)).scalar() or 0

        stmt = _apply_filters(select(RepositoryConfiguration), org_id, filters)
        stmt = stmt.order_by(RepositoryConfiguration.name, RepositoryConfiguration.uuid)
        stmt = stmt.offset(min(window.offset, _SQL_BIGINT_MAX))
        stmt = stmt.limit(min(window.limit, _SQL_BIGINT_MAX))
        rows = (await self._execute(stmt)).scalars().all()

        return [RepositoryResponse.model_validate(row) for row in rows], total

    async def delete(self, org_id: str, uuid: str) -> None:
        row = await self._get_row(org_id, uuid)
        await self.session.delete(row)
        await self._commit()
        logger.info("Deleted repository %s for org %s", uuid, org_id)
