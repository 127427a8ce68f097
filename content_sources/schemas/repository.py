# This project was developed with assistance from AI tools.
"""Repository request/response schemas."""

from pydantic import BaseModel, ConfigDict, Field

from . import CollectionMetadata, NavigationLinks

DEFAULT_DISTRIBUTION_VERSION = "any"
DEFAULT_DISTRIBUTION_ARCH = "any"


class RepositoryRequest(BaseModel):
    """Create or update a repository.

    Every field is optional so the same model serves full (PUT) and partial
    (PATCH) updates. ``uuid``, ``account_id`` and ``org_id`` are read-only:
    the route overwrites them from the caller identity.
    """

    uuid: str | None = None
    name: str | None = None
    url: str | None = None
    distribution_versions: list[str] | None = None
    distribution_arch: str | None = None
    account_id: str | None = None
    org_id: str | None = None

    def fill_defaults(self) -> None:
        """Populate unset fields with their defaults (full create/update)."""
        if self.name is None:
            self.name = ""
        if self.url is None:
            self.url = ""
        if self.distribution_versions is None:
            self.distribution_versions = [DEFAULT_DISTRIBUTION_VERSION]
        if self.distribution_arch is None:
            self.distribution_arch = DEFAULT_DISTRIBUTION_ARCH


class RepositoryResponse(BaseModel):
    """Single repository response."""

    model_config = ConfigDict(from_attributes=True)

    uuid: str
    name: str
    url: str
    distribution_versions: list[str] = Field(default_factory=list)
    distribution_arch: str = DEFAULT_DISTRIBUTION_ARCH
    account_id: str | None = None
    org_id: str


class RepositoryFilter(BaseModel):
    """Optional list filters taken from the query string."""

    model_config = ConfigDict(frozen=True)

    search: str | None = None
    arch: str | None = None
    versions: tuple[str, ...] = ()


class RepositoryCollectionResponse(BaseModel):
    """Paginated list of repositories with navigation links."""

    data: list[RepositoryResponse] = Field(default_factory=list)
    meta: CollectionMetadata
    links: NavigationLinks
