# This project was developed with assistance from AI tools.
"""Shared schema components for paginated collection responses."""

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class PageWindow(BaseModel):
    """The (limit, offset) pair describing a requested page."""

    model_config = ConfigDict(frozen=True)

    limit: int = Field(default=100, ge=1)
    offset: int = Field(default=0, ge=0)


class CollectionMetadata(BaseModel):
    """Offset-based pagination metadata for list responses.

    ``count`` is the total number of matching records, not the page size.
    """

    count: int
    offset: int
    limit: int


class NavigationLinks(BaseModel):
    """Links to the first, last, next and previous pages of a collection."""

    first: str
    last: str
    next: str | None = None
    previous: str | None = None

    @model_serializer(mode="wrap")
    def omit_absent_links(self, handler):
        # next/previous are left out of the body rather than sent as null
        return {key: value for key, value in handler(self).items() if value is not None}
