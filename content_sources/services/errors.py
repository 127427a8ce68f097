# This project was developed with assistance from AI tools.
"""Repository store errors and their mapping onto HTTP responses.

The store raises ``RepositoryStoreError`` tagged with a kind; ``classify``
is the only place a kind is turned into a status code, so the store can grow
its taxonomy without touching the routes.
"""

import enum
import logging

from fastapi import status

from ..schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "An unexpected error occurred."


class StoreErrorKind(str, enum.Enum):
    NOT_FOUND = "not_found"
    BAD_VALIDATION = "bad_validation"
    INTERNAL = "internal"


class RepositoryStoreError(Exception):
    """Raised by a repository store when an operation cannot be completed."""

    def __init__(self, kind: StoreErrorKind, message: str = "") -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    @classmethod
    def not_found(cls, message: str) -> "RepositoryStoreError":
        return cls(StoreErrorKind.NOT_FOUND, message)

    @classmethod
    def bad_validation(cls, message: str) -> "RepositoryStoreError":
        return cls(StoreErrorKind.BAD_VALIDATION, message)

    @classmethod
    def internal(cls, message: str) -> "RepositoryStoreError":
        return cls(StoreErrorKind.INTERNAL, message)

    def __repr__(self):
        return f"<RepositoryStoreError(kind={self.kind.value}, message='{self.message}')>"


_STATUS_BY_KIND = {
    StoreErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    StoreErrorKind.BAD_VALIDATION: status.HTTP_400_BAD_REQUEST,
}


def classify(err: RepositoryStoreError, request_id: str = "") -> tuple[int, ErrorResponse]:
    """Map a store error to an HTTP status and problem body.

    NOT_FOUND and BAD_VALIDATION carry the store's message to the caller.
    Anything else becomes a 500 with a generic message; the store's message
    is only logged.
    """
    status_code = _STATUS_BY_KIND.get(err.kind)
    if status_code is None:
        logger.error("Repository store failure (request_id=%s): %s", request_id, err.message)
        return status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorResponse.for_status(
            status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_DETAIL, request_id
        )

    logger.info("Repository store rejected request: %s (%s)", err.kind.value, err.message)
    return status_code, ErrorResponse.for_status(status_code, err.message, request_id)
