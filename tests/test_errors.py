# This project was developed with assistance from AI tools.
"""Tests for store error classification."""

import pytest

from content_sources.services.errors import (
    INTERNAL_ERROR_DETAIL,
    RepositoryStoreError,
    StoreErrorKind,
    classify,
)


def test_not_found_maps_to_404_with_store_message():
    status_code, body = classify(RepositoryStoreError.not_found("Not found"), request_id="rid-1")
    assert status_code == 404
    assert body.status == 404
    assert body.title == "Not Found"
    assert body.detail == "Not found"
    assert body.request_id == "rid-1"


def test_bad_validation_maps_to_400_with_store_message():
    status_code, body = classify(RepositoryStoreError.bad_validation("Already exists"))
    assert status_code == 400
    assert body.title == "Bad Request"
    assert body.detail == "Already exists"


def test_internal_maps_to_500_without_leaking_message():
    err = RepositoryStoreError.internal("password authentication failed for user content")
    status_code, body = classify(err)
    assert status_code == 500
    assert body.detail == INTERNAL_ERROR_DETAIL
    assert "password" not in body.model_dump_json()


@pytest.mark.parametrize("kind", list(StoreErrorKind))
def test_every_kind_is_classified(kind):
    status_code, body = classify(RepositoryStoreError(kind, "msg"))
    assert status_code in {400, 404, 500}
    assert body.status == status_code


def test_store_error_carries_kind_and_message():
    err = RepositoryStoreError.not_found("gone")
    assert err.kind is StoreErrorKind.NOT_FOUND
    assert err.message == "gone"
    assert str(err) == "gone"
    assert "not_found" in repr(err)
