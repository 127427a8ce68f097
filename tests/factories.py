# This project was developed with assistance from AI tools.
"""Shared test factory functions for identities, repositories and store rows."""

import base64
import json

from content_sources.core.config import settings

MOCK_ACCOUNT_NUMBER = "0000"
MOCK_ORG_ID = "1111"

REPOSITORIES_PATH = f"{settings.API_PREFIX}/repositories/"


def encoded_identity(org_id=MOCK_ORG_ID, account_number=MOCK_ACCOUNT_NUMBER) -> str:
    """Base64 JSON identity header as the platform gateway would send it."""
    payload = {
        "identity": {
            "account_number": account_number,
            "internal": {"org_id": org_id},
        }
    }
    return base64.b64encode(json.dumps(payload).encode()).decode()


def make_repo(index=0, org_id=MOCK_ORG_ID):
    """Create a RepositoryResponse numbered ``index``."""
    from content_sources.schemas.repository import RepositoryResponse

    return RepositoryResponse(
        uuid=str(index),
        name=f"repo_{index}",
        url=f"http://repo-{index}.com",
        distribution_versions=["1"],
        distribution_arch="x86_64",
        account_id=MOCK_ACCOUNT_NUMBER,
        org_id=org_id,
    )


def make_repos(size, start=0):
    """Create ``size`` consecutive repositories starting at ``start``."""
    return [make_repo(i) for i in range(start, start + size)]


def make_row(
    uuid="abcadaba",
    name="my repo",
    url="https://example.com",
    distribution_versions=None,
    distribution_arch="x86_64",
    account_id=MOCK_ACCOUNT_NUMBER,
    org_id=MOCK_ORG_ID,
):
    """Create a transient RepositoryConfiguration ORM object."""
    from content_sources.db import RepositoryConfiguration

    return RepositoryConfiguration(
        uuid=uuid,
        name=name,
        url=url,
        distribution_versions=distribution_versions or ["8"],
        distribution_arch=distribution_arch,
        account_id=account_id,
        org_id=org_id,
    )
