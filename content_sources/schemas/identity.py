# This project was developed with assistance from AI tools.
"""Caller identity carried in the ``x-rh-identity`` header."""

from pydantic import BaseModel, ConfigDict, Field


class Internal(BaseModel):
    model_config = ConfigDict(extra="ignore")

    org_id: str = ""


class Identity(BaseModel):
    model_config = ConfigDict(extra="ignore")

    account_number: str = ""
    internal: Internal = Field(default_factory=Internal)


class XRHID(BaseModel):
    """Decoded identity header: ``{"identity": {...}}``."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    identity: Identity

    @property
    def org_id(self) -> str:
        return self.identity.internal.org_id

    @property
    def account_number(self) -> str:
        return self.identity.account_number
