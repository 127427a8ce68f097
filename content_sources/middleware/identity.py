# This project was developed with assistance from AI tools.
"""
Caller identity from the ``x-rh-identity`` header.

The header is base64-encoded JSON produced by the platform gateway. It is
decoded here but not verified; the gateway is trusted to have authenticated
the caller. The organization id it carries is the tenant for every store call.
"""

import base64
import binascii
import json
import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from pydantic import ValidationError

from ..core.logging import org_id_var
from ..schemas.identity import XRHID

logger = logging.getLogger(__name__)

IDENTITY_HEADER = "x-rh-identity"


def decode_identity(raw: str) -> XRHID:
    """Decode a base64 JSON identity header. Raises ValueError when malformed."""
    try:
        decoded = base64.b64decode(raw, validate=True)
        payload = json.loads(decoded)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError("Identity header is not base64-encoded JSON") from exc

    try:
        identity = XRHID.model_validate(payload)
    except ValidationError as exc:
        raise ValueError("Identity header is missing the identity object") from exc

    if not identity.org_id:
        raise ValueError("Identity header is missing org_id")
    return identity


async def get_identity(request: Request) -> XRHID:
    """FastAPI dependency: decode the identity header or fail with 400."""
    raw = request.headers.get(IDENTITY_HEADER)
    if not raw:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Missing {IDENTITY_HEADER} header",
        )

    try:
        identity = decode_identity(raw)
    except ValueError as exc:
        logger.info("Rejected identity header: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc

    org_id_var.set(identity.org_id)
    return identity


# Type alias for use in route signatures
CurrentIdentity = Annotated[XRHID, Depends(get_identity)]
