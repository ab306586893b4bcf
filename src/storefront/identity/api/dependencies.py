"""Caller identity for HTTP requests.

The identity provider sits in front of the storefront and forwards the
authenticated user in request headers; routes receive it as an ``Identity``
value object and hand it to the core operations.
"""

from fastapi import Header, HTTPException

from storefront.identity.authorization import Identity, identity_of


async def current_identity(
    x_user_id: str | None = Header(None),
    x_user_role: str | None = Header(None),
) -> Identity:
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Authentication required")
    return identity_of(x_user_id, x_user_role)
