"""FastAPI auth dependencies.

Learn: These are used as Depends() in route handlers. require_admin
depends on get_current_identity, so FastAPI always verifies the token
before the role check runs. A request without a token never reaches
the gate.

The credential comes from the x-auth-token header (what the admin UI
sends). "Authorization: Bearer <token>" is accepted as a fallback for
API clients and the CLI.
"""

from typing import Optional

import structlog
from fastapi import Depends, Header, HTTPException

from tredumo.auth.access import AuthorizationError, require_role
from tredumo.auth.jwt import (
    Identity,
    InvalidCredential,
    MissingCredential,
    verify_credential,
)

logger = structlog.get_logger()


def _extract_token(
    x_auth_token: Optional[str], authorization: Optional[str]
) -> Optional[str]:
    if x_auth_token:
        return x_auth_token
    if authorization and authorization.startswith("Bearer "):
        return authorization[7:]
    return None


async def get_current_identity(
    x_auth_token: Optional[str] = Header(None),
    authorization: Optional[str] = Header(None),
) -> Identity:
    """Verify the request's credential (required; 401 if absent or bad)."""
    token = _extract_token(x_auth_token, authorization)
    try:
        return verify_credential(token)
    except MissingCredential:
        raise HTTPException(
            status_code=401,
            detail="No token, authorization denied",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except InvalidCredential as e:
        logger.info("auth.invalid_token", reason=str(e))
        raise HTTPException(
            status_code=401,
            detail="Token is not valid",
            headers={"WWW-Authenticate": "Bearer"},
        )


async def require_admin(
    identity: Identity = Depends(get_current_identity),
) -> Identity:
    """Verified identity with role=admin (403 otherwise)."""
    try:
        require_role(identity, "admin")
    except AuthorizationError as e:
        logger.info("auth.forbidden", user_id=identity.id, role=identity.role)
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return identity
