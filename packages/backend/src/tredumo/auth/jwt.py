"""JWT credential creation and verification.

Learn: JWT (JSON Web Token) provides stateless authentication. The admin
UI stores one access token and sends it in the x-auth-token header.

The token carries the user id (as the standard "sub" claim) and the
user's role, plus "iat"/"exp". Nothing else is trusted from it.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from tredumo.config import settings
from tredumo.db.models import USER_ROLES


class TokenError(Exception):
    """Raised when credential verification fails."""


class MissingCredential(TokenError):
    """No token was presented."""


class InvalidCredential(TokenError):
    """Token is malformed, expired, or signed with another key."""


@dataclass(frozen=True)
class Identity:
    """The verified claims of a credential."""

    id: int
    role: str


def create_access_token(
    user_id: int,
    role: str,
    expires_minutes: Optional[int] = None,
) -> str:
    """Create a signed access token for a user."""
    now = datetime.now(timezone.utc)
    expires = now + timedelta(
        minutes=expires_minutes or settings.access_token_expire_minutes
    )
    payload = {
        "sub": str(user_id),
        "role": role,
        "type": "access",
        "exp": expires,
        "iat": now,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_credential(token: Optional[str]) -> Identity:
    """Verify a token and return the identity it carries.

    Raises MissingCredential when no token is given, InvalidCredential
    for anything that doesn't decode to a well-formed access token.
    """
    if not token:
        raise MissingCredential("No token presented")

    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "iat", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise InvalidCredential("Token has expired")
    except jwt.InvalidTokenError as e:
        raise InvalidCredential(f"Invalid token: {e}")

    if payload.get("type") != "access":
        raise InvalidCredential("Not an access token")

    role = payload.get("role")
    if role not in USER_ROLES:
        raise InvalidCredential(f"Unknown role: {role!r}")

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise InvalidCredential("Malformed subject claim")

    return Identity(id=user_id, role=role)
