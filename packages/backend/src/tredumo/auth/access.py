"""Role-based access gate.

Pure function of (identity, role): no I/O, no side effects. The FastAPI
wiring lives in dependencies.py.
"""

from typing import Optional

from tredumo.auth.jwt import Identity


class AuthorizationError(Exception):
    """Base for gate failures. Carries the HTTP status it maps to."""

    status_code = 403


class Unauthenticated(AuthorizationError):
    status_code = 401


class Forbidden(AuthorizationError):
    status_code = 403


def require_role(identity: Optional[Identity], role: str) -> None:
    """Pass if the identity holds exactly `role`, raise otherwise."""
    if identity is None:
        raise Unauthenticated("Not authenticated")
    if identity.role != role:
        raise Forbidden(f"Access denied. {role.capitalize()} role required.")
