"""Auth API — login and current user.

Learn: Routes for the admin UI's session:
- POST /auth/login → email/password → signed token + user
- GET /auth/user → the user behind the presented token

There is no registration route: accounts are created by an operator
with `tredumo create-user`.
"""

import structlog
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from tredumo.auth.dependencies import get_current_identity
from tredumo.auth.jwt import Identity, create_access_token
from tredumo.db.engine import get_db
from tredumo.schemas.user import LoginRequest, LoginResponse, UserRead
from tredumo.services.errors import UserNotFound
from tredumo.services.user_service import UserService

logger = structlog.get_logger()

router = APIRouter(prefix="/auth")


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, db: AsyncSession = Depends(get_db)):
    """Login with email and password → token."""
    user = await UserService(db).authenticate(body.email, body.password)
    if user is None:
        logger.info("auth.login_failed", email=body.email)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    logger.info("auth.login", user_id=user.id, role=user.role)
    return LoginResponse(
        token=create_access_token(user.id, user.role),
        user=UserRead.model_validate(user),
    )


@router.get("/user", response_model=UserRead)
async def get_user(
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """Get the current authenticated user's info."""
    try:
        return await UserService(db).get_user(identity.id)
    except UserNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
