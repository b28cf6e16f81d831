"""
Local-credential session routes
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.api.dependencies import get_current_user, get_token_service
from storefront.config.settings import get_settings
from storefront.database.async_db import get_async_db
from storefront.models.auth import LoginRequest, User, UserCreate
from storefront.models.db.user import UserDB
from storefront.services.token_service import TokenService
from storefront.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["Auth"])
settings = get_settings()


def get_user_service(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    token_service: TokenService = Depends(get_token_service),  # noqa: B008
) -> UserService:
    return UserService(db, token_service)


@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED)
async def register(
    payload: UserCreate,
    user_service: UserService = Depends(get_user_service),  # noqa: B008
):
    """Create an account with email and password."""
    return await user_service.register(payload.name, payload.email, payload.password)


@router.post("/login", response_model=User)
async def login(
    payload: LoginRequest,
    response: Response,
    user_service: UserService = Depends(get_user_service),  # noqa: B008
):
    """
    Verify credentials and open a session.

    The session token is set as an HTTP-only cookie.
    """
    user, token = await user_service.authenticate(payload.email, payload.password)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return user


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout():
    """Close the session by clearing its cookie."""
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return response


@router.get("/me", response_model=User)
async def me(user: UserDB = Depends(get_current_user)):  # noqa: B008
    return user
