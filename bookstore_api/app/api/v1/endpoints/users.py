"""
User endpoints for API v1.

Registration, login and logout.  Login answers with the user envelope and
a bearer token; the token, not the process session, identifies the caller
on later requests.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from bookstore_api.app.core.errors import BookstoreError
from bookstore_api.app.core.security import create_access_token, get_current_user
from bookstore_api.app.schemas.common import Envelope
from bookstore_api.app.schemas.user import LoginResponse, SessionUser, UserCreate, UserLogin, UserRead
from bookstore_api.app.services.user_service import UserService


router = APIRouter()


@router.post(
    "/register",
    response_model=Envelope[UserRead],
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register_user(user: UserCreate) -> Envelope[UserRead]:
    """Register a user.  409 if the username or the email is taken."""
    try:
        return await UserService.register(user.username, user.email, user.password)
    except BookstoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/login", response_model=LoginResponse, summary="Log in")
async def login_user(credentials: UserLogin) -> LoginResponse:
    """Check email and password and issue an access token.

    Only the credentials are checked; the process session used by
    in-process callers is left alone, so HTTP clients never see or
    change each other's login.
    """
    user = await UserService.authenticate(credentials.email, credentials.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    token = create_access_token({"sub": user.email})
    return LoginResponse(data=user, access_token=token)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT, summary="Log out")
async def logout_user(current_user: SessionUser = Depends(get_current_user)) -> None:
    """Acknowledge a logout for the token's user.

    Tokens are stateless: the client logs out by discarding its token,
    which stays valid until it expires.  The process session is not
    touched.
    """
    logging.getLogger(__name__).info("User %s logged out", current_user.username)
    return None


@router.get("/me", response_model=Envelope[SessionUser], summary="Current user")
async def read_current_user(
    current_user: SessionUser = Depends(get_current_user),
) -> Envelope[SessionUser]:
    return Envelope[SessionUser](data=current_user)
