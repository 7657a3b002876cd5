# forum/api/v1/auth.py

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from forum.core.config import Settings, get_settings
from forum.core.dependencies import get_cached_user
from forum.core.session import set_session_cookies
from forum.database import get_db
from forum.schemas.user import AuthResponse, CachedUser, UserLogin, UserRegister
from forum.services.user_service import UserService

router = APIRouter()


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register",
    description="Creates a user, opens its session and sets the session and user cookies.",
)
def register(
    user_data: UserRegister,
    response: Response,
    user_service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
):
    user, token = user_service.register(user_data)
    set_session_cookies(response, token, user, settings)
    return AuthResponse(message="User registered successfully", user=user)


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Log in",
    description="Checks email and password, reuses or issues the session and refreshes both cookies.",
)
def login(
    login_data: UserLogin,
    response: Response,
    user_service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
):
    user, token = user_service.login(login_data)
    set_session_cookies(response, token, user, settings)
    return AuthResponse(message="User logged in successfully", user=user)


@router.get(
    "/me",
    response_model=CachedUser,
    summary="Cached user",
    description="Returns the user snapshot from the user cookie without reading the database.",
)
def read_cached_user(cached_user: CachedUser = Depends(get_cached_user)):
    return cached_user
