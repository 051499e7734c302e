from typing import Annotated

from fastapi import Request, Depends
from sqlalchemy.orm import Session

from common.errors import ApiException
from models.user import User
from services.auth_service import AuthService
from services.db_service import get_db
from services.socket_hub import SocketHub
from settings import Settings


async def get_settings(request: Request) -> Settings:
    """Get settings from app state"""
    return request.app.state.settings


async def get_auth_service(request: Request) -> AuthService:
    """Get auth service from app state"""
    return request.app.state.auth_service


async def get_socket_hub(request: Request) -> SocketHub:
    """Get socket hub from app state"""
    return request.app.state.socket_hub


def get_current_user(
        request: Request,
        db: Session = Depends(get_db),
        auth: AuthService = Depends(get_auth_service),
) -> User:
    """
    Verify the bearer JWT from the Authorization header and return the user
    """
    authorization = request.headers.get("Authorization")
    if not authorization or not authorization.startswith("Bearer "):
        raise ApiException(401, {"error": "Invalid authorization header"})

    user = auth.user_from_token(db, authorization)
    if user is None:
        raise ApiException(401, {"error": "Invalid authentication token"})
    return user


def get_admin_user(user: User = Depends(get_current_user)) -> User:
    """Current user, only when flagged as administrator"""
    if not user.is_admin:
        raise ApiException(403, {"error": "Administrator access required."})
    return user


# Type annotations for dependency injection
DB = Annotated[Session, Depends(get_db)]
CurrentUser = Annotated[User, Depends(get_current_user)]
AdminUser = Annotated[User, Depends(get_admin_user)]
Auth = Annotated[AuthService, Depends(get_auth_service)]
Hub = Annotated[SocketHub, Depends(get_socket_hub)]
AppSettings = Annotated[Settings, Depends(get_settings)]
