"""FastAPI dependencies providing per-request access to the record store."""

from fastapi import Depends, Request

from ..repositories.user_repository import UserRepository
from ..services.user_service import UserService


def get_user_repository(request: Request) -> UserRepository:
    """Return the repository opened by the application on startup."""
    return request.app.state.user_repository


def get_user_service(repository: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(repository)
