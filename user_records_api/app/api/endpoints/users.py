"""
User endpoints.

The paths are fixed by existing clients and keep their historical
``/example/...`` layout:

* ``GET /example/get/users/all`` lists every user.
* ``GET /example/get/user?email=...`` fetches one user.
* ``POST /example/create/user`` creates a user (201).
* ``PUT /example/update/user`` partially updates a user.

Handlers only delegate to ``UserService``; errors raised there are
turned into responses by the handlers in ``core.exceptions``.  A request
with the wrong verb is answered with 405 by the router before the body
is read.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ...schemas.user import User, UserCreate, UserUpdate
from ...services.user_service import UserService
from ..deps import get_user_service

router = APIRouter()


@router.get("/get/users/all", response_model=List[User])
async def list_users(service: UserService = Depends(get_user_service)) -> List[User]:
    """Return all stored users.  An empty store yields ``[]``."""
    return await service.list_users()


@router.get("/get/user", response_model=User)
async def get_user(
    email: Optional[str] = Query(None),
    service: UserService = Depends(get_user_service),
) -> User:
    """Return the user with the given email.

    Responds 400 if ``email`` is missing or empty and 404 if no user
    matches.
    """
    return await service.get_user(email)


@router.post("/create/user", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_in: UserCreate,
    service: UserService = Depends(get_user_service),
) -> User:
    """Create a user and echo it back.

    Responds 400 if any of ``email``, ``firstName`` or ``lastName`` is
    missing and 409 if the email is already registered.
    """
    return await service.create_user(user_in)


@router.put("/update/user", response_model=User)
async def update_user(
    user_in: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> User:
    """Update ``firstName`` and/or ``lastName`` of the user keyed by ``email``.

    Fields left out (or sent empty) keep their stored value.  Responds
    400 if ``email`` is missing or both names are empty, and 404 if no
    user matches.
    """
    return await service.update_user(user_in)
