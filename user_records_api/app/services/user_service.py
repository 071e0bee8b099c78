"""
Business logic for users.

``UserService`` implements the four user operations on top of an
injected ``UserRepository``.  It is created per request by the
``get_user_service`` dependency in ``api.deps``; no state is kept
between requests.

Concurrent updates to the same email are not ordered here: the last
write reaching the store wins.
"""

import logging
from typing import List

from ..core.exceptions import NotFoundError
from ..repositories.user_repository import UserRepository
from ..schemas.user import User, UserCreate, UserUpdate
from .validators import validate_create, validate_lookup, validate_update

logger = logging.getLogger(__name__)


class UserService:
    """Service for listing, looking up, creating and updating users."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def list_users(self) -> List[User]:
        """Return all stored users; an empty store yields an empty list."""
        return self.repository.list_all()

    async def get_user(self, email: str) -> User:
        """Return the user stored under ``email``.

        Raises ``ValidationError`` for an empty email and
        ``NotFoundError`` if no record matches.
        """
        validate_lookup(email)
        logger.debug("Looking up user %s", email)
        user = self.repository.get(email)
        if user is None:
            raise NotFoundError(email)
        return user

    async def create_user(self, data: UserCreate) -> User:
        """Persist a new user and echo it back.

        The returned record is built from the request, not re-read from
        the store.  A duplicate email raises ``ConflictError`` and
        nothing is written.
        """
        validate_create(data)
        user = User(email=data.email, first_name=data.first_name, last_name=data.last_name)
        self.repository.insert(user)
        logger.info("Created user %s", user.email)
        return user

    async def update_user(self, data: UserUpdate) -> User:
        """Apply a partial update and return the merged record.

        Empty or missing name fields keep their stored value.  The email
        always comes from the stored record.
        """
        validate_update(data)
        existing = self.repository.get(data.email)
        if existing is None:
            raise NotFoundError(data.email)
        merged = User(
            email=existing.email,
            first_name=data.first_name or existing.first_name,
            last_name=data.last_name or existing.last_name,
        )
        if not self.repository.update(merged):
            # Row disappeared between the read and the write.
            raise NotFoundError(existing.email)
        logger.info("Updated user %s", merged.email)
        return merged
