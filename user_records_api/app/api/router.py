"""
Top-level router.

Aggregates the domain routers.  User routes live under ``/example``.
"""

from fastapi import APIRouter

from .endpoints import home, users

router = APIRouter()

router.include_router(home.router, tags=["home"])
router.include_router(users.router, prefix="/example", tags=["users"])
