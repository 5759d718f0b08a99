"""
Top-level API router.

Aggregates the endpoint routers.  Everything here is mounted under
``/api`` by ``create_app``; the exercise and log routes share the
``/users`` prefix because they are addressed through a user.
"""

from fastapi import APIRouter

from .endpoints import exercises, logs, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(exercises.router, prefix="/users", tags=["exercises"])
router.include_router(logs.router, prefix="/users", tags=["logs"])
