"""
User endpoints.

Register users and list them.  Failures are reported as plain text
with a 500 status; there is no structured error body.
"""

import logging
from typing import List, Union

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from ...core.errors import StorageError, ValidationError
from ...schemas.user import UserCreate, UserCreated, UserRead
from ...services.user_service import UserService
from ..deps import parse_payload, read_payload

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=UserCreated)
async def create_user(request: Request) -> Union[UserCreated, PlainTextResponse]:
    """Register a new user from a JSON or form body ``{username}``."""
    try:
        data = parse_payload(UserCreate, await read_payload(request))
        return await UserService.create_user(data)
    except ValidationError as e:
        logger.warning("Rejected user registration: %s", e)
        return PlainTextResponse("Error creating user", status_code=500)
    except StorageError:
        logger.exception("Could not create user")
        return PlainTextResponse("Error creating user", status_code=500)


@router.get("", response_model=List[UserRead])
async def list_users() -> Union[List[UserRead], PlainTextResponse]:
    """Return every registered user as ``[{_id, username}]``."""
    try:
        return await UserService.list_users()
    except StorageError:
        logger.exception("Could not list users")
        return PlainTextResponse("Error fetching users", status_code=500)
