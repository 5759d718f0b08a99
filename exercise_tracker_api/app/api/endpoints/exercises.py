"""
Exercise endpoints.

``POST /api/users/{user_id}/exercises`` records an exercise for an
existing user.  An unknown user gives a plain-text 404; invalid input
and store failures give a plain-text 500.
"""

import logging
from typing import Union

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from ...core.errors import NotFoundError, StorageError, ValidationError
from ...schemas.exercise import ExerciseCreate, ExerciseRead
from ...services.exercise_service import ExerciseService
from ..deps import parse_payload, read_payload

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/{user_id}/exercises", response_model=ExerciseRead)
async def add_exercise(user_id: str, request: Request) -> Union[ExerciseRead, PlainTextResponse]:
    """Add an exercise from a JSON or form body ``{description, duration, date?}``."""
    try:
        data = parse_payload(ExerciseCreate, await read_payload(request))
        return await ExerciseService.add_exercise(user_id, data)
    except NotFoundError:
        return PlainTextResponse("User not found", status_code=404)
    except ValidationError as e:
        logger.warning("Rejected exercise for user %s: %s", user_id, e)
        return PlainTextResponse("Error saving exercise", status_code=500)
    except StorageError:
        logger.exception("Could not save exercise for user %s", user_id)
        return PlainTextResponse("Error saving exercise", status_code=500)
