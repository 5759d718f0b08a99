"""
Business logic for recording exercises.

An exercise only references its user by identifier.  The user must
exist when the exercise is added; nothing ties the two records
together afterwards.
"""

import logging
from datetime import datetime

from ..core.dates import format_calendar_date, from_storage, to_storage
from ..core.db import get_cursor, new_object_id
from ..schemas.exercise import ExerciseCreate, ExerciseRead
from .user_service import UserService

logger = logging.getLogger(__name__)


class ExerciseService:
    """Operations on the ``exercises`` collection."""

    @classmethod
    async def add_exercise(cls, user_id: str, data: ExerciseCreate) -> ExerciseRead:
        """Record an exercise for ``user_id``.

        Looks the user up first and raises ``NotFoundError`` before
        anything is written if it does not exist.  Without an explicit
        date the current time is stored.  The response echoes the
        stored row, with the user's identifier as ``_id``.
        """
        user = await UserService.get_user(user_id)
        date = data.date if data.date is not None else datetime.now()
        exercise_id = new_object_id()
        with get_cursor() as cursor:
            cursor.execute(
                "INSERT INTO exercises (id, user_id, description, duration, date) "
                "VALUES (?, ?, ?, ?, ?)",
                (exercise_id, user.id, data.description, data.duration, to_storage(date)),
            )
            row = cursor.execute(
                "SELECT description, duration, date FROM exercises WHERE id = ?",
                (exercise_id,),
            ).fetchone()
        logger.info("Recorded exercise %s for user %s", exercise_id, user.id)
        return ExerciseRead(
            id=user.id,
            username=user.username,
            description=row["description"],
            duration=row["duration"],
            date=format_calendar_date(from_storage(row["date"])),
        )
