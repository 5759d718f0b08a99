"""
Exercise log queries.

A log is the list of a user's exercises, optionally restricted to an
inclusive range of calendar dates and truncated to ``limit`` entries.
Entries come back in insertion order, so a limit keeps the earliest
recorded matches.
"""

import logging
from typing import List

from ..core.dates import format_calendar_date, from_storage
from ..core.db import get_cursor
from ..schemas.exercise import LogEntry, LogQuery, UserLog
from .user_service import UserService

logger = logging.getLogger(__name__)


class LogService:
    """Read-only queries over the ``exercises`` collection."""

    @classmethod
    async def get_logs(cls, user_id: str, query: LogQuery) -> UserLog:
        """Return the exercise log for ``user_id``.

        Raises ``NotFoundError`` if the user does not exist.  ``count``
        is the number of entries returned, not the user's total.
        """
        user = await UserService.get_user(user_id)

        sql = "SELECT description, duration, date FROM exercises"
        where_clauses = ["user_id = ?"]
        params: list = [user.id]
        if query.from_date is not None:
            where_clauses.append("date(date) >= ?")
            params.append(query.from_date.date().isoformat())
        if query.to_date is not None:
            where_clauses.append("date(date) <= ?")
            params.append(query.to_date.date().isoformat())
        sql += " WHERE " + " AND ".join(where_clauses) + " ORDER BY rowid"
        if query.limit is not None:
            sql += " LIMIT ?"
            params.append(query.limit)

        with get_cursor() as cursor:
            rows = cursor.execute(sql, tuple(params)).fetchall()

        log: List[LogEntry] = [
            LogEntry(
                description=row["description"],
                duration=row["duration"],
                date=format_calendar_date(from_storage(row["date"])),
            )
            for row in rows
        ]
        logger.debug("Log query for user %s returned %d entries", user.id, len(log))
        return UserLog(id=user.id, username=user.username, count=len(log), log=log)
