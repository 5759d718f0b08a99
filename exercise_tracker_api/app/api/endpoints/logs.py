"""
Exercise log endpoint.

``GET /api/users/{user_id}/logs`` returns a user's exercises filtered by
the optional ``from``/``to`` calendar dates and truncated to ``limit``.
Query values are taken as raw strings and validated by ``LogQuery`` so
that malformed values fail like any other error of this route (plain
text, status 500) instead of with a structured 422 body.
"""

import logging
from typing import Optional, Union

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from ...core.errors import NotFoundError, StorageError, ValidationError
from ...schemas.exercise import LogQuery, UserLog
from ...services.log_service import LogService
from ..deps import parse_payload

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{user_id}/logs", response_model=UserLog)
async def get_logs(
    user_id: str,
    from_: Optional[str] = Query(None, alias="from", description="Earliest calendar date, inclusive"),
    to: Optional[str] = Query(None, description="Latest calendar date, inclusive"),
    limit: Optional[str] = Query(None, description="Maximum number of entries"),
) -> Union[UserLog, PlainTextResponse]:
    """Return ``{_id, username, count, log}`` for the user."""
    try:
        query = parse_payload(LogQuery, {"from": from_, "to": to, "limit": limit})
        return await LogService.get_logs(user_id, query)
    except NotFoundError:
        return PlainTextResponse("User not found", status_code=404)
    except ValidationError as e:
        logger.warning("Rejected log query for user %s: %s", user_id, e)
        return PlainTextResponse("Error fetching logs", status_code=500)
    except StorageError:
        logger.exception("Could not fetch logs for user %s", user_id)
        return PlainTextResponse("Error fetching logs", status_code=500)
