"""
Pydantic models for exercises and exercise logs.

``ExerciseCreate`` and ``LogQuery`` validate what clients send; string
values coming from HTML forms or query strings are coerced here (e.g.
``"30"`` to ``30``).  Dates are parsed with
``core.dates.parse_calendar_date`` and leave the API as calendar-date
strings.
"""

import math
from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from ..core.dates import parse_calendar_date

Number = Union[int, float]

# Largest value SQLite stores as an INTEGER.
MAX_INTEGER = 2**63 - 1


def _blank_to_none(value: Any) -> Any:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return value


def _parse_date(value: Any) -> Any:
    value = _blank_to_none(value)
    if isinstance(value, str):
        return parse_calendar_date(value)
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone().replace(tzinfo=None)
        return value
    if value is not None:
        raise ValueError("date must be a date string")
    return value


class ExerciseCreate(BaseModel):
    """Schema for adding an exercise to a user.

    ``date`` is optional; when it is missing or blank the service uses
    the time of insertion.
    """

    description: str = Field(..., min_length=1, examples=["run"])
    duration: Number = Field(..., examples=[30])
    date: Optional[datetime] = Field(None, examples=["2023-01-15"])

    @field_validator("duration", mode="before")
    @classmethod
    def reject_bool_duration(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("duration must be a number")
        return value

    @field_validator("duration")
    @classmethod
    def check_duration(cls, value: Number) -> Number:
        if isinstance(value, int) and abs(value) > MAX_INTEGER:
            raise ValueError("duration is too large")
        if not math.isfinite(value):
            raise ValueError("duration must be finite")
        # 30.0 and 30 are the same number of minutes
        if isinstance(value, float) and value.is_integer() and abs(value) <= MAX_INTEGER:
            return int(value)
        return value

    @field_validator("date", mode="before")
    @classmethod
    def parse_exercise_date(cls, value: Any) -> Any:
        return _parse_date(value)


class ExerciseRead(BaseModel):
    """Response body for a recorded exercise.

    ``_id`` is the owning user's identifier, not the exercise's.
    """

    id: str = Field(..., alias="_id")
    username: str
    description: str
    duration: Number
    date: str

    model_config = {
        "populate_by_name": True,
    }


class LogQuery(BaseModel):
    """Optional filters for a log query.

    ``from`` and ``to`` bound the calendar date inclusively.  A missing
    or zero ``limit`` means no limit; a negative one counts as its
    absolute value.
    """

    from_date: Optional[datetime] = Field(None, alias="from")
    to_date: Optional[datetime] = Field(None, alias="to")
    limit: Optional[int] = None

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("from_date", "to_date", mode="before")
    @classmethod
    def parse_bounds(cls, value: Any) -> Any:
        return _parse_date(value)

    @field_validator("limit", mode="before")
    @classmethod
    def blank_limit(cls, value: Any) -> Any:
        value = _blank_to_none(value)
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("limit")
    @classmethod
    def normalise_limit(cls, value: Optional[int]) -> Optional[int]:
        if value is None or value == 0:
            return None
        value = abs(value)
        if value > MAX_INTEGER:
            raise ValueError("limit is too large")
        return value


class LogEntry(BaseModel):
    description: str
    duration: Number
    date: str


class UserLog(BaseModel):
    """Response body for a log query.  ``count`` is ``len(log)``."""

    id: str = Field(..., alias="_id")
    username: str
    count: int
    log: List[LogEntry]

    model_config = {
        "populate_by_name": True,
    }
