"""
Pydantic models for user data.

Users carry nothing but a username.  Responses expose the identifier
as ``_id``; the creation response lists ``username`` first while the
listing lists ``_id`` first.
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for registering a user.  Usernames need not be unique."""

    username: str = Field(..., min_length=1, examples=["fcc_test"])


class UserCreated(BaseModel):
    """Response body for a freshly registered user."""

    username: str
    id: str = Field(..., alias="_id")

    model_config = {
        "populate_by_name": True,
    }


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str = Field(..., alias="_id")
    username: str

    model_config = {
        "populate_by_name": True,
    }
