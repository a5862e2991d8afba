"""
Pydantic models for user data.

Users are identified by a numeric ``id`` generated by the store and a
unique ``login``.  The password is accepted on write and never
returned.
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for registering or fully replacing a user."""

    login: str = Field(..., min_length=1, example="operator")
    password: str = Field(..., min_length=1, example="strongpassword")


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    login: str

    model_config = {
        "from_attributes": True,
    }
