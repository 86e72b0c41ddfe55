"""Signed-in marketplace user."""

from pydantic import BaseModel, Field


class User(BaseModel):
    """A renter, a driveway owner, or both."""
    id: str = Field(..., min_length=1)
    name: str
    email: str
