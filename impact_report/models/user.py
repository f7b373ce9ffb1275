"""
MongoDB model for admin users.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class User(BaseModel):
    """User document as stored in the `users` collection."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    email: str
    password_hash: str = Field(..., alias="password")
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    # Legacy name for the admin flag
    admin: bool = Field(False, alias="autopromote")


USERS_COLLECTION = "users"
