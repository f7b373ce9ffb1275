"""Authentication schemas."""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class LoginRequest(BaseModel):
    """Schema for logging in with email and password."""
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    class Config:
        json_schema_extra = {
            "example": {
                "email": "admin@example.org",
                "password": "correct horse battery staple",
            }
        }


class LoginResponse(BaseModel):
    """Public user profile plus the bearer token for write requests."""
    model_config = ConfigDict(populate_by_name=True)

    email: str
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    admin: bool
    access_token: str = Field(..., alias="accessToken")
    token_type: str = Field("bearer", alias="tokenType")
