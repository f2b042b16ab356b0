"""Application DTOs for authentication."""

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    """Request DTO for login."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    model_config = {"frozen": True}


class TokenResponse(BaseModel):
    """Response DTO for a successful login."""

    message: str = "Logged in successfully"
    token: str

    model_config = {"frozen": True}
