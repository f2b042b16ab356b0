"""Application DTOs for User operations."""

from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, EmailStr, Field, StringConstraints

from .common import PartialUpdateRequest, RecordDTO

# bcrypt only reads this many bytes of the password
MAX_PASSWORD_BYTES = 72


def _check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


PasswordField = Annotated[
    str,
    StringConstraints(min_length=6, max_length=MAX_PASSWORD_BYTES),
    AfterValidator(_check_password_bytes),
]


class CreateUserRequest(BaseModel):
    """Request DTO for registering a user."""

    name: str = Field(..., min_length=2, max_length=100, description="Full name")
    email: EmailStr = Field(..., description="Email address")
    password: PasswordField = Field(..., description="Plaintext password")

    model_config = {"frozen": True}


class UpdateUserRequest(PartialUpdateRequest):
    """Request DTO for updating a user."""

    name: Optional[str] = Field(None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None
    password: Optional[PasswordField] = None


class UserDTO(RecordDTO):
    """Response DTO for users. The password hash is never exposed."""

    name: str
    email: str
