from __future__ import annotations

from pydantic import Field

from core.settings.base_settings import TrucklineBaseSettings


class AuthSettings(TrucklineBaseSettings):
    """
    Token signing and password hashing settings.
    Loaded from .env file with exact variable name matching.
    """

    jwt_secret: str = Field("change-me", alias="JWT_SECRET")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    auth_token_expire_minutes: int = Field(30, alias="AUTH_TOKEN_EXPIRE_MINUTES")
    token_expire_minutes: int = Field(60, alias="TOKEN_EXPIRE_MINUTES")
    bcrypt_rounds: int = Field(10, alias="BCRYPT_ROUNDS")
