"""Password hashing and access tokens."""

from .passwords import BcryptPasswordHasher
from .tokens import JwtTokenService

__all__ = ["BcryptPasswordHasher", "JwtTokenService"]
