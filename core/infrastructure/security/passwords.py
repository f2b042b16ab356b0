"""bcrypt password hashing via passlib."""

from passlib.context import CryptContext

from core.application.interfaces import IPasswordHasher
from core.settings.modules import AuthSettings


class BcryptPasswordHasher(IPasswordHasher):
    """
    Password hasher backed by a passlib CryptContext.

    Args:
        settings: Auth settings (cost factor)
    """

    def __init__(self, settings: AuthSettings):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=settings.bcrypt_rounds,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        return self._context.verify(password, hashed)
