"""JWT issuing and verification via python-jose."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict
import logging

from jose import JWTError, jwt

from core.application.interfaces import ITokenService
from core.domain.errors import AuthenticationError
from core.settings.modules import AuthSettings


logger = logging.getLogger(__name__)

AUTH_TOKEN = "auth"


class JwtTokenService(ITokenService):
    """
    Signs tokens with a shared secret.

    "auth" tokens expire after AUTH_TOKEN_EXPIRE_MINUTES, any other type
    after TOKEN_EXPIRE_MINUTES.
    """

    def __init__(self, settings: AuthSettings):
        self._secret = settings.jwt_secret
        self._algorithm = settings.jwt_algorithm
        self._auth_ttl = timedelta(minutes=settings.auth_token_expire_minutes)
        self._default_ttl = timedelta(minutes=settings.token_expire_minutes)

    def issue(self, claims: Dict[str, Any], token_type: str = AUTH_TOKEN) -> str:
        ttl = self._auth_ttl if token_type == AUTH_TOKEN else self._default_ttl
        payload = dict(claims)
        payload.update({"type": token_type, "exp": datetime.now(timezone.utc) + ttl})
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Dict[str, Any]:
        try:
            claims = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as e:
            logger.debug(f"Rejected token: {e}")
            raise AuthenticationError("Invalid or expired token", cause=str(e)) from e

        if not claims.get("sub"):
            raise AuthenticationError("Invalid or expired token", cause="Token has no subject")
        return claims
