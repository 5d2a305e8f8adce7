# app/backend/services/token_service.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from ..api.schemas.admin import TokenData
from ..config.config import settings
from ..models.db_models import Administrator
from .errors import AuthenticationError, ConfigurationError

logger = logging.getLogger(__name__)

TOKEN_REQUIRED_MESSAGE = "Authorization token is required."
TOKEN_INVALID_MESSAGE = "Authorization token is invalid or expired."


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Returns the token of an `Authorization: Bearer <token>` header. Any other
    scheme, or a missing header, counts as no token.
    """
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) < 2 or parts[0] != "Bearer" or not parts[1]:
        return None
    return parts[1]


class TokenService:
    """Issues and verifies the signed, time-limited administrator tokens."""

    def __init__(self, secret: Optional[str], algorithm: str = "HS256", expire_hours: int = 6):
        self._secret = secret
        self._algorithm = algorithm
        self._expire_hours = expire_hours

    @classmethod
    def from_settings(cls) -> "TokenService":
        return cls(settings.JWT_SECRET, settings.JWT_ALGORITHM, settings.TOKEN_EXPIRE_HOURS)

    def _require_secret(self) -> str:
        if not self._secret:
            raise ConfigurationError("Environment variable JWT_SECRET is not set.")
        return self._secret

    def issue(self, admin: Administrator) -> str:
        secret = self._require_secret()
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(admin.id),
            "username": admin.username,
            "iat": now,
            "exp": now + timedelta(hours=self._expire_hours),
        }
        return jwt.encode(payload, secret, algorithm=self._algorithm)

    def verify(self, token: Optional[str]) -> TokenData:
        secret = self._require_secret()
        if not token:
            raise AuthenticationError(TOKEN_REQUIRED_MESSAGE)
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "sub"]},
            )
            return TokenData.model_validate(payload)
        except (jwt.PyJWTError, PydanticValidationError) as e:
            # Both expired/forged tokens and tokens with an unexpected payload end up here.
            logger.warning(f"Token validation error: {e}")
            raise AuthenticationError(TOKEN_INVALID_MESSAGE)

    def verify_header(self, authorization: Optional[str]) -> TokenData:
        return self.verify(extract_bearer_token(authorization))
