# app/backend/api/utilities/limiter.py

from fastapi import Request
import jwt

from slowapi import Limiter
from slowapi.util import get_remote_address

from ...config.config import settings
from ...services.token_service import extract_bearer_token


def get_limiter_key(request: Request) -> str:
    """
    Returns the rate limit key for a request.

    With a decodable bearer token the administrator id is the key, otherwise
    the client IP address.
    """
    token = extract_bearer_token(request.headers.get("authorization"))
    if token and settings.JWT_SECRET:
        try:
            # Expiry does not matter here, only the identity inside the token.
            payload = jwt.decode(
                token,
                settings.JWT_SECRET,
                algorithms=[settings.JWT_ALGORITHM],
                options={"verify_exp": False}
            )
            admin_id = payload.get("sub")
            if admin_id:
                return admin_id
        except jwt.PyJWTError:
            # Undecodable token: fall back to the IP address.
            pass

    return get_remote_address(request)


limiter = Limiter(key_func=get_limiter_key, storage_uri=settings.RATE_LIMIT_STORAGE_URL)
