# app/backend/services/auth_service.py
import logging
from typing import Optional, Tuple

from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

from ..api.schemas.admin import TokenData
from ..db.db_client import AsyncPostgresClient
from ..models.db_models import Administrator
from .errors import AuthenticationError, ConflictError, NotFoundError
from .token_service import TokenService

logger = logging.getLogger(__name__)

PWD_CTX = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
# Unknown usernames are checked against this hash so both failure paths cost the same.
DUMMY_PASSWORD_HASH = PWD_CTX.hash("not-a-real-password")

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password."


class AuthService:
    """Login, registration and self-lookup for administrators."""

    def __init__(self, db_client: AsyncPostgresClient, token_service: TokenService):
        self.db_client = db_client
        self.token_service = token_service

    async def login(self, username: str, password: str) -> Tuple[str, Administrator]:
        """
        Checks the credentials and returns a fresh token together with the
        administrator. Unknown usernames and wrong passwords fail the same way.
        """
        logger.info(f"Login attempt for administrator '{username}'.")
        admin = await self.db_client.get_administrator_by_username(username)
        # Hashing is CPU bound, keep it off the event loop.
        password_hash = admin.password_hash if admin is not None else DUMMY_PASSWORD_HASH
        password_ok = await run_in_threadpool(PWD_CTX.verify, password, password_hash)
        if admin is None or not password_ok:
            logger.warning(f"Failed login for administrator '{username}'.")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        token = self.token_service.issue(admin)
        logger.info(f"Administrator '{username}' logged in successfully.")
        return token, admin

    async def register(self, username: str, password: str, authorization: Optional[str]) -> Administrator:
        """
        Creates an administrator. The very first account can be created
        without a token; after that a valid token is required.
        """
        admin_count = await self.db_client.count_administrators()
        if admin_count > 0:
            self.token_service.verify_header(authorization)
        else:
            logger.info("No administrator exists yet, allowing bootstrap registration.")

        password_hash = await run_in_threadpool(PWD_CTX.hash, password)
        admin = await self.db_client.add_administrator(username, password_hash)
        if admin is None:
            raise ConflictError("Username already exists.")

        logger.info(f"Administrator '{username}' registered.")
        return admin

    async def me(self, token_data: TokenData) -> Administrator:
        """Looks up the administrator a verified token belongs to."""
        admin = await self.db_client.get_administrator(token_data.sub)
        if admin is None:
            raise NotFoundError("Administrator not found.")
        return admin
