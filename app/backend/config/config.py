import os
from typing import List, Optional

from dotenv import load_dotenv

from ..services.errors import ConfigurationError

load_dotenv()


class Config:
    """
    Holds the settings read from environment variables in a simple, flat class.
    """
    # Database
    DATABASE_URL: Optional[str] = os.environ.get("DATABASE_URL") or os.environ.get("NEON_DATABASE_URL")
    DB_POOL_MIN_SIZE: int = int(os.environ.get("DB_POOL_MIN_SIZE", 0))
    DB_POOL_MAX_SIZE: int = int(os.environ.get("DB_POOL_MAX_SIZE", 5))
    DB_POOL_IDLE_TIMEOUT_SECONDS: float = float(os.environ.get("DB_POOL_IDLE_TIMEOUT_SECONDS", 30))
    DB_CONNECT_TIMEOUT_SECONDS: float = float(os.environ.get("DB_CONNECT_TIMEOUT_SECONDS", 10))
    DB_COMMAND_TIMEOUT_SECONDS: float = float(os.environ.get("DB_COMMAND_TIMEOUT_SECONDS", 30))
    DB_SSL: Optional[str] = os.environ.get("DB_SSL")

    # JWT
    JWT_SECRET: Optional[str] = os.environ.get("JWT_SECRET")
    JWT_ALGORITHM: str = os.environ.get("JWT_ALGORITHM", "HS256")
    TOKEN_EXPIRE_HOURS: int = int(os.environ.get("TOKEN_EXPIRE_HOURS", 6))

    # Rate limiting
    LOGIN_RATE_LIMIT: str = os.environ.get("LOGIN_RATE_LIMIT", "30/minute")
    RATE_LIMIT_STORAGE_URL: str = os.environ.get("RATE_LIMIT_STORAGE_URL", "memory://")

    # Logging
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
    LOG_DIR: str = os.environ.get("LOG_DIR", "logs")

    def missing_settings(self) -> List[str]:
        missing = []
        if not self.DATABASE_URL:
            missing.append("DATABASE_URL")
        if not self.JWT_SECRET:
            missing.append("JWT_SECRET")
        return missing

    def validate(self):
        """Raises ConfigurationError if a required variable is not set."""
        missing = self.missing_settings()
        if missing:
            raise ConfigurationError(f"Environment variable(s) not set: {', '.join(missing)}")


# Single importable instance of the settings
settings = Config()
