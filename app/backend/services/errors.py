# app/backend/services/errors.py


class ConfigurationError(RuntimeError):
    """Raised when a required setting (database URL, signing secret) is missing.

    This is not a request error: the API answers it with a generic 500.
    """
    pass


class ServiceError(Exception):
    """General exception class for the service layer."""
    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    status_code = 400


class AuthenticationError(ServiceError):
    """Missing, invalid or expired token, or wrong credentials."""
    status_code = 401


class NotFoundError(ServiceError):
    status_code = 404


class ConflictError(ServiceError):
    """A natural key (username, student number, ...) is already taken."""
    status_code = 409
