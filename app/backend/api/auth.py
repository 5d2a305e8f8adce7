import logging
from fastapi import APIRouter, Depends, Header, Request, status
from typing import Optional

from .schemas.admin import AdminEnvelope, AdminResponse, LoginRequest, LoginResponse, RegisterRequest, TokenData
from ..config.config import settings
from ..services.auth_service import AuthService
from ..services.token_service import TokenService
from .dependencies import get_auth_service, get_token_service
from .utilities.limiter import limiter

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"]
)


# --- Dependency for protected routes ---
def get_current_admin(
    authorization: Optional[str] = Header(None),
    token_service: TokenService = Depends(get_token_service)
) -> TokenData:
    """
    Verifies the `Authorization: Bearer <token>` header and returns the
    administrator identity it carries. Runs before any service touches the
    database, so unauthenticated requests never reach SQL.
    """
    return token_service.verify_header(authorization)


@router.post("/login", response_model=LoginResponse)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(
    request: Request,
    login_request: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Exchanges a username and password for a bearer token."""
    token, admin = await service.login(login_request.username, login_request.password)
    return LoginResponse(token=token, admin=AdminResponse.model_validate(admin))


@router.post("/register", response_model=AdminEnvelope, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def register(
    request: Request,
    register_request: RegisterRequest,
    authorization: Optional[str] = Header(None),
    service: AuthService = Depends(get_auth_service)
):
    """
    Creates an administrator. Open while no administrator exists, afterwards
    a valid bearer token is required.
    """
    admin = await service.register(register_request.username, register_request.password, authorization)
    return AdminEnvelope(admin=AdminResponse.model_validate(admin))


@router.get("/me", response_model=AdminEnvelope)
async def me(
    current_admin: TokenData = Depends(get_current_admin),
    service: AuthService = Depends(get_auth_service)
):
    """Returns the administrator the token belongs to."""
    admin = await service.me(current_admin)
    return AdminEnvelope(admin=AdminResponse.model_validate(admin))
