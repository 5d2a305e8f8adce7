# app/backend/api/schemas/admin.py
from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, field_validator, model_validator

from .common import RequestModel, ResponseModel, clean_text, invalid


class LoginRequest(RequestModel):
    username: Optional[str] = None
    password: Optional[str] = None

    @field_validator("username", mode="before")
    @classmethod
    def _trim(cls, value: Any) -> Any:
        return clean_text(value)

    @model_validator(mode="after")
    def _required(self):
        # The password is compared as typed, only its presence is checked.
        if not self.username or not self.password:
            raise invalid("Username and password are required.")
        return self


class RegisterRequest(LoginRequest):
    pass


class AdminResponse(ResponseModel):
    id: UUID
    username: str
    created_at: datetime


class AdminEnvelope(BaseModel):
    admin: AdminResponse


class LoginResponse(BaseModel):
    token: str
    admin: AdminResponse


# Internal representation of the JWT claims
class TokenData(BaseModel):
    sub: UUID
    username: str
