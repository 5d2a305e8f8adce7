# app/backend/api/schemas/common.py
import math
import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MAX_PHONE_LENGTH = 20


class RequestModel(BaseModel):
    """Base for request bodies: camelCase keys in, unknown keys ignored."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ResponseModel(BaseModel):
    """Base for response bodies: snake_case attributes out as camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def invalid(message: str) -> PydanticCustomError:
    # Custom errors keep the message as-is, without pydantic's "Value error, " prefix.
    return PydanticCustomError("invalid_field", message)


def clean_text(value: Any) -> Any:
    """Trims strings; empty and blank strings become None (the field is cleared)."""
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def require_text(value: Any, message: str) -> Any:
    value = clean_text(value)
    if value is None:
        raise invalid(message)
    return value


def parse_int(value: Any, label: str, minimum: int, maximum: int) -> Optional[int]:
    """
    Parses an optional integer field. None and "" mean "no value". Anything
    that is not a number is rejected before the range is checked; fractional
    values are truncated.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise invalid(f"{label} must be a valid number.")
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise invalid(f"{label} must be a valid number.")
    else:
        raise invalid(f"{label} must be a valid number.")
    if not math.isfinite(number):
        raise invalid(f"{label} must be a valid number.")

    number = int(number)
    if number < minimum or number > maximum:
        raise invalid(f"{label} must be between {minimum} and {maximum}.")
    return number


def check_email(value: Any) -> Any:
    value = clean_text(value)
    if isinstance(value, str) and not EMAIL_PATTERN.match(value):
        raise invalid("Email format is invalid.")
    return value


def check_phone(value: Any) -> Any:
    value = clean_text(value)
    if isinstance(value, str) and len(value) > MAX_PHONE_LENGTH:
        raise invalid("Phone number is too long.")
    return value


class SuccessResponse(BaseModel):
    success: bool = True
