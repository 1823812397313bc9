"""
Request payload validation for advisory endpoints.

Required fields are checked in a fixed order so the first missing one is
reported. Values are then parsed into the pydantic request model, and the
first field that fails parsing is reported.
"""
from typing import Any, Dict, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar("T", bound=BaseModel)

CROP_RECOMMENDATION_FIELDS = ("nitrogen", "phosphorus", "potassium", "temperature", "humidity", "ph", "rainfall")
FERTILIZER_SUGGESTION_FIELDS = ("nitrogen", "phosphorus", "potassium", "cropType", "soilType")


class AdvisoryValidationError(ValueError):
    """User-correctable problem with a request payload."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class MissingFieldError(AdvisoryValidationError):
    def __init__(self, field: str):
        super().__init__(f"Missing required field: {field}", field=field)


class InvalidFieldError(AdvisoryValidationError):
    def __init__(self, field: str):
        super().__init__(f"Invalid value for field: {field}", field=field)


def is_missing(value: Any) -> bool:
    """None and blank strings count as missing; numeric zero does not."""
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def require_fields(payload: Any, fields: Sequence[str]) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise AdvisoryValidationError("Request body must be a JSON object")
    for field in fields:
        if is_missing(payload.get(field)):
            raise MissingFieldError(field)
    return payload


def parse_payload(payload: Any, fields: Sequence[str], model: Type[T]) -> T:
    """Check required fields, then parse the payload into `model`."""
    data = require_fields(payload, fields)
    try:
        return model.model_validate({field: data[field] for field in fields})
    except ValidationError as e:
        errors = e.errors()
        field = str(errors[0]["loc"][0]) if errors and errors[0].get("loc") else "body"
        raise InvalidFieldError(field)
