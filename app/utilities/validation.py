import math
from typing import Any, Optional, Union
from pydantic import BaseModel


class ValidationResult(BaseModel):
    valid: bool
    error: Optional[str] = None


def to_number(value: Any) -> Optional[Union[int, float]]:
    """Return ``value`` as an int or float, or None when it is not numeric.

    Numeric strings are accepted, booleans, NaN and infinities are not.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                return None
    else:
        return None

    if isinstance(number, float) and (math.isnan(number) or math.isinf(number)):
        return None
    return number


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_rating_data(data: Any) -> ValidationResult:
    if not isinstance(data, dict):
        return ValidationResult(valid=False, error="Request body must be a JSON object")

    if _is_blank(data.get("name")):
        return ValidationResult(valid=False, error="Missing required field: name")

    if _is_blank(data.get("review")):
        return ValidationResult(valid=False, error="Missing required field: review")

    # 0 is a valid score, only a missing or null value fails here
    if data.get("rating") is None:
        return ValidationResult(valid=False, error="Missing required field: rating")

    rating = to_number(data["rating"])
    if rating is None:
        return ValidationResult(valid=False, error="Rating must be a number")

    if rating < 0 or rating > 10:
        return ValidationResult(valid=False, error="Rating must be between 0 and 10")

    return ValidationResult(valid=True)
