from pydantic import BaseModel, Field, field_validator
from typing import Optional, Union
from datetime import datetime, timezone

from app.utilities.validation import to_number


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RatingFields(BaseModel):
    """Field rules shared by every write to the ratings collection."""

    @field_validator("name", "review", check_fields=False)
    @classmethod
    def strip_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("rating", mode="before", check_fields=False)
    @classmethod
    def check_rating(cls, value):
        number = to_number(value)
        if number is None:
            raise ValueError("must be a number")
        if number < 0 or number > 10:
            raise ValueError("must be between 0 and 10")
        return number


class RatingDocument(RatingFields):
    """Shape of a rating as it is written to MongoDB."""

    name: str = Field(..., description="Name")
    picture: str = Field("", description="Image URL or base64 data")
    rating: Union[int, float] = Field(..., description="Score from 0 to 10")
    review: str = Field(..., description="Review text")
    createdAt: datetime = Field(default_factory=utcnow)

    @field_validator("picture", mode="before")
    @classmethod
    def default_picture(cls, value):
        return value or ""

    @field_validator("createdAt", mode="before")
    @classmethod
    def default_created_at(cls, value):
        if not value:
            return utcnow()
        # epoch numbers are always milliseconds
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
            except (OverflowError, OSError, ValueError):
                raise ValueError("timestamp out of range")
        return value

    @field_validator("createdAt")
    @classmethod
    def as_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class RatingUpdate(RatingFields):
    # Only keys present in the request are applied, an explicit null is rejected
    name: str = None
    picture: str = None
    rating: Union[int, float] = None
    review: str = None


class RatingOut(BaseModel):
    id: str
    name: str
    picture: str = ""
    rating: Union[int, float]
    review: str
    createdAt: Optional[str] = None
