from datetime import datetime, timezone
from bson import ObjectId
from bson.errors import InvalidId

from app.models.rating.rating import RatingOut
from app.utilities.errors import NotFound


def to_iso(value: datetime) -> str:
    # MongoDB hands back naive datetimes that are already UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def convert_object_ids(obj):
    if isinstance(obj, list):
        return [convert_object_ids(item) for item in obj]
    elif isinstance(obj, dict):
        return {key: convert_object_ids(value) for key, value in obj.items()}
    elif isinstance(obj, ObjectId):
        return str(obj)
    elif isinstance(obj, datetime):
        return to_iso(obj)
    else:
        return obj


def rating_to_json(document: dict) -> dict:
    """Public JSON shape of a stored rating, ``_id`` exposed as ``id``."""
    data = convert_object_ids(document)
    data["id"] = data.pop("_id")
    data.pop("__v", None)
    return RatingOut(**data).model_dump()


def objid(id):
    # an id that can never match a document is reported as missing
    try:
        return ObjectId(id)
    except (InvalidId, TypeError):
        raise NotFound(id)
