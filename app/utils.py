from typing import Any

from bson import ObjectId
from bson.errors import InvalidId

from app.exceptions import InvalidObjectIdException

ERROR_INVALID_ID = "Invalid id"


def to_object_id(value: str) -> ObjectId:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise InvalidObjectIdException(ERROR_INVALID_ID) from None


def serialize(document: dict[str, Any] | None) -> dict[str, Any] | None:
    if not document:
        return document
    data = {**document}
    if "_id" in data:
        data["id"] = str(data.pop("_id"))
    return data
