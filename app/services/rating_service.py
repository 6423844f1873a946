import logging
from typing import List, Mapping

from fastapi import Request
from pydantic import ValidationError as PydanticValidationError
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import OperationFailure, PyMongoError

from app.database.db import get_rating_collection
from app.models.rating.rating import RatingDocument, RatingUpdate
from app.utilities.convert_object_id import objid, rating_to_json
from app.utilities.errors import NotFound, StoreError, ValidationError

logger = logging.getLogger(__name__)

# MongoDB DocumentValidationFailure
DOCUMENT_VALIDATION_FAILURE = 121


def _store_error(message: str, err: PyMongoError) -> Exception:
    # insert_one reports it as WriteError, findAndModify as OperationFailure
    if isinstance(err, OperationFailure) and err.code == DOCUMENT_VALIDATION_FAILURE:
        return ValidationError(str(err))
    return StoreError(message, str(err))


class RatingRepository:
    """CRUD operations on the ratings collection.

    Every method returns ratings in their public JSON shape (see
    ``rating_to_json``) and raises ``ValidationError``, ``NotFound`` or
    ``StoreError`` instead of driver exceptions.
    """

    def __init__(self, collection):
        self.collection = collection

    async def list_ratings(self) -> List[dict]:
        """All ratings, newest ``createdAt`` first."""
        try:
            cursor = self.collection.find({}).sort("createdAt", DESCENDING)
            ratings = await cursor.to_list(length=None)
        except PyMongoError as err:
            raise _store_error("Failed to fetch ratings", err) from err
        return [rating_to_json(rating) for rating in ratings]

    async def create(self, payload: Mapping) -> dict:
        try:
            document = RatingDocument.model_validate(payload).model_dump()
        except PydanticValidationError as err:
            raise ValidationError(str(err)) from err

        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as err:
            raise _store_error("Failed to create rating", err) from err

        document["_id"] = result.inserted_id
        return rating_to_json(document)

    async def update_by_id(self, rating_id: str, partial: Mapping) -> dict:
        """Apply the fields present in ``partial`` and return the updated rating."""
        object_id = objid(rating_id)
        try:
            changes = RatingUpdate.model_validate(partial or {}).model_dump(exclude_unset=True)
        except PydanticValidationError as err:
            raise ValidationError(str(err)) from err

        try:
            if changes:
                updated = await self.collection.find_one_and_update(
                    {"_id": object_id},
                    {"$set": changes},
                    return_document=ReturnDocument.AFTER,
                )
            else:
                updated = await self.collection.find_one({"_id": object_id})
        except PyMongoError as err:
            raise _store_error("Failed to update rating", err) from err

        if updated is None:
            raise NotFound(rating_id)
        return rating_to_json(updated)

    async def delete_by_id(self, rating_id: str) -> dict:
        object_id = objid(rating_id)
        try:
            result = await self.collection.delete_one({"_id": object_id})
        except PyMongoError as err:
            raise _store_error("Failed to delete rating", err) from err

        if result.deleted_count == 0:
            raise NotFound(rating_id)
        return {"message": "Rating deleted successfully"}


def get_rating_repository(request: Request) -> RatingRepository:
    return RatingRepository(get_rating_collection(request.app))
