import logging
from typing import Any
from fastapi import APIRouter, Body, Depends, status

from app.services.json import return_json, return_error_json
from app.services.rating_service import RatingRepository, get_rating_repository
from app.utilities.errors import NotFound, RatingError, ValidationError
from app.utilities.validation import validate_rating_data

logger = logging.getLogger(__name__)

rating_router = APIRouter(
    prefix="/ratings",
    tags=["RatingAPI"],
)


# List all ratings, newest first
@rating_router.get("")
async def get_all_ratings(repository: RatingRepository = Depends(get_rating_repository)):
    try:
        ratings = await repository.list_ratings()
        logger.info(f"Found {len(ratings)} ratings")
        return return_json(ratings)

    except RatingError as e:
        logger.error(f"Error fetching ratings: {e.details}")
        return return_error_json("Failed to fetch ratings", e.details, status.HTTP_500_INTERNAL_SERVER_ERROR)

    except Exception as e:
        logger.error(f"Error fetching ratings: {e}")
        return return_error_json("Failed to fetch ratings", str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)


# Create a rating
@rating_router.post("")
async def create_rating(
    payload: Any = Body(None),
    repository: RatingRepository = Depends(get_rating_repository),
):
    validation = validate_rating_data(payload)
    if not validation.valid:
        return return_error_json(validation.error)

    try:
        rating = await repository.create(payload)
        logger.info(f"Rating created successfully: {rating['id']}")
        return return_json(rating, status.HTTP_201_CREATED)

    except ValidationError as e:
        logger.error(f"❌ Error creating rating: {e.details}")
        return return_error_json(e.message, e.details)

    except RatingError as e:
        logger.error(f"❌ Error creating rating: {e.details}")
        return return_error_json("Failed to create rating", e.details, status.HTTP_500_INTERNAL_SERVER_ERROR)

    except Exception as e:
        logger.error(f"❌ Error creating rating: {e}")
        return return_error_json("Failed to create rating", str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)


# Update the supplied fields of a rating
@rating_router.put("/{rating_id}")
async def update_rating(
    rating_id: str,
    payload: Any = Body(None),
    repository: RatingRepository = Depends(get_rating_repository),
):
    try:
        rating = await repository.update_by_id(rating_id, payload)
        logger.info(f"Rating updated successfully: {rating_id}")
        return return_json(rating)

    except NotFound as e:
        return return_error_json(e.message, code=status.HTTP_404_NOT_FOUND)

    except ValidationError as e:
        logger.error(f"Error updating rating {rating_id}: {e.details}")
        return return_error_json(e.message, e.details)

    except RatingError as e:
        logger.error(f"Error updating rating {rating_id}: {e.details}")
        return return_error_json("Failed to update rating", e.details, status.HTTP_500_INTERNAL_SERVER_ERROR)

    except Exception as e:
        logger.error(f"Error updating rating {rating_id}: {e}")
        return return_error_json("Failed to update rating", str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)


# Delete a rating
@rating_router.delete("/{rating_id}")
async def delete_rating(
    rating_id: str,
    repository: RatingRepository = Depends(get_rating_repository),
):
    try:
        result = await repository.delete_by_id(rating_id)
        logger.info(f"Rating deleted successfully: {rating_id}")
        return return_json(result)

    except NotFound as e:
        return return_error_json(e.message, code=status.HTTP_404_NOT_FOUND)

    except RatingError as e:
        logger.error(f"Error deleting rating {rating_id}: {e.details}")
        return return_error_json("Failed to delete rating", e.details, status.HTTP_500_INTERNAL_SERVER_ERROR)

    except Exception as e:
        logger.error(f"Error deleting rating {rating_id}: {e}")
        return return_error_json("Failed to delete rating", str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)
