from fastapi import FastAPI
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from app.utilities.errors import StoreError
from config import DATABASE_NAME, RATING_COLLECTION


def get_database(client: AsyncIOMotorClient) -> AsyncIOMotorDatabase:
    return client[DATABASE_NAME]


def get_rating_collection(app: FastAPI) -> AsyncIOMotorCollection:
    """Ratings collection on the client opened by the lifespan hook."""
    client = getattr(app.state, "mongo_client", None)
    if client is None:
        raise StoreError("Database unavailable", "MongoDB client is not initialised")
    return get_database(client)[RATING_COLLECTION]
