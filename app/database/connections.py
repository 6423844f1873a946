from contextlib import asynccontextmanager
import logging
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import errors

import config
from app.database.db import get_database
from app.migration.rating.rating import ensure_rating_collection
from app.utilities.errors import StartupFailure

logger = logging.getLogger(__name__)


async def connect(db_url: str = None) -> AsyncIOMotorClient:
    db_url = db_url or config.MONGO_URI
    if not db_url:
        raise StartupFailure("Error: MONGO_URI is not set.")
    try:
        client = AsyncIOMotorClient(db_url, serverSelectionTimeoutMS=5000)
        await client.admin.command("ping")
        return client
    except errors.ConfigurationError as err:
        raise StartupFailure("Error: Invalid MongoDB configuration.", str(err)) from err
    except errors.ConnectionFailure as err:
        raise StartupFailure("Error: Unable to connect to the MongoDB server.", str(err)) from err
    except errors.OperationFailure as err:
        raise StartupFailure("Authentication or command error.", str(err)) from err


@asynccontextmanager
async def lifespan(app):
    """Async context manager for MongoDB connection lifecycle"""
    try:
        connection = await connect()
        app.state.mongo_client = connection
        await ensure_rating_collection(get_database(connection))
        logger.info("✅ MongoDB connection established successfully at startup.")
    except StartupFailure as e:
        logger.error(f"❌ MongoDB connection failed at startup: {e.message} {e.details or ''}")
        raise

    yield  # FastAPI app runs here

    mongo_client = getattr(app.state, "mongo_client", None)
    if mongo_client:
        mongo_client.close()
        logger.info("🔌 MongoDB connection closed at shutdown.")
    logger.info("🚪 Shutting down FastAPI app.")
