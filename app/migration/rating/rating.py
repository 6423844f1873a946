import asyncio
import logging
from pymongo import DESCENDING, IndexModel
from pymongo.errors import CollectionInvalid, OperationFailure

from config import RATING_COLLECTION

logger = logging.getLogger(__name__)

# Server side copy of the RatingDocument rules
RATING_VALIDATOR = {
    "$jsonSchema": {
        "bsonType": "object",
        "required": ["name", "rating", "review", "createdAt"],
        "properties": {
            "name": {"bsonType": "string", "minLength": 1},
            "picture": {"bsonType": "string"},
            "rating": {
                "bsonType": ["int", "long", "double", "decimal"],
                "minimum": 0,
                "maximum": 10,
            },
            "review": {"bsonType": "string", "minLength": 1},
            "createdAt": {"bsonType": "date"},
        },
    }
}


async def ensure_rating_collection(db, name: str = RATING_COLLECTION):
    """Create the ratings collection with its validator and createdAt index."""
    existing = await db.list_collection_names()
    try:
        if name in existing:
            await db.command("collMod", name, validator=RATING_VALIDATOR)
        else:
            await db.create_collection(name, validator=RATING_VALIDATOR)
    except (CollectionInvalid, OperationFailure) as err:
        # another worker may have created it first, and collMod needs dbAdmin;
        # the pydantic rules still apply on every write
        logger.warning(f"⚠️ Could not install validator on '{name}': {err}")

    await db[name].create_indexes([IndexModel([("createdAt", DESCENDING)], name="createdAt_desc")])
    logger.info(f"Collection '{name}' is ready")


async def migrate():
    from app.database.connections import connect
    from app.database.db import get_database

    client = await connect()
    try:
        await ensure_rating_collection(get_database(client))
    finally:
        client.close()
    print("Ratings collection migrated successfully!")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(migrate())
