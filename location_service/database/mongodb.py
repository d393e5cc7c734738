import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from location_service.core.config import Settings
from location_service.core.exceptions import DatabaseUnavailableError

logger = logging.getLogger(__name__)


async def connect_to_mongo(settings: Settings) -> AsyncIOMotorClient:
    client = AsyncIOMotorClient(
        settings.MONGO_PUBLIC_URL,
        serverSelectionTimeoutMS=settings.SERVER_SELECTION_TIMEOUT_MS,
        timeoutMS=int(settings.REQUEST_TIMEOUT_SECONDS * 1000),
        tz_aware=True,
    )
    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        logger.critical("Could not reach MongoDB: %s", e)
        client.close()
        raise DatabaseUnavailableError(f"MongoDB is unreachable: {e}") from e

    logger.info("Successfully connected to MongoDB")
    return client


def get_collection(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorCollection:
    return client[settings.DATABASE_NAME][settings.COLLECTION_NAME]


def close_mongo_connection(client: AsyncIOMotorClient) -> None:
    client.close()
    logger.info("MongoDB connection closed")
