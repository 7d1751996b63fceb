import logging
from motor.motor_asyncio import AsyncIOMotorClient
from catalog.core.config import MONGO_URI, MONGO_DB_NAME

logger = logging.getLogger(__name__)

_client = None


def get_client(uri: str = MONGO_URI) -> AsyncIOMotorClient:
    global _client
    if _client is None:
        logger.info("Opening MongoDB client")
        _client = AsyncIOMotorClient(
            uri,
            maxPoolSize=20,
            minPoolSize=3,
            serverSelectionTimeoutMS=5000,  # 5 seconds to select server
            socketTimeoutMS=120000,
        )
    return _client


def get_database(name: str = MONGO_DB_NAME):
    return get_client()[name]


def close_client():
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("Closed MongoDB client")

