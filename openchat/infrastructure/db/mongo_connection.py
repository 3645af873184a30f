# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import Settings, get_settings


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database(settings: Optional[Settings] = None) -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Args:
        settings: Settings used on first connection (defaults to get_settings())

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = settings if settings is not None else get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri, serverSelectionTimeoutMS=5000)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def close_database() -> None:
    """Close the shared client, if one was opened"""
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()["users"]


def get_message_collection() -> AsyncIOMotorCollection:
    """
    Get messages collection from MongoDB

    Returns:
        MongoDB collection for messages
    """
    return get_database()["messages"]


def get_counter_collection() -> AsyncIOMotorCollection:
    """
    Get the counters collection that hands out integer IDs

    Returns:
        MongoDB collection for ID sequences
    """
    return get_database()["counters"]
