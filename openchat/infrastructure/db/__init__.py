from .mongo_connection import (
    get_database,
    close_database,
    get_user_collection,
    get_message_collection,
    get_counter_collection,
)
from .mongo_sequence import MongoSequence
from .mongo_user_repository import MongoUserRepository
from .mongo_message_repository import MongoMessageRepository

__all__ = [
    "get_database",
    "close_database",
    "get_user_collection",
    "get_message_collection",
    "get_counter_collection",
    "MongoSequence",
    "MongoUserRepository",
    "MongoMessageRepository",
]
