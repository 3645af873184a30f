# Standard library imports
import logging
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.message_repository import MessageRepository
from ...domain.models.message import Message
from ...domain.constants import MessageFields, CounterFields
from ...domain.exceptions import MessageNotFoundError, StorageUnavailableError
from ...utils.datetime_utils import ensure_utc, to_bson_precision
from .mongo_connection import get_message_collection, get_counter_collection
from .mongo_sequence import MongoSequence

logger = logging.getLogger(__name__)

# Newest first; equal timestamps fall back to the highest ID
MESSAGE_SORT_ORDER = [(MessageFields.TIMESTAMP, DESCENDING), (MessageFields.MONGO_ID, DESCENDING)]


class MongoMessageRepository(MessageRepository):
    """MongoDB implementation of MessageRepository"""

    def __init__(
        self,
        message_collection: Optional[AsyncIOMotorCollection] = None,
        counter_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.message_collection = (
            message_collection if message_collection is not None else get_message_collection()
        )
        self.sequence = MongoSequence(
            counter_collection if counter_collection is not None else get_counter_collection(),
            CounterFields.MESSAGES,
        )

    async def find_all(self) -> List[Message]:
        """
        List every message, newest first

        Returns:
            List of Message domain models
        """
        try:
            cursor = self.message_collection.find({}).sort(MESSAGE_SORT_ORDER)
            messages = []
            async for document in cursor:
                messages.append(self._document_to_message(document))
            return messages
        except PyMongoError as e:
            logger.error(f"Error listing messages: {e}", exc_info=True)
            raise StorageUnavailableError(f"Error listing messages: {str(e)}", operation="find_all")

    async def find_by_id(self, message_id: int) -> Optional[Message]:
        """
        Find message by ID

        Returns:
            Message domain model if found, None otherwise
        """
        try:
            document = await self.message_collection.find_one({MessageFields.MONGO_ID: message_id})
        except PyMongoError as e:
            logger.error(f"Error finding message by ID: {e}", exc_info=True)
            raise StorageUnavailableError(f"Error finding message by ID: {str(e)}", operation="find_by_id")

        if document is None:
            return None
        return self._document_to_message(document)

    async def save(self, message: Message) -> Message:
        """
        Save message (create new or update existing)

        Only the content of an existing message is written on update.

        Returns:
            Saved Message domain model with ID set
        """
        if not message:
            raise ValueError("Message cannot be None")

        try:
            if message.id is not None:
                update_result = await self.message_collection.update_one(
                    {MessageFields.MONGO_ID: message.id},
                    {"$set": {MessageFields.CONTENT: message.content}},
                )
                if update_result.matched_count == 0:
                    raise MessageNotFoundError(message.id)

                updated_document = await self.message_collection.find_one({MessageFields.MONGO_ID: message.id})
                if updated_document is None:
                    raise MessageNotFoundError(message.id)
                return self._document_to_message(updated_document)

            # Create new message
            message_dict = self._message_to_dict(message)
            message_dict[MessageFields.MONGO_ID] = await self.sequence.next_id()
            await self.message_collection.insert_one(message_dict)
            return self._document_to_message(message_dict)
        except PyMongoError as e:
            logger.error(f"Error saving message: {e}", exc_info=True)
            raise StorageUnavailableError(f"Error saving message: {str(e)}", operation="save")

    async def delete(self, message_id: int) -> bool:
        """
        Delete message by ID

        Returns:
            True if a message was removed, False if none matched
        """
        try:
            result = await self.message_collection.delete_one({MessageFields.MONGO_ID: message_id})
        except PyMongoError as e:
            logger.error(f"Error deleting message: {e}", exc_info=True)
            raise StorageUnavailableError(f"Error deleting message: {str(e)}", operation="delete")
        return result.deleted_count > 0

    def _document_to_message(self, document: Dict[str, Any]) -> Message:
        """
        Convert MongoDB document to Message domain model
        """
        if not document or MessageFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return Message(
            id=int(document[MessageFields.MONGO_ID]),
            sender=document.get(MessageFields.SENDER, ""),
            content=document.get(MessageFields.CONTENT, ""),
            # PyMongo returns naive datetimes that represent UTC
            timestamp=ensure_utc(document.get(MessageFields.TIMESTAMP)),
        )

    def _message_to_dict(self, message: Message) -> Dict[str, Any]:
        """
        Convert Message domain model to MongoDB document (without _id)
        """
        return {
            MessageFields.SENDER: message.sender,
            MessageFields.CONTENT: message.content,
            MessageFields.TIMESTAMP: to_bson_precision(ensure_utc(message.timestamp)),
        }
