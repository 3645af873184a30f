# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields, CounterFields
from ...domain.exceptions import StorageUnavailableError, UsernameTakenError
from .mongo_connection import get_user_collection, get_counter_collection
from .mongo_sequence import MongoSequence

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(
        self,
        user_collection: Optional[AsyncIOMotorCollection] = None,
        counter_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
        self.sequence = MongoSequence(
            counter_collection if counter_collection is not None else get_counter_collection(),
            CounterFields.USERS,
        )
        self._indexes_ready = False

    async def ensure_indexes(self) -> None:
        """Unique index on username; the store serializes concurrent registrations"""
        try:
            await self.user_collection.create_index(UserFields.USERNAME, unique=True)
            self._indexes_ready = True
        except PyMongoError as e:
            logger.error(f"Error creating user indexes: {e}", exc_info=True)
            raise StorageUnavailableError(f"Error creating user indexes: {str(e)}", operation="ensure_indexes")

    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Find user by username (exact, case-sensitive match)

        Args:
            username: Username to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not username:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.USERNAME: username})
        except PyMongoError as e:
            logger.error(f"Error finding user by username: {e}", exc_info=True)
            raise StorageUnavailableError(f"Error finding user by username: {str(e)}", operation="find_by_username")

        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: user_id})
        except PyMongoError as e:
            logger.error(f"Error finding user by ID: {e}", exc_info=True)
            raise StorageUnavailableError(f"Error finding user by ID: {str(e)}", operation="find_by_id")

        if document is None:
            return None
        return self._document_to_user(document)

    async def save(self, user: User) -> User:
        """
        Insert a new user with the next sequence ID

        Args:
            user: User domain model to save (ID must be None)

        Returns:
            Saved User domain model with ID set
        """
        if not user:
            raise ValueError("User cannot be None")
        if user.id is not None:
            raise ValueError("Users are immutable once saved")

        # Uniqueness relies on the index, so it must exist before any insert
        if not self._indexes_ready:
            await self.ensure_indexes()

        try:
            user.id = await self.sequence.next_id()
            await self.user_collection.insert_one(self._user_to_dict(user))
        except DuplicateKeyError:
            user.id = None
            raise UsernameTakenError()
        except PyMongoError as e:
            user.id = None
            logger.error(f"Error saving user: {e}", exc_info=True)
            raise StorageUnavailableError(f"Error saving user: {str(e)}", operation="save")

        return user

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=int(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            password_hash=bytes(document.get(UserFields.PASSWORD_HASH, b"")),
            password_salt=bytes(document.get(UserFields.PASSWORD_SALT, b"")),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.MONGO_ID: user.id,
            UserFields.USERNAME: user.username,
            UserFields.PASSWORD_HASH: user.password_hash,
            UserFields.PASSWORD_SALT: user.password_salt,
        }
