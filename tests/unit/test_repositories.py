"""
Unit tests for the in-memory and MongoDB repositories.
MongoDB collections are mocked; no server is needed.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from openchat.domain.exceptions import MessageNotFoundError, StorageUnavailableError, UsernameTakenError
from openchat.domain.models.message import Message
from openchat.domain.models.user import User
from openchat.infrastructure.db.mongo_message_repository import MESSAGE_SORT_ORDER, MongoMessageRepository
from openchat.infrastructure.db.mongo_user_repository import MongoUserRepository

NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def _new_user(username: str = "johndoe") -> User:
    return User(id=None, username=username, password_hash=b"h" * 64, password_salt=b"s" * 128)


class _AsyncCursor:
    """Stand-in for a Motor cursor: sort() then async iteration."""

    def __init__(self, documents):
        self._documents = list(documents)
        self.sort_spec = None

    def sort(self, spec):
        self.sort_spec = spec
        return self

    def __aiter__(self):
        self._iter = iter(self._documents)
        return self

    async def __anext__(self):
        try:
            return next(self._iter)
        except StopIteration:
            raise StopAsyncIteration


@pytest.fixture
def counter_collection():
    collection = AsyncMock()
    collection.find_one_and_update.return_value = {"_id": "messages", "seq": 11}
    return collection


class TestInMemoryUserRepository:
    """Tests for InMemoryUserRepository"""

    @pytest.mark.asyncio
    async def test_save_assigns_sequential_ids(self, user_repository):
        first = await user_repository.save(_new_user("a"))
        second = await user_repository.save(_new_user("b"))
        assert (first.id, second.id) == (1, 2)
        assert (await user_repository.find_by_id(2)).username == "b"

    @pytest.mark.asyncio
    async def test_duplicate_username_raises(self, user_repository):
        await user_repository.save(_new_user("a"))
        with pytest.raises(UsernameTakenError):
            await user_repository.save(_new_user("a"))

    @pytest.mark.asyncio
    async def test_find_by_username_is_exact(self, user_repository):
        await user_repository.save(_new_user("johndoe"))
        assert await user_repository.find_by_username("JOHNDOE") is None
        assert (await user_repository.find_by_username("johndoe")).id == 1

    @pytest.mark.asyncio
    async def test_saved_user_is_immutable(self, user_repository):
        saved = await user_repository.save(_new_user())
        with pytest.raises(ValueError):
            await user_repository.save(saved)


class TestInMemoryMessageRepository:
    """Tests for InMemoryMessageRepository"""

    @pytest.mark.asyncio
    async def test_returned_records_are_copies(self, message_repository):
        saved = await message_repository.save(Message(id=None, sender="u", content="a", timestamp=NOW))
        saved.content = "changed locally"
        assert (await message_repository.find_by_id(saved.id)).content == "a"

    @pytest.mark.asyncio
    async def test_update_keeps_sender_and_timestamp(self, message_repository):
        saved = await message_repository.save(Message(id=None, sender="u", content="a", timestamp=NOW))
        updated = await message_repository.save(
            Message(id=saved.id, sender="other", content="b", timestamp=datetime.now(timezone.utc))
        )
        assert updated.content == "b"
        assert updated.sender == "u"
        assert updated.timestamp == NOW

    @pytest.mark.asyncio
    async def test_update_missing_raises(self, message_repository):
        with pytest.raises(MessageNotFoundError):
            await message_repository.save(Message(id=5, sender="u", content="b", timestamp=NOW))

    @pytest.mark.asyncio
    async def test_delete_reports_existence(self, message_repository):
        saved = await message_repository.save(Message(id=None, sender="u", content="a", timestamp=NOW))
        assert await message_repository.delete(saved.id) is True
        assert await message_repository.delete(saved.id) is False


class TestMongoUserRepository:
    """Tests for MongoUserRepository with mocked collections"""

    @pytest.mark.asyncio
    async def test_save_uses_sequence_id(self, counter_collection):
        users = AsyncMock()
        counter_collection.find_one_and_update.return_value = {"_id": "users", "seq": 3}
        repo = MongoUserRepository(user_collection=users, counter_collection=counter_collection)

        saved = await repo.save(_new_user())

        assert saved.id == 3
        inserted = users.insert_one.call_args.args[0]
        assert inserted["_id"] == 3
        assert inserted["username"] == "johndoe"
        assert inserted["password_hash"] == b"h" * 64
        assert counter_collection.find_one_and_update.call_args.args[0] == {"_id": "users"}

    @pytest.mark.asyncio
    async def test_duplicate_key_becomes_username_taken(self, counter_collection):
        users = AsyncMock()
        users.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")
        repo = MongoUserRepository(user_collection=users, counter_collection=counter_collection)

        user = _new_user()
        with pytest.raises(UsernameTakenError):
            await repo.save(user)
        assert user.id is None

    @pytest.mark.asyncio
    async def test_find_by_username_maps_document(self, counter_collection):
        users = AsyncMock()
        users.find_one.return_value = {
            "_id": 9,
            "username": "janedoe",
            "password_hash": b"h" * 64,
            "password_salt": b"s" * 128,
        }
        repo = MongoUserRepository(user_collection=users, counter_collection=counter_collection)

        user = await repo.find_by_username("janedoe")

        assert user.id == 9
        assert user.username == "janedoe"
        users.find_one.assert_called_once_with({"username": "janedoe"})

    @pytest.mark.asyncio
    async def test_connection_failure_becomes_storage_unavailable(self, counter_collection):
        users = AsyncMock()
        users.find_one.side_effect = ServerSelectionTimeoutError("no servers")
        repo = MongoUserRepository(user_collection=users, counter_collection=counter_collection)

        with pytest.raises(StorageUnavailableError):
            await repo.find_by_username("johndoe")

    @pytest.mark.asyncio
    async def test_ensure_indexes_creates_unique_username(self, counter_collection):
        users = AsyncMock()
        repo = MongoUserRepository(user_collection=users, counter_collection=counter_collection)
        await repo.ensure_indexes()
        users.create_index.assert_called_once_with("username", unique=True)


    @pytest.mark.asyncio
    async def test_save_creates_username_index_before_first_insert(self, counter_collection):
        users = AsyncMock()
        calls = []
        users.create_index.side_effect = lambda *args, **kwargs: calls.append("create_index")
        users.insert_one.side_effect = lambda *args, **kwargs: calls.append("insert_one")
        repo = MongoUserRepository(user_collection=users, counter_collection=counter_collection)

        await repo.save(_new_user("a"))
        await repo.save(_new_user("b"))

        users.create_index.assert_called_once_with("username", unique=True)
        assert calls == ["create_index", "insert_one", "insert_one"]

    @pytest.mark.asyncio
    async def test_save_retries_index_after_failed_startup(self, counter_collection):
        users = AsyncMock()
        users.create_index.side_effect = [ServerSelectionTimeoutError("no servers"), "username_1"]
        repo = MongoUserRepository(user_collection=users, counter_collection=counter_collection)

        with pytest.raises(StorageUnavailableError):
            await repo.ensure_indexes()

        saved = await repo.save(_new_user())

        assert saved.id == 11
        assert users.create_index.call_count == 2
        users.insert_one.assert_called_once()

    @pytest.mark.asyncio
    async def test_save_without_index_does_not_insert(self, counter_collection):
        users = AsyncMock()
        users.create_index.side_effect = ServerSelectionTimeoutError("no servers")
        repo = MongoUserRepository(user_collection=users, counter_collection=counter_collection)

        user = _new_user()
        with pytest.raises(StorageUnavailableError):
            await repo.save(user)

        assert user.id is None
        users.insert_one.assert_not_called()


class TestMongoMessageRepository:
    """Tests for MongoMessageRepository with mocked collections"""

    @pytest.mark.asyncio
    async def test_find_all_sorts_newest_first(self, counter_collection):
        cursor = _AsyncCursor([
            {"_id": 2, "sender": "b", "content": "Hi", "timestamp": datetime(2024, 3, 1, 12, 0, 5)},
            {"_id": 1, "sender": "a", "content": "Hello", "timestamp": datetime(2024, 3, 1, 12, 0, 0)},
        ])
        messages = MagicMock()
        messages.find.return_value = cursor
        repo = MongoMessageRepository(message_collection=messages, counter_collection=counter_collection)

        result = await repo.find_all()

        assert cursor.sort_spec == MESSAGE_SORT_ORDER
        assert [m.id for m in result] == [2, 1]
        assert result[1].timestamp == NOW

    @pytest.mark.asyncio
    async def test_create_inserts_with_next_id(self, counter_collection):
        messages = AsyncMock()
        repo = MongoMessageRepository(message_collection=messages, counter_collection=counter_collection)

        saved = await repo.save(Message(id=None, sender="a", content="Hello", timestamp=NOW))

        assert saved.id == 11
        inserted = messages.insert_one.call_args.args[0]
        assert inserted["_id"] == 11
        assert inserted["timestamp"] == NOW

    @pytest.mark.asyncio
    async def test_update_sets_only_content(self, counter_collection):
        messages = AsyncMock()
        messages.update_one.return_value = MagicMock(matched_count=1)
        messages.find_one.return_value = {"_id": 4, "sender": "a", "content": "X", "timestamp": NOW}
        repo = MongoMessageRepository(message_collection=messages, counter_collection=counter_collection)

        updated = await repo.save(Message(id=4, sender="a", content="X", timestamp=NOW))

        assert updated.content == "X"
        messages.update_one.assert_called_once_with({"_id": 4}, {"$set": {"content": "X"}})
        counter_collection.find_one_and_update.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_missing_raises_not_found(self, counter_collection):
        messages = AsyncMock()
        messages.update_one.return_value = MagicMock(matched_count=0)
        repo = MongoMessageRepository(message_collection=messages, counter_collection=counter_collection)

        with pytest.raises(MessageNotFoundError):
            await repo.save(Message(id=4, sender="a", content="X", timestamp=NOW))

    @pytest.mark.asyncio
    async def test_delete_reports_deleted_count(self, counter_collection):
        messages = AsyncMock()
        messages.delete_one.return_value = MagicMock(deleted_count=0)
        repo = MongoMessageRepository(message_collection=messages, counter_collection=counter_collection)

        assert await repo.delete(4) is False
        messages.delete_one.assert_called_once_with({"_id": 4})

    @pytest.mark.asyncio
    async def test_create_returns_stored_millisecond_timestamp(self, counter_collection):
        messages = AsyncMock()
        repo = MongoMessageRepository(message_collection=messages, counter_collection=counter_collection)
        precise = datetime(2024, 3, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)

        saved = await repo.save(Message(id=None, sender="a", content="Hello", timestamp=precise))

        stored = datetime(2024, 3, 1, 12, 0, 0, 123000, tzinfo=timezone.utc)
        assert messages.insert_one.call_args.args[0]["timestamp"] == stored
        assert saved.timestamp == stored

    @pytest.mark.asyncio
    async def test_list_failure_becomes_storage_unavailable(self, counter_collection):
        messages = MagicMock()
        messages.find.side_effect = ServerSelectionTimeoutError("no servers")
        repo = MongoMessageRepository(message_collection=messages, counter_collection=counter_collection)

        with pytest.raises(StorageUnavailableError) as exc_info:
            await repo.find_all()
        assert exc_info.value.operation == "find_all"
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_find_by_id_failure_becomes_storage_unavailable(self, counter_collection):
        messages = AsyncMock()
        messages.find_one.side_effect = ServerSelectionTimeoutError("no servers")
        repo = MongoMessageRepository(message_collection=messages, counter_collection=counter_collection)

        with pytest.raises(StorageUnavailableError):
            await repo.find_by_id(1)

    @pytest.mark.asyncio
    async def test_insert_failure_becomes_storage_unavailable(self, counter_collection):
        messages = AsyncMock()
        messages.insert_one.side_effect = ServerSelectionTimeoutError("no servers")
        repo = MongoMessageRepository(message_collection=messages, counter_collection=counter_collection)

        with pytest.raises(StorageUnavailableError) as exc_info:
            await repo.save(Message(id=None, sender="a", content="Hello", timestamp=NOW))
        assert exc_info.value.operation == "save"

    @pytest.mark.asyncio
    async def test_update_failure_becomes_storage_unavailable(self, counter_collection):
        messages = AsyncMock()
        messages.update_one.side_effect = ServerSelectionTimeoutError("no servers")
        repo = MongoMessageRepository(message_collection=messages, counter_collection=counter_collection)

        with pytest.raises(StorageUnavailableError):
            await repo.save(Message(id=4, sender="a", content="X", timestamp=NOW))

    @pytest.mark.asyncio
    async def test_delete_failure_becomes_storage_unavailable(self, counter_collection):
        messages = AsyncMock()
        messages.delete_one.side_effect = ServerSelectionTimeoutError("no servers")
        repo = MongoMessageRepository(message_collection=messages, counter_collection=counter_collection)

        with pytest.raises(StorageUnavailableError) as exc_info:
            await repo.delete(4)
        assert exc_info.value.operation == "delete"
