# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument

# Local application imports
from ...domain.constants import CounterFields


class MongoSequence:
    """Atomic integer ID allocator backed by a counters document"""

    def __init__(self, counter_collection: AsyncIOMotorCollection, name: str) -> None:
        self.counter_collection = counter_collection
        self.name = name

    async def next_id(self) -> int:
        """
        Increment and return the sequence value (first value is 1)

        The increment is a single find_one_and_update, so concurrent callers
        never receive the same ID.
        """
        document = await self.counter_collection.find_one_and_update(
            {CounterFields.MONGO_ID: self.name},
            {"$inc": {CounterFields.SEQUENCE: 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(document[CounterFields.SEQUENCE])
