"""Database models and connection setup."""

from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING
from bson.errors import BSONError
from pymongo.errors import PyMongoError

from utils.errors import StorageUnavailable
from utils.logger import setup_logger

logger = setup_logger(__name__)

USERS = "users"
SUBSCRIPTIONS = "subscriptions"
APPOINTMENTS = "appointments"
DIET_PLANS = "dietPlans"
CHAT_HISTORY = "chatHistory"

# Driver failures plus documents that cannot be encoded (UnicodeEncodeError is a ValueError)
STORAGE_ERRORS = (PyMongoError, BSONError, ValueError)


class Database:
    """Owns the MongoDB client for the lifetime of the process.

    Exposes the two collection-scoped operations the routes need. Driver
    errors surface as ``StorageUnavailable``.
    """

    def __init__(self, url: str, db_name: str):
        self.url = url
        self.db_name = db_name
        self.client: Optional[AsyncIOMotorClient] = None
        self.db = None

    async def connect(self):
        """Create the client, verify the server is reachable and prepare indexes."""
        try:
            self.client = AsyncIOMotorClient(self.url)
            self.db = self.client[self.db_name]
            await self.client.admin.command("ping")
            collections = await self.db.list_collection_names()
        except PyMongoError as e:
            raise StorageUnavailable(f"Failed to connect to MongoDB: {e}") from e

        logger.info(f"Connected to MongoDB database: {self.db_name}")
        logger.info(f"Collections: {collections}")
        await self.ensure_indexes()

    async def ensure_indexes(self):
        """Lookup indexes for email queries. Not unique; duplicates are checked by the routes."""
        try:
            await self.db[USERS].create_index([("email", ASCENDING)])
            await self.db[SUBSCRIPTIONS].create_index([("email", ASCENDING)])
        except PyMongoError as e:
            logger.warning(f"Failed to create indexes: {e}")

    def close(self):
        """Close database connection."""
        if self.client:
            self.client.close()
            logger.info("Disconnected from MongoDB")

    def _collection(self, name: str):
        if self.db is None:
            raise StorageUnavailable("Database is not connected")
        return self.db[name]

    async def insert_one(self, collection: str, document: Dict[str, Any]) -> str:
        """Insert a copy of ``document`` and return the generated id as a string."""
        try:
            result = await self._collection(collection).insert_one(dict(document))
        except STORAGE_ERRORS as e:
            raise StorageUnavailable(f"Insert into {collection} failed: {e}") from e
        return str(result.inserted_id)

    async def find_one(self, collection: str, filter: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Return the first matching document, or None."""
        try:
            return await self._collection(collection).find_one(filter)
        except STORAGE_ERRORS as e:
            raise StorageUnavailable(f"Lookup in {collection} failed: {e}") from e
