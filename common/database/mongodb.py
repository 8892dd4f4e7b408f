"""
Async MongoDB connection using Motor.

Services receive the Motor database handle and work with raw collections.

Example:
    from common.database import MongoDB

    db = MongoDB()
    await db.connect(uri="mongodb://localhost:27017", database_name="neurosphere")
    await db.ensure_indexes({"moodData": [[("userId", 1), ("timestamp", -1)]]})
"""

import logging
from typing import Optional, Dict, List, Tuple

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

logger = logging.getLogger(__name__)

IndexKeys = List[Tuple[str, int]]


def mask_uri(uri: str) -> str:
    """Strip credentials from a MongoDB URI for logging."""
    return uri.split("@")[-1] if "@" in uri else uri


class MongoDB:
    """Owns the Motor client for one database."""

    def __init__(self):
        self._client: Optional[AsyncIOMotorClient] = None
        self._database_name: Optional[str] = None

    async def connect(
        self,
        uri: str,
        database_name: str,
        server_selection_timeout_ms: int = 5000,
    ) -> None:
        """
        Connect and make sure the server answers.

        Args:
            uri: MongoDB connection string
            database_name: Database holding the entry collections
            server_selection_timeout_ms: How long to wait for a reachable server

        Raises:
            pymongo.errors.PyMongoError: Server unreachable or auth failed
        """
        logger.info(f"Connecting to MongoDB: {mask_uri(uri)}")

        # tz_aware so stored timestamps come back as UTC datetimes
        client = AsyncIOMotorClient(
            uri,
            serverSelectionTimeoutMS=server_selection_timeout_ms,
            tz_aware=True,
        )
        try:
            await client.admin.command("ping")
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            client.close()
            raise

        self._client = client
        self._database_name = database_name
        logger.info(f"Connected to MongoDB database: {database_name}")

    async def disconnect(self) -> None:
        """Close the connection."""
        if self._client:
            logger.info(f"Disconnecting from MongoDB database: {self._database_name}")
            self._client.close()
            self._client = None
            self._database_name = None

    async def ping(self) -> bool:
        """Return True if the server answers a ping."""
        if not self._client:
            return False
        try:
            await self._client.admin.command("ping")
            return True
        except Exception as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    async def ensure_indexes(self, indexes: Dict[str, List[IndexKeys]]) -> None:
        """
        Create missing indexes. Existing identical indexes are left alone.

        Args:
            indexes: collection name -> list of compound index keys
        """
        for collection_name, key_sets in indexes.items():
            for keys in key_sets:
                name = await self.db[collection_name].create_index(keys)
                logger.debug(f"Index ready on {collection_name}: {name}")

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    @property
    def db(self) -> AsyncIOMotorDatabase:
        """Get the Motor database instance."""
        if not self._client or not self._database_name:
            raise RuntimeError("Database not connected")
        return self._client[self._database_name]
