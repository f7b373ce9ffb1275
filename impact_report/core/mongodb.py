"""
MongoDB connection handle.

One handle is created per process by ``init_store`` and passed explicitly to
the services that need it. The underlying client is created on first use.
"""
import asyncio
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from impact_report.core.config import Settings, settings

logger = logging.getLogger(__name__)


class MongoDB:
    """MongoDB connection manager (connect on first use, reuse for process lifetime)."""

    def __init__(self, config: Settings):
        self.config = config
        self.client: Optional[AsyncIOMotorClient] = None
        self.database: Optional[AsyncIOMotorDatabase] = None
        self._lock = asyncio.Lock()

    @property
    def connected(self) -> bool:
        return self.database is not None

    async def get_database(self) -> AsyncIOMotorDatabase:
        """Return the database, connecting first if needed."""
        if self.database is not None:
            return self.database

        async with self._lock:
            # Another coroutine may have connected while we waited.
            if self.database is not None:
                return self.database

            if not self.config.mongo_uri:
                raise RuntimeError("MONGO_URI is not defined")

            self.client = AsyncIOMotorClient(
                self.config.mongo_uri,
                serverSelectionTimeoutMS=self.config.mongo_server_selection_timeout_ms,
                socketTimeoutMS=self.config.mongo_socket_timeout_ms,
                maxPoolSize=self.config.mongo_max_pool_size,
                minPoolSize=0,
                retryWrites=True,
                retryReads=True,
            )
            self.database = self.client[self.config.mongo_db_name]
            logger.info(f"Connected to MongoDB database '{self.config.mongo_db_name}'")
            return self.database

    async def get_collection(self, collection_name: str):
        """Get a collection from the database."""
        database = await self.get_database()
        return database[collection_name]

    async def disconnect(self):
        """Disconnect from MongoDB."""
        if self.client:
            self.client.close()
            logger.info("Disconnected from MongoDB")
        self.client = None
        self.database = None


def init_store(config: Settings = settings) -> MongoDB:
    """Create the process-wide store handle."""
    if not config.mongo_uri:
        logger.warning("MONGO_URI is not set. Set it in your environment before serving requests.")
    return MongoDB(config)


# Process-wide handle, created at import and connected lazily
mongodb = init_store()


def get_store() -> MongoDB:
    """FastAPI dependency returning the store handle."""
    return mongodb
