"""
Slug-addressed section storage.
Each section lives in its own collection, one document per slug.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional
import logging

from pymongo.errors import PyMongoError

from impact_report.core.errors import StorageFailure

logger = logging.getLogger(__name__)


class ContentStore:
    """Find and upsert section documents by slug."""

    def __init__(self, handle):
        # Anything with an async get_collection(name), normally core.mongodb.MongoDB
        self.handle = handle

    async def find_by_slug(self, collection: str, slug: str) -> Optional[Dict[str, Any]]:
        """Return the document stored under `slug`, or None."""
        try:
            coll = await self.handle.get_collection(collection)
            return await coll.find_one({"slug": slug})
        except PyMongoError as e:
            logger.error(f"Failed to read {collection}/{slug}: {e}", exc_info=True)
            raise StorageFailure() from e

    async def upsert_by_slug(
        self, collection: str, slug: str, fields: Mapping[str, Any]
    ) -> Dict[str, Any]:
        """
        Set every top-level key of `fields` on the slug's document, creating it
        if needed, and return the document as stored.

        Nested objects are replaced wholesale, never merged. `slug` and
        `updatedAt` are always written by the store.
        """
        update = {
            "$set": {
                **fields,
                "slug": slug,
                "updatedAt": datetime.now(timezone.utc),
            }
        }

        try:
            coll = await self.handle.get_collection(collection)
            await coll.update_one({"slug": slug}, update, upsert=True)
            saved = await coll.find_one({"slug": slug})
        except PyMongoError as e:
            logger.error(f"Failed to upsert {collection}/{slug}: {e}", exc_info=True)
            raise StorageFailure() from e

        return saved
