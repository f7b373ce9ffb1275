"""
Generic GET/PUT handling for every report section.

Sections differ only in their SectionSchema, so one router serves all of
them: resolve the schema, then read or sanitize/reconcile/upsert.
"""
from typing import Any, Dict, List, Mapping, Optional
import logging

from impact_report.core.errors import InvalidPayload, SectionNotFound, UnknownSection
from impact_report.models.section import SectionSchema
from impact_report.models.sections import SECTIONS
from impact_report.services.content_store import ContentStore
from impact_report.services.reconciler import strip_internal_fields, to_api_shape, to_db_shape
from impact_report.services.sanitizer import sanitize

logger = logging.getLogger(__name__)


class ContentRouter:
    """Dispatch section reads and writes to the content store."""

    def __init__(self, store: ContentStore, sections: Optional[Mapping[str, SectionSchema]] = None):
        self.store = store
        self.sections = SECTIONS if sections is None else sections

    def resolve(self, segment: str) -> SectionSchema:
        schema = self.sections.get(segment)
        if schema is None:
            raise UnknownSection(segment)
        return schema

    def list_sections(self) -> List[Dict[str, str]]:
        return [
            {"section": schema.name, "collection": schema.collection}
            for schema in self.sections.values()
        ]

    def _present(self, schema: SectionSchema, doc: Mapping[str, Any]) -> Dict[str, Any]:
        return to_api_shape(schema, strip_internal_fields(doc))

    async def get(self, segment: str, slug: str) -> Dict[str, Any]:
        schema = self.resolve(segment)
        logger.info(f"[{segment}] GET (slug={slug})")

        doc = await self.store.find_by_slug(schema.collection, slug)
        if doc is None:
            logger.warning(f"[{segment}] GET not found (slug={slug})")
            raise SectionNotFound(schema.label)

        data = self._present(schema, doc)
        logger.info(f"[{segment}] GET success (slug={slug}, fields={sorted(data)})")
        return {"data": data}

    async def put(self, segment: str, slug: str, body: Any) -> Dict[str, Any]:
        schema = self.resolve(segment)

        if not isinstance(body, Mapping):
            raise InvalidPayload("Request body must be a JSON object")

        logger.info(f"[{segment}] PUT request (slug={slug}, incomingKeys={sorted(body)})")

        sanitized = sanitize(schema, body)
        if not sanitized:
            # Nothing writable in the payload: report current state unchanged.
            logger.info(f"[{segment}] PUT no changes (slug={slug})")
            doc = await self.store.find_by_slug(schema.collection, slug)
            return {"data": self._present(schema, doc) if doc is not None else {}}

        fields = to_db_shape(schema, sanitized)
        logger.info(f"[{segment}] PUT sanitized (slug={slug}, sanitizedKeys={sorted(fields)})")

        saved = await self.store.upsert_by_slug(schema.collection, slug, fields)
        data = self._present(schema, saved or {})
        logger.info(f"[{segment}] PUT success (slug={slug}, updatedFields={sorted(data)})")
        return {"data": data}
