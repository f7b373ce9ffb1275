"""
Impact report section endpoints.

Every section is served by the same two routes; the section table decides
which collection and allow-list apply.
"""
import json

from fastapi import APIRouter, Depends, Query, Request

from impact_report.core.auth import require_admin
from impact_report.core.config import settings
from impact_report.core.errors import InvalidPayload
from impact_report.core.mongodb import get_store
from impact_report.schemas.content import SectionListResponse, SectionResponse
from impact_report.services.content_router import ContentRouter
from impact_report.services.content_store import ContentStore

router = APIRouter(prefix="/impact", tags=["impact"])


def get_content_router(store=Depends(get_store)) -> ContentRouter:
    return ContentRouter(ContentStore(store))


@router.get("/sections", response_model=SectionListResponse)
async def list_sections(content: ContentRouter = Depends(get_content_router)):
    """List the sections this API serves."""
    return {"sections": content.list_sections()}


@router.get("/{section}", response_model=SectionResponse)
async def get_section(
    section: str,
    slug: str = Query(settings.default_slug),
    content: ContentRouter = Depends(get_content_router),
):
    """Get a section's content for a report slug."""
    return await content.get(section, slug)


@router.put("/{section}", response_model=SectionResponse)
async def update_section(
    request: Request,
    section: str,
    slug: str = Query(settings.default_slug),
    _admin: str = Depends(require_admin),
    content: ContentRouter = Depends(get_content_router),
):
    """
    Update a section's content for a report slug.

    Only allow-listed fields are stored; unknown fields are ignored.
    Creates the document on first write.
    """
    content.resolve(section)

    raw = await request.body()
    if not raw:
        raise InvalidPayload("Request body is required")
    try:
        body = json.loads(raw)
    except ValueError:
        raise InvalidPayload("Request body must be valid JSON")

    return await content.put(section, slug, body)
