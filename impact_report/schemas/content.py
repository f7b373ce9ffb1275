"""Section content schemas."""
from pydantic import BaseModel
from typing import Any, Dict, List


class SectionResponse(BaseModel):
    """Envelope for section reads and writes."""
    data: Dict[str, Any]


class SectionInfo(BaseModel):
    section: str
    collection: str


class SectionListResponse(BaseModel):
    sections: List[SectionInfo]
