"""Allow-list filtering of section request bodies."""
import logging
from typing import Any, Dict, Mapping

from impact_report.models.section import FieldKind, SectionSchema

logger = logging.getLogger(__name__)


def sanitize(schema: SectionSchema, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Keep only the keys the section schema allows.

    Unknown keys are dropped without error so older and newer admin clients
    can keep talking to the same API. String-list fields lose any non-string
    elements. An empty result means "no changes requested".
    """
    if not data:
        return {}

    sanitized: Dict[str, Any] = {}
    for key in schema.allowed_keys:
        if key not in data:
            continue
        value = data[key]
        if schema.kind_of(key) is FieldKind.STRING_LIST and isinstance(value, list):
            value = [item for item in value if isinstance(item, str)]
        sanitized[key] = value

    dropped = [key for key in data if key not in sanitized]
    if dropped:
        logger.debug(f"[{schema.name}] dropped unknown fields: {sorted(dropped)}")

    return sanitized
