"""
Flat/nested shape reconciliation.

Older documents spread grouped content over sibling top-level fields
(``quoteText``, ``quoteAuthor``, ...). Current clients send the grouped
object (``quote: {text, author, ...}``). Reads always return the nested
shape; writes store the nested object and mirror it into the flat fields
so that readers of the old layout keep working.
"""
from typing import Any, Dict, Mapping

from impact_report.models.section import SectionSchema

INTERNAL_FIELDS = ("_id", "slug")


def strip_internal_fields(doc: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop storage-only fields before a document leaves the API."""
    return {key: value for key, value in doc.items() if key not in INTERNAL_FIELDS}


def to_api_shape(schema: SectionSchema, doc: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert a stored document to the nested API shape."""
    if not schema.nested_groups:
        return dict(doc)

    legacy = schema.legacy_flat_fields
    result = {key: value for key, value in doc.items() if key not in legacy}

    for group_name, group in schema.nested_groups.items():
        nested = doc.get(group_name)
        if nested is not None:
            # Nested wins, even when it is an empty object.
            result[group_name] = nested
            continue

        present = [name for name in group.flat_fields if doc.get(name) is not None]
        if not present:
            result.pop(group_name, None)
            continue

        synthesized = {}
        for nested_field, flat_field in group.legacy_fields.items():
            value = doc.get(flat_field)
            synthesized[nested_field] = group.default_for(nested_field) if value is None else value

        if group.visibility_field and doc.get(group.visibility_field) is not None:
            synthesized.setdefault("visible", doc[group.visibility_field])

        result[group_name] = synthesized

    return result


def to_db_shape(schema: SectionSchema, data: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert an API payload to the stored shape (nested plus legacy flat mirror)."""
    result = dict(data)

    for group_name, group in schema.nested_groups.items():
        nested = data.get(group_name)
        if not isinstance(nested, Mapping):
            continue

        # Every flat field is rewritten so none outlives its nested value.
        for nested_field, flat_field in group.legacy_fields.items():
            result[flat_field] = nested.get(nested_field)

        if group.visibility_field and "visible" in nested:
            result[group.visibility_field] = nested["visible"]

    return result
