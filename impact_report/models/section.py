"""
Section schema definitions.

A section schema declares which fields a section document may carry and,
for sections that still have documents written in the old flat layout,
how each nested group maps onto its legacy flat fields.
"""
import enum
from typing import Any, Dict, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FieldKind(str, enum.Enum):
    """Value kind of a top-level section field."""

    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    OBJECT = "object"
    OBJECT_LIST = "object_list"
    STRING_LIST = "string_list"
    ANY = "any"


class NestedGroup(BaseModel):
    """A nested object field together with its legacy flat counterparts."""

    model_config = ConfigDict(frozen=True)

    # nested field name -> legacy flat field name
    legacy_fields: Dict[str, str]
    # nested field name -> value used when the flat field is missing
    defaults: Dict[str, Any] = Field(default_factory=dict)
    # legacy flat field carrying the group's `visible` flag
    visibility_field: Optional[str] = None

    @property
    def flat_fields(self) -> FrozenSet[str]:
        names = set(self.legacy_fields.values())
        if self.visibility_field:
            names.add(self.visibility_field)
        return frozenset(names)

    def default_for(self, nested_field: str) -> Any:
        value = self.defaults.get(nested_field, "")
        # Lists are handed out fresh so callers can't share state.
        return list(value) if isinstance(value, list) else value


class SectionSchema(BaseModel):
    """Static description of one report section."""

    model_config = ConfigDict(frozen=True)

    name: str  # external path segment, e.g. "flex-a"
    collection: str  # backing collection, e.g. "flex_a"
    label: str  # human readable, used in "not found" messages
    field_kinds: Dict[str, FieldKind]
    nested_groups: Dict[str, NestedGroup] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_legacy_fields(self) -> "SectionSchema":
        seen: Dict[str, str] = {}
        for group_name, group in self.nested_groups.items():
            for flat_name in list(group.legacy_fields.values()) + [group.visibility_field]:
                if flat_name is None:
                    continue
                if flat_name in seen:
                    raise ValueError(
                        f"Legacy field '{flat_name}' of section '{self.name}' is mapped by "
                        f"both '{seen[flat_name]}' and '{group_name}'"
                    )
                if flat_name in self.field_kinds or flat_name in self.nested_groups:
                    raise ValueError(
                        f"Legacy field '{flat_name}' of section '{self.name}' shadows a declared field"
                    )
                seen[flat_name] = group_name
        return self

    @property
    def legacy_flat_fields(self) -> FrozenSet[str]:
        names: set = set()
        for group in self.nested_groups.values():
            names |= group.flat_fields
        return frozenset(names)

    @property
    def allowed_keys(self) -> FrozenSet[str]:
        """Every key a client may write: declared fields, nested groups and legacy flat fields."""
        return frozenset(self.field_kinds) | frozenset(self.nested_groups) | self.legacy_flat_fields

    def kind_of(self, key: str) -> FieldKind:
        if key in self.nested_groups:
            return FieldKind.OBJECT
        return self.field_kinds.get(key, FieldKind.ANY)
