from .section import FieldKind, NestedGroup, SectionSchema
from .sections import SECTIONS
from .user import User, USERS_COLLECTION

__all__ = [
    "FieldKind",
    "NestedGroup",
    "SectionSchema",
    "SECTIONS",
    "User",
    "USERS_COLLECTION",
]
