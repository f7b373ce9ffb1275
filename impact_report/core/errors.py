"""Domain errors raised by services and rendered by the API exception handlers."""
from typing import Any, Dict


class ContentError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message}


class UnknownSection(ContentError):
    """The requested path segment does not name a section."""

    status_code = 404

    def __init__(self, section: str):
        self.section = section
        super().__init__("Unknown section")

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message, "section": self.section}


class SectionNotFound(ContentError):
    """No document is stored for the section under the requested slug."""

    status_code = 404

    def __init__(self, label: str):
        super().__init__(f"{label} not found")


class Unauthorized(ContentError):
    status_code = 401
    message = "Authentication required"


class AuthError(ContentError):
    """Credentials were rejected."""

    status_code = 401
    message = "Invalid credentials"


class InvalidPayload(ContentError):
    status_code = 400
    message = "Invalid request body"


class StorageFailure(ContentError):
    """The database was unreachable or rejected a read/write.

    The client only ever sees the fixed message; details are logged.
    """

    status_code = 500
    message = "Internal server error"
