"""
MWS Query - Input Errors
"""
from __future__ import annotations


class MWSQueryError(ValueError):
    """Base error for bad signing input. `field` names the offending input."""

    kind = "invalid_input"

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        self.message = message or f"{field} is invalid"
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"field": self.field, "error": self.kind, "message": self.message}


class MissingCredential(MWSQueryError):
    kind = "missing_credential"

    def __init__(self, field: str, message: str | None = None):
        super().__init__(field, message or f"{field} must not be empty")


class MissingRequired(MWSQueryError):
    kind = "missing_required"

    def __init__(self, field: str, message: str | None = None):
        super().__init__(field, message or f"{field} is required")


class InvalidUriPath(MWSQueryError):
    kind = "invalid_uri_path"

    def __init__(self, field: str = "uri_path", message: str | None = None):
        super().__init__(field, message or f"{field} must start with '/'")


class InvalidParameter(MWSQueryError):
    kind = "invalid_parameter"
