"""
Notes API Backend — Classified Exception Hierarchy
====================================================

What:  Application-specific exceptions, each tagged with an ErrorKind.
Why:   The kind is fixed when the error is raised, so the HTTP boundary maps
       errors to status codes by switching on the kind instead of reading
       message text or ad hoc attributes.
How:   Every exception carries a user-facing message, an ErrorKind, and an
       optional context dict. A single handler in main.py turns the kind into
       a status code and returns `{"error": message}`.
Who:   Raised by the note store and the notes service; caught by main.py.

Exception Hierarchy:
    NotesAppError (base)
    ├── ValidationError   → ErrorKind.VALIDATION → 400 Bad Request
    └── NotFoundError     → ErrorKind.NOT_FOUND  → 404 Not Found

Anything else that escapes a route is an unexpected fault: it is logged with
its traceback and answered with a generic 500.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Classification attached to every NotesAppError at creation."""

    VALIDATION = "validation_error"
    NOT_FOUND = "not_found"


class NotesAppError(Exception):
    """
    Base exception for all Notes API errors.

    Attributes:
        message:  User-facing error description (returned in the API response)
        kind:     ErrorKind used by the boundary to pick the status code
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.kind = kind
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotesAppError):
    """
    Raised when client input fails a business rule.

    When:    Missing or blank title, non-string fields, empty update payloads.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Validation failed: \\"title\\" is required and must be a non-empty string."}
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, kind=ErrorKind.VALIDATION, context=ctx)
        self.field = field


class NotFoundError(NotesAppError):
    """
    Raised when an operation references an identifier that does not exist.

    When:    PUT or DELETE /api/notes/{id} with an unknown id; GET is converted
             into this error by the route when the store returns None.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, kind=ErrorKind.NOT_FOUND, context=ctx)
        self.resource_id = resource_id
