"""
CodeNotes Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the error scenarios the core knows.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    CodeNotesError (base)        → 500 Internal Server Error
    └── ValidationError          → 400 Bad Request (client can fix)

Soft outcomes that are NOT exceptions:
    - Listing an access code nobody has written to → empty collection
    - Deleting a note id that does not exist       → successful no-op

All validation happens before the store is touched, so a raised error
never leaves a collection half-updated.
"""

from typing import Any, Dict, Optional


class CodeNotesError(Exception):
    """
    Base exception for all CodeNotes application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(CodeNotesError):
    """
    Raised when a required request field is missing or empty.

    When:    `content` absent/empty on create, note id absent/empty on delete.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Content is required",
            "details": {"field": "content"}
        }
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
        super().__init__(message=message, context=ctx)
        self.field = field
