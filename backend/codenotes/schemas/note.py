"""
CodeNotes Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract between frontend and backend.
How:   FastAPI uses these models to validate request bodies, serialize responses,
       and generate Swagger/OpenAPI documentation automatically.
Who:   Used by route handlers as request bodies and response models.

Design Decision:
    NoteCreateRequest leaves `content` optional at the schema level. A
    missing or empty body field is a business-rule failure reported by
    NotesService as a 400 validation_error, the same response the client
    gets for "content": "".
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from codenotes.models.note import Note


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteCreateRequest(BaseModel):
    """Body of POST /api/notes/{code}."""
    content: Optional[str] = Field(default=None, description="Note body (required, non-empty)")
    title: Optional[str] = Field(default=None, description="Optional title; stored as \"\" when omitted")


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  Full representation of a stored note.
    Who:   Item type of every notes payload.
    """
    id: str = Field(description="Opaque unique note identifier")
    title: str = Field(description="Note title, empty string if none was given")
    content: str = Field(description="Note body")
    timestamp: int = Field(description="Creation time in milliseconds since the Unix epoch")

    @classmethod
    def from_note(cls, note: Note) -> "NoteResponse":
        return cls(**note.to_dict())


class NoteListResponse(BaseModel):
    """Returned by GET /api/notes/{code}."""
    notes: List[NoteResponse] = Field(description="Notes stored under the access code")


class NoteCreatedResponse(BaseModel):
    """Returned by POST /api/notes/{code} with HTTP 201 Created."""
    note: NoteResponse = Field(description="The created note with its assigned id and timestamp")


class DeleteResponse(BaseModel):
    """
    Returned by DELETE /api/notes/{code}.

    `success` is true whether or not a note with that id existed.
    """
    success: bool = Field(default=True, description="Always true; deletes are idempotent")


class RandomCodeResponse(BaseModel):
    """Returned by GET /api/codes/random."""
    code: str = Field(description="Freshly generated access code")


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models — Consistent error format across all endpoints
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "validation_error",
            "message": "Content is required",
            "details": {"field": "content"},
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer checks."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    collections: int = Field(description="Number of access codes holding a collection")
    notes: int = Field(description="Total number of notes across all collections")
    uptime_seconds: float = Field(description="Seconds since service started")
