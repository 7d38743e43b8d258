"""
CodeNotes Backend — Notes Route Handlers
==========================================

What:  HTTP mapping of the three collection operations, scoped by access code.
How:   Extracts path/query/body values, delegates to NotesService, wraps the
       result in the response schema.
Who:   Called by the frontend notes page for a given code.

Routes:
    GET    /api/notes/{code}             list notes (optional ?sort=newest)
    POST   /api/notes/{code}             create a note from {content, title}
    DELETE /api/notes/{code}?id=<id>     delete a note (idempotent)
    DELETE /api/notes/{code}/{note_id}   same, id in the path

Validation failures surface as 400 through the global ValidationError
handler; deleting an unknown id is reported as success.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from codenotes.schemas.note import (
    DeleteResponse,
    ErrorResponse,
    NoteCreatedResponse,
    NoteCreateRequest,
    NoteListResponse,
    NoteResponse,
)
from codenotes.services.note_service import NotesService, get_notes_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Notes"])


@router.get(
    "/notes/{code}",
    response_model=NoteListResponse,
    summary="List the notes stored under an access code",
    description=(
        "Returns every note in the collection for the given code. Codes that "
        "have never been written to return an empty list."
    ),
)
async def list_notes(
    code: str,
    response: Response,
    sort: str = Query(
        default="insertion",
        pattern="^(insertion|newest)$",
        description="'insertion' (storage order) or 'newest' (most recent first)",
    ),
    service: NotesService = Depends(get_notes_service),
) -> NoteListResponse:
    notes = await service.list_notes(code, sort=sort)

    response.headers["X-Total-Count"] = str(len(notes))
    # Collections change whenever anyone holding the code writes
    response.headers["Cache-Control"] = "no-store"

    return NoteListResponse(notes=[NoteResponse.from_note(n) for n in notes])


@router.post(
    "/notes/{code}",
    status_code=201,
    response_model=NoteCreatedResponse,
    responses={
        201: {"description": "Note created", "model": NoteCreatedResponse},
        400: {"description": "Content missing or empty", "model": ErrorResponse},
    },
    summary="Add a note to an access code's collection",
)
async def create_note(
    code: str,
    payload: Optional[NoteCreateRequest] = Body(default=None),
    service: NotesService = Depends(get_notes_service),
) -> NoteCreatedResponse:
    """
    Create a note under `code`.

    The collection is created implicitly if this is the first note for the
    code. Returns the stored note including its generated id and timestamp.
    """
    note = await service.create_note(
        code,
        content=payload.content if payload else None,
        title=payload.title if payload else None,
    )
    return NoteCreatedResponse(note=NoteResponse.from_note(note))


@router.delete(
    "/notes/{code}",
    response_model=DeleteResponse,
    responses={
        200: {"description": "Note removed, or it was already gone", "model": DeleteResponse},
        400: {"description": "Note id missing or empty", "model": ErrorResponse},
    },
    summary="Delete a note by id (query parameter)",
)
async def delete_note(
    code: str,
    note_id: Optional[str] = Query(default=None, alias="id", description="Id of the note to delete"),
    service: NotesService = Depends(get_notes_service),
) -> DeleteResponse:
    await service.delete_note(code, note_id)
    return DeleteResponse(success=True)


@router.delete(
    "/notes/{code}/{note_id}",
    response_model=DeleteResponse,
    summary="Delete a note by id (path segment)",
)
async def delete_note_by_path(
    code: str,
    note_id: str,
    service: NotesService = Depends(get_notes_service),
) -> DeleteResponse:
    await service.delete_note(code, note_id)
    return DeleteResponse(success=True)
