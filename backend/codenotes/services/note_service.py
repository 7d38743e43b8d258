"""
CodeNotes Backend — Notes Service (Business Logic)
====================================================

What:  The three operations on a shared collection: list, create, delete.
How:   Validates input, assigns ids and timestamps, and performs every
       write as a locked read-modify-write of the code's whole collection.
Who:   Called by the /api/notes route handlers.
When:  Once per request; the service itself holds no state besides its store.

Operation Contract:
    list_notes(code)            → collection (empty for unknown codes)
    create_note(code, content)  → the new Note, or ValidationError
    delete_note(code, note_id)  → always succeeds for a non-empty id,
                                  even when nothing matched

Error Handling Strategy:
    All checks run before the store is touched. A ValidationError therefore
    never leaves a collection modified, and nothing is retried internally.
"""

import logging
import uuid
from typing import Optional, Sequence, Tuple

from fastapi import Depends

from codenotes.exceptions import ValidationError
from codenotes.models.note import Note, now_ms
from codenotes.store import NoteStore, get_note_store

logger = logging.getLogger(__name__)

SORT_INSERTION = "insertion"
SORT_NEWEST = "newest"


def _new_note_id(taken: Sequence[str] = ()) -> str:
    note_id = uuid.uuid4().hex
    while note_id in taken:
        note_id = uuid.uuid4().hex
    return note_id


class NotesService:
    """
    Business logic layer for note operations on one store.

    Responsibilities:
        - list_notes(): Read a code's collection, optionally newest first
        - create_note(): Validate, build a Note, append it to the collection
        - delete_note(): Validate, drop the note with the given id
    """

    def __init__(self, store: NoteStore):
        self.store = store

    async def list_notes(self, code: str, sort: str = SORT_INSERTION) -> Tuple[Note, ...]:
        """
        Return the notes stored under `code`.

        Args:
            code: Access code; any string is accepted
            sort: "insertion" (storage order) or "newest" (timestamp descending)

        Returns:
            Tuple of Notes. Unknown codes yield an empty tuple.
        """
        notes = await self.store.get(code)
        if sort == SORT_NEWEST:
            # sorted() is stable, so notes sharing a timestamp keep insertion order
            return tuple(sorted(notes, key=lambda n: n.timestamp, reverse=True))
        return notes

    async def create_note(
        self,
        code: str,
        content: Optional[str],
        title: Optional[str] = None,
    ) -> Note:
        """
        Append a new note to the collection stored under `code`.

        Any falsy `content` (None or "") is rejected; trimming whitespace is
        left to the caller. A missing title is stored as "".

        Raises:
            ValidationError: content is missing or empty
        """
        if not content:
            raise ValidationError(message="Content is required", field="content")

        async with self.store.lock_for(code):
            existing = await self.store.get(code)
            note = Note(
                id=_new_note_id([n.id for n in existing]),
                title=title or "",
                content=content,
                timestamp=now_ms(),
            )
            await self.store.replace(code, existing + (note,))

        logger.info("Note %s created under code %r (%d notes)", note.id, code, len(existing) + 1)
        return note

    async def delete_note(self, code: str, note_id: Optional[str]) -> bool:
        """
        Remove the note with `note_id` from the collection stored under `code`.

        Deleting an id that is not present is a successful no-op.

        Returns:
            True if a note was removed, False if nothing matched.

        Raises:
            ValidationError: note_id is missing or empty
        """
        if not note_id:
            raise ValidationError(message="Note ID is required", field="id")

        async with self.store.lock_for(code):
            existing = await self.store.get(code)
            remaining = tuple(n for n in existing if n.id != note_id)
            removed = len(remaining) != len(existing)
            if removed:
                await self.store.replace(code, remaining)

        if removed:
            logger.info("Note %s deleted from code %r", note_id, code)
        else:
            logger.debug("Delete of unknown note %s under code %r ignored", note_id, code)
        return removed


# ── Service Dependency ────────────────────────────────────────────────────
def get_notes_service(store: NoteStore = Depends(get_note_store)) -> NotesService:
    """FastAPI dependency: a NotesService bound to the app's store."""
    return NotesService(store)
