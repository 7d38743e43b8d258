"""
CodeNotes Backend — Note Store
================================

What:  Holds the mapping from access code to that code's collection of notes.
How:   An abstract NoteStore defines the contract; InMemoryNoteStore keeps
       everything in a plain dict for the lifetime of the process.
Who:   Created once by create_app() and handed to NotesService.
When:  Read on every list, read-and-replaced on every create/delete.

Contract:
    get(code)              → tuple of Notes (empty tuple for unknown codes)
    replace(code, notes)   → overwrite the whole collection for `code`
    lock_for(code)         → asyncio.Lock guarding read-modify-write on `code`

There is no partial-update API. Callers read the full collection, build a
new one, and write it back while holding the code's lock:

    async with store.lock_for(code):
        notes = await store.get(code)
        await store.replace(code, notes + (new_note,))

Without the lock two writers on the same code could both read the same
snapshot and the second replace would drop the first writer's note.
Different codes have different locks, so writers on distinct codes never
wait for each other.
"""

import asyncio
import logging
import weakref
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Tuple

from fastapi import Request

from codenotes.models.note import Note

logger = logging.getLogger(__name__)


class NoteStore(ABC):
    """
    Abstract interface for the access-code → collection mapping.

    Implementations must:
        - never raise for unknown codes (an unknown code is an empty collection)
        - return snapshots that callers cannot use to mutate stored state
        - hand out one lock object per code for as long as it is referenced
    """

    @abstractmethod
    async def get(self, code: str) -> Tuple[Note, ...]:
        """Return the collection stored under `code`, or an empty tuple."""
        ...

    @abstractmethod
    async def replace(self, code: str, notes: Iterable[Note]) -> None:
        """Overwrite the entire collection stored under `code`."""
        ...

    @abstractmethod
    def lock_for(self, code: str) -> asyncio.Lock:
        """Return the lock that serializes writes to `code`."""
        ...

    @abstractmethod
    def stats(self) -> Dict[str, int]:
        """Return {"collections": ..., "notes": ...} for health reporting."""
        ...


class InMemoryNoteStore(NoteStore):
    """
    Process-local NoteStore backed by a dict.

    Collections are stored as tuples so a snapshot returned by get() stays
    valid even after a later replace() for the same code.

    Thread Safety:
        Safe for a single asyncio event loop (uvicorn's default). Not shared
        between worker processes; each process has its own notes.

    Locks are held weakly: a code's lock disappears once no writer holds
    or waits on it, so codes that only ever see no-op deletes leave nothing
    behind.
    """

    def __init__(self) -> None:
        self._collections: Dict[str, Tuple[Note, ...]] = {}
        # An entry lives only while a holder or waiter references the lock
        self._locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = weakref.WeakValueDictionary()

    async def get(self, code: str) -> Tuple[Note, ...]:
        return self._collections.get(code, ())

    async def replace(self, code: str, notes: Iterable[Note]) -> None:
        self._collections[code] = tuple(notes)
        logger.debug("Collection %r now holds %d notes", code, len(self._collections[code]))

    def lock_for(self, code: str) -> asyncio.Lock:
        lock = self._locks.get(code)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[code] = lock
        return lock

    def lock_count(self) -> int:
        """Number of per-code locks currently in use."""
        return len(self._locks)

    def stats(self) -> Dict[str, int]:
        return {
            "collections": len(self._collections),
            "notes": sum(len(notes) for notes in self._collections.values()),
        }


# ── Store Dependency ──────────────────────────────────────────────────────
def get_note_store(request: Request) -> NoteStore:
    """
    FastAPI dependency returning the store attached to the running app.

    create_app() builds one store per application instance and keeps it on
    app.state, so every test that builds its own app gets an empty store.
    """
    return request.app.state.note_store
