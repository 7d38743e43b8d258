"""
CodeNotes Backend — Note Domain Model
=======================================

What:  The immutable record stored for every note in a collection.
How:   A frozen dataclass; the store keeps tuples of these per access code.
Who:   Built by NotesService, held by the NoteStore, serialized by schemas.

Fields:
    id:        Opaque unique string, assigned at creation
    title:     Optional short title ("" when the client sent none)
    content:   Required note body
    timestamp: Creation time in integer milliseconds since the Unix epoch
"""

import time
from dataclasses import dataclass
from typing import Any, Dict


def now_ms() -> int:
    """Current wall-clock time in integer milliseconds since epoch."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class Note:
    id: str
    title: str
    content: str
    timestamp: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:
        """Developer-friendly representation; content is left out of logs."""
        return f"<Note(id={self.id}, timestamp={self.timestamp})>"
