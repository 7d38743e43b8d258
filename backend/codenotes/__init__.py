"""
CodeNotes Backend — Application Package Initializer
====================================================

What: Marks the `codenotes` directory as a Python package.
Who:  Used by uvicorn (codenotes.main:app), pytest, and the import system.

Architecture Note:
    The backend is a small layered service:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, ids, timestamps
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Note dataclass + Pydantic
    ├─────────────────────────────────────┤
    │        Store (In-Memory State)      │  ← Code → collection mapping
    └─────────────────────────────────────┘

    Notes live only as long as the process. Anyone who knows an access code
    can read and change the collection stored under it.
"""

__version__ = "1.0.0"
