"""
CodeNotes Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── note_store:    Empty InMemoryNoteStore
    ├── notes_service: NotesService bound to note_store
    ├── test_app:      Fresh FastAPI app with its own empty store
    └── test_client:   HTTPX AsyncClient talking to test_app
"""

import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ["RANDOM_CODE_LENGTH"] = "8"


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def note_store():
    """An empty in-memory store; nothing leaks between tests."""
    from codenotes.store import InMemoryNoteStore
    return InMemoryNoteStore()


@pytest.fixture
def notes_service(note_store):
    from codenotes.services.note_service import NotesService
    return NotesService(note_store)


@pytest.fixture
def sample_note_data():
    """Body of the note used in the create → list → delete scenario."""
    return {"content": "buy milk", "title": "todo"}


@pytest.fixture
def test_app():
    """A new application instance, so every test starts with no notes."""
    from codenotes.main import create_app
    return create_app()


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
