"""
CodeNotes Backend — Access Code Route
=======================================

What:  GET /api/codes/random hands out a fresh random access code.
Who:   Called by the landing page's "Generate Random Code" button.
"""

from fastapi import APIRouter

from codenotes.schemas.note import RandomCodeResponse
from codenotes.services.code_service import code_service

router = APIRouter(prefix="/api", tags=["Codes"])


@router.get(
    "/codes/random",
    response_model=RandomCodeResponse,
    summary="Generate a random access code",
)
async def random_code() -> RandomCodeResponse:
    return RandomCodeResponse(code=code_service.generate_code())
