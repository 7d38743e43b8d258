"""
CodeNotes Backend — Access Code Generator
===========================================

What:  Produces fresh random access codes for users who don't want to pick one.
How:   Draws lowercase base-36 characters from the `secrets` CSPRNG.
Who:   Called by GET /api/codes/random (the "Generate Random Code" button).

A generated code is only a suggestion: nothing is reserved in the store,
and a collection appears the first time somebody writes under the code.
"""

import secrets
import string

from codenotes.config import settings

CODE_ALPHABET = string.digits + string.ascii_lowercase


class CodeService:
    def __init__(self, length: int = 0):
        self.length = length or settings.random_code_length

    def generate_code(self) -> str:
        return "".join(secrets.choice(CODE_ALPHABET) for _ in range(self.length))


# ── Singleton Instance ────────────────────────────────────────────────────
code_service = CodeService()
