# Routes package init
"""
CodeNotes Backend — API Routes Package
========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - notes.py:   GET/POST/DELETE /api/notes/{code}
                  DELETE          /api/notes/{code}/{note_id}
    - codes.py:   GET  /api/codes/random
    - health.py:  GET  /health

Design Principle:
    Routes stay thin: they pull values out of the request, call a service,
    and shape the response. Business rules live in the services.
"""
