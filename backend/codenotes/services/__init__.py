# Services package init
"""
CodeNotes Backend — Services Layer
====================================

What:  Business logic layer sitting between routes (HTTP) and the note store.
How:   Services accept plain values, apply business rules, and return
       domain objects. Routes receive them through FastAPI dependencies.

Service Inventory:
    - NotesService: list / create / delete notes under an access code
    - CodeService:  random access code generation
"""
