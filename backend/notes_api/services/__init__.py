# Services package init
"""
Notes API Backend — Services Layer
====================================

What:  Business logic layer sitting between routes (HTTP) and the note store.
Why:   Separation of concerns — routes handle HTTP, services handle business rules.

Service Inventory:
    - NotesService: Validates and normalizes note payloads, delegates to a NoteStore
"""
