"""
Notes API Backend — FastAPI Dependencies
==========================================

What:  Provides the NotesService instance to route handlers.
Why:   The service (and the store inside it) is owned by the application
       object built in create_app(), not by a module-level global. Each app,
       including each test app, gets its own isolated store.
How:   create_app() puts the service on `app.state.notes_service`; routes
       declare `service: NotesService = Depends(get_notes_service)`.
"""

from fastapi import Request

from notes_api.services.note_service import NotesService


def get_notes_service(request: Request) -> NotesService:
    """Returns the NotesService attached to the running application."""
    return request.app.state.notes_service
