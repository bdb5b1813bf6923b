"""
Notes API Backend — Notes Route Handlers
==========================================

What:  CRUD endpoints under /api/notes.
How:   Extract path/body, delegate to NotesService, wrap results in
       `{"data": ...}`. Errors propagate to the handlers in main.py.

Route Inventory:
    GET    /api/notes        list all notes
    GET    /api/notes/{id}   fetch one note (404 when missing)
    POST   /api/notes        create a note (201)
    PUT    /api/notes/{id}   partial update
    DELETE /api/notes/{id}   delete, returns the removed note
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Path

from notes_api.dependencies import get_notes_service
from notes_api.exceptions import NotFoundError
from notes_api.schemas.note import (
    DataResponse,
    ErrorResponse,
    NoteCreateBody,
    NoteResponse,
    NoteUpdateBody,
    request_body_doc,
)
from notes_api.services.note_service import NotesService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/notes", tags=["Notes"])


@router.get(
    "",
    response_model=DataResponse[List[NoteResponse]],
    summary="List notes",
    description="Returns every note in insertion order.",
)
async def list_notes(
    service: NotesService = Depends(get_notes_service),
) -> DataResponse[List[NoteResponse]]:
    notes = service.list_notes()
    return DataResponse[List[NoteResponse]](data=[NoteResponse.from_note(n) for n in notes])

@router.get(
    "/{note_id}",
    response_model=DataResponse[NoteResponse],
    responses={
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Get note by ID",
)
async def get_note(
    note_id: str = Path(..., description="Note ID"),
    service: NotesService = Depends(get_notes_service),
) -> DataResponse[NoteResponse]:
    """
    The service signals a missing note with None. It is raised here as a
    NotFoundError so every 404 leaves through the same exception handler.
    """
    note = service.get_note_by_id(note_id)
    if note is None:
        raise NotFoundError(resource="note", resource_id=note_id)
    return DataResponse[NoteResponse](data=NoteResponse.from_note(note))

@router.post(
    "",
    status_code=201,
    response_model=DataResponse[NoteResponse],
    responses={
        400: {"description": "Validation error", "model": ErrorResponse},
    },
    summary="Create note",
    openapi_extra=request_body_doc(NoteCreateBody),
)
async def create_note(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: NotesService = Depends(get_notes_service),
) -> DataResponse[NoteResponse]:
    note = service.create_note(payload)
    return DataResponse[NoteResponse](data=NoteResponse.from_note(note))

@router.put(
    "/{note_id}",
    response_model=DataResponse[NoteResponse],
    responses={
        400: {"description": "Validation error", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Update note",
    openapi_extra=request_body_doc(NoteUpdateBody),
)
async def update_note(
    note_id: str = Path(..., description="Note ID"),
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: NotesService = Depends(get_notes_service),
) -> DataResponse[NoteResponse]:
    note = service.update_note(note_id, payload or {})
    return DataResponse[NoteResponse](data=NoteResponse.from_note(note))

@router.delete(
    "/{note_id}",
    response_model=DataResponse[NoteResponse],
    responses={
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Delete note",
)
async def delete_note(
    note_id: str = Path(..., description="Note ID"),
    service: NotesService = Depends(get_notes_service),
) -> DataResponse[NoteResponse]:
    note = service.delete_note(note_id)
    return DataResponse[NoteResponse](data=NoteResponse.from_note(note))
