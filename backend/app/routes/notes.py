"""
Notes App Backend — Notes Route Handlers
==========================================

What:  CRUD endpoints for notes under /api/notes.
How:   Extracts path parameters and bodies, delegates to NoteService, returns JSON.
Who:   Called by the front end's note list, form and editor views.

Endpoints:
    GET    /api/notes               list, most recently updated first
    GET    /api/notes/{id}          single note
    POST   /api/notes               create (201)
    PUT    /api/notes/{id}          full update
    PATCH  /api/notes/{id}/toggle   flip completion of a to-do note
    DELETE /api/notes/{id}          delete (204, empty body)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.schemas.note import (
    ErrorResponse,
    NoteCreateRequest,
    NoteResponse,
    NoteUpdateRequest,
)
from app.services.note_service import note_service
from app.store import NoteStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])

NOT_FOUND = {404: {"description": "Note not found", "model": ErrorResponse}}
BAD_REQUEST = {400: {"description": "Invalid input", "model": ErrorResponse}}


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    summary="List all notes",
    description="Returns every note, ordered by updatedAt descending. No pagination.",
)
async def list_notes(store: NoteStore = Depends(get_store)) -> List[NoteResponse]:
    return note_service.list_notes(store)


@router.get(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={**NOT_FOUND},
    summary="Get a single note by ID",
)
async def get_note(
    note_id: str,
    store: NoteStore = Depends(get_store),
) -> NoteResponse:
    return note_service.get_note(store, note_id)


@router.post(
    "/notes",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_REQUEST},
    summary="Create a note",
    description=(
        "Title and content are required and trimmed. isTodo defaults to false, "
        "categoryId to 'general'; a categoryId must name an existing category."
    ),
)
async def create_note(
    payload: NoteCreateRequest,
    store: NoteStore = Depends(get_store),
) -> NoteResponse:
    return note_service.create_note(store, payload)


@router.put(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Replace a note",
    description=(
        "Overwrites title and content. isTodo, isCompleted and categoryId keep "
        "their previous values when omitted."
    ),
)
async def update_note(
    note_id: str,
    payload: NoteUpdateRequest,
    store: NoteStore = Depends(get_store),
) -> NoteResponse:
    return note_service.update_note(store, note_id, payload)


@router.patch(
    "/notes/{note_id}/toggle",
    response_model=NoteResponse,
    responses={
        400: {"description": "Note is not a todo item", "model": ErrorResponse},
        **NOT_FOUND,
    },
    summary="Toggle completion of a to-do note",
)
async def toggle_note(
    note_id: str,
    store: NoteStore = Depends(get_store),
) -> NoteResponse:
    return note_service.toggle_todo(store, note_id)


@router.delete(
    "/notes/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND},
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    store: NoteStore = Depends(get_store),
) -> Response:
    note_service.delete_note(store, note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
