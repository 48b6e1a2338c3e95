"""
Notes App Backend — Note Service
==================================

What:  Business rules for note operations, independent of HTTP concerns.
How:   Trims and checks the request fields, delegates to the NoteStore, and
       maps the returned records to NoteResponse schemas.
Who:   Called by route handlers in routes/notes.py.

Design:
    NoteService is stateless. The store is passed in on every call, the same
    way a database session would be, so tests can hand it any store.

Validation split:
    Service  → presence of title/content after trimming (ValidationError)
    Store    → existence (NotFoundError), category reference (ValidationError),
               to-do state (InvalidStateError)
"""

import logging
from typing import List, Optional

from app.exceptions import ValidationError
from app.schemas.note import NoteCreateRequest, NoteResponse, NoteUpdateRequest
from app.store import NoteStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Title and content are required"


def clean_text(value: Optional[str]) -> str:
    """Trim a text field; None becomes the empty string."""
    return (value or "").strip()


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - list_notes():   all notes, most recently updated first
        - get_note():     single note retrieval
        - create_note():  validate + insert
        - update_note():  validate + full replace
        - toggle_todo():  flip completion of a to-do note
        - delete_note():  remove a note
    """

    def list_notes(self, store: NoteStore) -> List[NoteResponse]:
        return [NoteResponse.model_validate(note) for note in store.list_notes()]

    def get_note(self, store: NoteStore, note_id: str) -> NoteResponse:
        return NoteResponse.model_validate(store.get_note(note_id))

    def create_note(self, store: NoteStore, payload: NoteCreateRequest) -> NoteResponse:
        """
        Create a note from a POST body.

        Raises:
            ValidationError: blank title/content, or unknown categoryId.
                             The store is left untouched in both cases.
        """
        title, content = self._require_title_and_content(payload.title, payload.content)
        note = store.create_note(
            title=title,
            content=content,
            is_todo=bool(payload.is_todo),
            category_id=clean_text(payload.category_id) or None,
        )
        return NoteResponse.model_validate(note)

    def update_note(
        self,
        store: NoteStore,
        note_id: str,
        payload: NoteUpdateRequest,
    ) -> NoteResponse:
        """
        Replace a note from a PUT body.

        An unknown id is reported before field validation, so PUT on a
        missing note is always a 404.

        Raises:
            NotFoundError:   unknown note id
            ValidationError: blank title/content, or unknown categoryId
        """
        store.get_note(note_id)
        title, content = self._require_title_and_content(payload.title, payload.content)

        category_id = None
        if payload.category_id is not None:
            category_id = clean_text(payload.category_id)
            if not category_id:
                raise ValidationError(message="categoryId cannot be empty", field="categoryId")

        note = store.replace_note(
            note_id,
            title=title,
            content=content,
            is_todo=payload.is_todo,
            is_completed=payload.is_completed,
            category_id=category_id,
        )
        return NoteResponse.model_validate(note)

    def toggle_todo(self, store: NoteStore, note_id: str) -> NoteResponse:
        return NoteResponse.model_validate(store.toggle_completion(note_id))

    def delete_note(self, store: NoteStore, note_id: str) -> None:
        store.delete_note(note_id)

    @staticmethod
    def _require_title_and_content(title: Optional[str], content: Optional[str]):
        title, content = clean_text(title), clean_text(content)
        if not title or not content:
            missing = "title" if not title else "content"
            logger.debug("Rejected note: blank %s", missing)
            raise ValidationError(message=REQUIRED_FIELDS_MESSAGE, field=missing)
        return title, content


# Module-level singleton — used by route handlers
note_service = NoteService()
