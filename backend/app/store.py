"""
Notes App Backend — In-Memory Store
=====================================

What:  The authoritative collection of Notes and Categories, plus the FastAPI
       dependency that hands it to route handlers.
How:   One NoteStore per application, created by create_app() and attached to
       app.state.store. Every public method runs under a single lock, so each
       create/replace/toggle/delete is an all-or-nothing critical section.
Who:   Used by the services layer; injected into routes via Depends(get_store).
When:  Lives for the lifetime of the process. Nothing is persisted: state
       resets on restart.

Ordering:
    Notes are kept in an OrderedDict and moved to the end on every mutation,
    so iteration order is "least recently touched first". list_notes() sorts
    by updated_at descending with a stable sort over the reversed dict, which
    keeps "most recently touched first" even when two timestamps collide.
"""

import logging
import threading
import uuid
from collections import OrderedDict
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from starlette.requests import Request

from app.exceptions import ConflictError, InvalidStateError, NotFoundError, ValidationError
from app.models.note import (
    GENERAL_CATEGORY_ID,
    GENERAL_CATEGORY_NAME,
    Category,
    Note,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

WELCOME_NOTE_TITLE = "Welcome to Notes App"
WELCOME_NOTE_CONTENT = "This is your first note! You can edit or delete it."


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class NoteStore:
    """
    Thread-safe in-memory store for notes and categories.

    Records handed out are copies; callers change state only through the
    methods below. Validation of text fields (presence, trimming) happens in
    the services layer; the store enforces the rules that depend on its own
    contents (existence, references, to-do state).
    """

    def __init__(
        self,
        clock: Clock = utc_now,
        default_category_color: str = "#6c757d",
    ):
        self._clock = clock
        self._default_color = default_category_color
        self._lock = threading.Lock()
        self._notes: "OrderedDict[str, Note]" = OrderedDict()
        self._categories: Dict[str, Category] = {}
        self._add_general_category()

    def _add_general_category(self) -> None:
        self._categories[GENERAL_CATEGORY_ID] = Category(
            id=GENERAL_CATEGORY_ID,
            name=GENERAL_CATEGORY_NAME,
            color=self._default_color,
        )

    # ══════════════════════════════════════════════════════════════════════
    # Notes
    # ══════════════════════════════════════════════════════════════════════

    def list_notes(self) -> List[Note]:
        """All notes, most recently updated first."""
        with self._lock:
            ordered = sorted(
                reversed(self._notes.values()),
                key=lambda note: note.updated_at,
                reverse=True,
            )
            return [replace(note) for note in ordered]

    def get_note(self, note_id: str) -> Note:
        with self._lock:
            return replace(self._require_note(note_id))

    def create_note(
        self,
        title: str,
        content: str,
        is_todo: bool = False,
        category_id: Optional[str] = None,
    ) -> Note:
        """
        Insert a new note with a fresh id.

        created_at and updated_at are stamped with the same instant.

        Raises:
            ValidationError: category_id does not name an existing category
        """
        with self._lock:
            category_id = category_id or GENERAL_CATEGORY_ID
            self._require_category_reference(category_id)

            now = self._clock()
            note = Note(
                id=str(uuid.uuid4()),
                title=title,
                content=content,
                created_at=now,
                updated_at=now,
                is_todo=is_todo,
                is_completed=False,
                category_id=category_id,
            )
            self._notes[note.id] = note
            logger.info("Note created: %s", note.id)
            return replace(note)

    def replace_note(
        self,
        note_id: str,
        title: str,
        content: str,
        is_todo: Optional[bool] = None,
        is_completed: Optional[bool] = None,
        category_id: Optional[str] = None,
    ) -> Note:
        """
        Full update of a note.

        title and content are always overwritten. The optional fields are
        only changed when given (not None); otherwise the previous values are
        kept. A note that ends up as a non-todo is never left completed.

        Raises:
            NotFoundError:   no note with this id
            ValidationError: category_id does not name an existing category
        """
        with self._lock:
            current = self._require_note(note_id)
            if category_id is not None:
                self._require_category_reference(category_id)

            new_is_todo = current.is_todo if is_todo is None else is_todo
            new_is_completed = current.is_completed if is_completed is None else is_completed
            if not new_is_todo:
                new_is_completed = False

            updated = replace(
                current,
                title=title,
                content=content,
                is_todo=new_is_todo,
                is_completed=new_is_completed,
                category_id=current.category_id if category_id is None else category_id,
                updated_at=self._touch(current),
            )
            self._commit_note(updated)
            logger.info("Note updated: %s", note_id)
            return replace(updated)

    def toggle_completion(self, note_id: str) -> Note:
        """
        Flip is_completed on a to-do note.

        Raises:
            NotFoundError:     no note with this id
            InvalidStateError: the note is not a to-do item
        """
        with self._lock:
            current = self._require_note(note_id)
            if not current.is_todo:
                raise InvalidStateError(
                    message="Note is not a todo item",
                    context={"note_id": note_id},
                )

            updated = replace(
                current,
                is_completed=not current.is_completed,
                updated_at=self._touch(current),
            )
            self._commit_note(updated)
            logger.info("Note %s completion set to %s", note_id, updated.is_completed)
            return replace(updated)

    def delete_note(self, note_id: str) -> None:
        with self._lock:
            self._require_note(note_id)
            del self._notes[note_id]
            logger.info("Note deleted: %s", note_id)

    # ══════════════════════════════════════════════════════════════════════
    # Categories
    # ══════════════════════════════════════════════════════════════════════

    def list_categories(self) -> List[Category]:
        """All categories in creation order, "general" first."""
        with self._lock:
            return [replace(category) for category in self._categories.values()]

    def get_category(self, category_id: str) -> Category:
        with self._lock:
            return replace(self._require_category(category_id))

    def create_category(self, name: str, color: Optional[str] = None) -> Category:
        with self._lock:
            category = Category(
                id=str(uuid.uuid4()),
                name=name,
                color=color or self._default_color,
            )
            self._categories[category.id] = category
            logger.info("Category created: %s (%s)", category.id, category.name)
            return replace(category)

    def replace_category(
        self,
        category_id: str,
        name: str,
        color: Optional[str] = None,
    ) -> Category:
        """Overwrite the name, and the color when one is given."""
        with self._lock:
            current = self._require_category(category_id)
            updated = replace(
                current,
                name=name,
                color=color or current.color,
            )
            self._categories[category_id] = updated
            logger.info("Category updated: %s", category_id)
            return replace(updated)

    def delete_category(self, category_id: str) -> None:
        """
        Remove a category that no note references.

        Raises:
            NotFoundError: no category with this id
            ConflictError: the built-in category, or notes still reference it
        """
        with self._lock:
            self._require_category(category_id)
            if category_id == GENERAL_CATEGORY_ID:
                raise ConflictError(
                    message="The default category cannot be deleted",
                    context={"category_id": category_id},
                )

            in_use = sum(1 for note in self._notes.values() if note.category_id == category_id)
            if in_use:
                raise ConflictError(
                    message=f"Category is used by {in_use} note(s) and cannot be deleted",
                    context={"category_id": category_id, "note_count": in_use},
                )

            del self._categories[category_id]
            logger.info("Category deleted: %s", category_id)

    # ══════════════════════════════════════════════════════════════════════
    # Lifecycle
    # ══════════════════════════════════════════════════════════════════════

    def seed_welcome_note(self) -> Note:
        """Insert the introductory note shown on a fresh start."""
        return self.create_note(title=WELCOME_NOTE_TITLE, content=WELCOME_NOTE_CONTENT)

    def clear(self) -> None:
        """Drop every note and every user-created category."""
        with self._lock:
            self._notes.clear()
            self._categories.clear()
            self._add_general_category()

    def counts(self) -> Dict[str, int]:
        with self._lock:
            return {"notes": len(self._notes), "categories": len(self._categories)}

    # ── Internal helpers (caller holds the lock) ──────────────────────────

    def _require_note(self, note_id: str) -> Note:
        note = self._notes.get(note_id)
        if note is None:
            raise NotFoundError(resource="note", resource_id=note_id)
        return note

    def _require_category(self, category_id: str) -> Category:
        category = self._categories.get(category_id)
        if category is None:
            raise NotFoundError(resource="category", resource_id=category_id)
        return category

    def _require_category_reference(self, category_id: str) -> None:
        if category_id not in self._categories:
            raise ValidationError(
                message=f"Category '{category_id}' does not exist",
                field="categoryId",
            )

    def _touch(self, note: Note) -> datetime:
        # updated_at never moves before created_at, even if the clock steps back
        return max(self._clock(), note.created_at)

    def _commit_note(self, note: Note) -> None:
        self._notes[note.id] = note
        self._notes.move_to_end(note.id)


# ── Store Dependency ──────────────────────────────────────────────────────
def get_store(request: Request) -> NoteStore:
    """
    FastAPI dependency returning the application's store.

    Example usage in a route:
        @router.get("/notes")
        async def list_notes(store: NoteStore = Depends(get_store)):
            return note_service.list_notes(store)
    """
    return request.app.state.store
