"""
Notes App Backend — Note & Category Service Unit Tests
========================================================

What:  Field validation and trimming done by NoteService/CategoryService.
How:   Services are called directly with a real in-memory store (no HTTP).

What we test:
    ✅ Blank or missing title/content raises ValidationError, store untouched
    ✅ Text fields are stored trimmed
    ✅ Optional fields keep their values on update when omitted
    ✅ Update of an unknown id is NotFound even with an invalid body
    ✅ Category names are required and trimmed
"""

import pytest

from app.exceptions import NotFoundError, ValidationError
from app.schemas.category import CategoryRequest
from app.schemas.note import NoteCreateRequest, NoteUpdateRequest
from app.services.category_service import CategoryService
from app.services.note_service import REQUIRED_FIELDS_MESSAGE, NoteService


class TestNoteServiceCreate:
    """Tests for create_note validation."""

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.parametrize(
        "title, content, missing",
        [
            ("", "body", "title"),
            ("   ", "body", "title"),
            (None, "body", "title"),
            ("title", "", "content"),
            ("title", "\n\t ", "content"),
        ],
    )
    def test_blank_fields_rejected_without_mutation(self, store, title, content, missing):
        with pytest.raises(ValidationError, match=REQUIRED_FIELDS_MESSAGE) as exc_info:
            self.service.create_note(store, NoteCreateRequest(title=title, content=content))

        assert exc_info.value.field == missing
        assert store.list_notes() == []

    def test_fields_are_trimmed(self, store):
        result = self.service.create_note(
            store, NoteCreateRequest(title="  Groceries ", content=" milk\n")
        )

        assert result.title == "Groceries"
        assert result.content == "milk"
        assert result.category_id == "general"

    def test_blank_category_falls_back_to_general(self, store):
        result = self.service.create_note(
            store, NoteCreateRequest(title="A", content="B", category_id="  ")
        )
        assert result.category_id == "general"

    def test_unknown_category_rejected(self, store):
        with pytest.raises(ValidationError, match="does not exist"):
            self.service.create_note(
                store, NoteCreateRequest(title="A", content="B", category_id="nope")
            )


class TestNoteServiceUpdate:
    """Tests for update_note."""

    def setup_method(self):
        self.service = NoteService()

    def test_unknown_id_is_not_found_before_validation(self, store):
        with pytest.raises(NotFoundError):
            self.service.update_note(store, "missing", NoteUpdateRequest())

    def test_blank_title_rejected(self, store):
        note = self.service.create_note(store, NoteCreateRequest(title="A", content="B"))

        with pytest.raises(ValidationError):
            self.service.update_note(store, note.id, NoteUpdateRequest(title=" ", content="B"))

        assert self.service.get_note(store, note.id).title == "A"

    def test_omitted_optional_fields_are_preserved(self, store):
        note = self.service.create_note(
            store, NoteCreateRequest(title="A", content="B", is_todo=True)
        )
        self.service.toggle_todo(store, note.id)

        result = self.service.update_note(
            store, note.id, NoteUpdateRequest(title="A2", content="B2")
        )

        assert result.is_todo is True
        assert result.is_completed is True
        assert result.updated_at > note.updated_at

    def test_empty_category_id_rejected(self, store):
        note = self.service.create_note(store, NoteCreateRequest(title="A", content="B"))

        with pytest.raises(ValidationError) as exc_info:
            self.service.update_note(
                store, note.id, NoteUpdateRequest(title="A", content="B", category_id="")
            )

        assert exc_info.value.field == "categoryId"


class TestCategoryService:

    def setup_method(self):
        self.service = CategoryService()

    def test_name_required(self, store):
        with pytest.raises(ValidationError, match="name is required"):
            self.service.create_category(store, CategoryRequest(name="  "))

        assert len(self.service.list_categories(store)) == 1

    def test_name_and_color_trimmed(self, store):
        result = self.service.create_category(store, CategoryRequest(name=" Work ", color=" #00ff00 "))

        assert result.name == "Work"
        assert result.color == "#00ff00"

    def test_update_unknown_category(self, store):
        with pytest.raises(NotFoundError):
            self.service.update_category(store, "missing", CategoryRequest(name="X"))
