"""
Notes App Backend — Category Service
======================================

What:  Business rules for categories: name presence, trimming, and mapping
       store records to CategoryResponse.
Who:   Called by route handlers in routes/categories.py.

Deletion rules (in-use and built-in category) are enforced by the store,
under the same lock that guards note creation, so a note cannot be attached
to a category while it is being deleted.
"""

import logging
from typing import List, Optional

from app.exceptions import ValidationError
from app.schemas.category import CategoryRequest, CategoryResponse
from app.services.note_service import clean_text
from app.store import NoteStore

logger = logging.getLogger(__name__)


class CategoryService:
    """Stateless business logic for categories; the store is passed per call."""

    def list_categories(self, store: NoteStore) -> List[CategoryResponse]:
        return [CategoryResponse.model_validate(c) for c in store.list_categories()]

    def create_category(self, store: NoteStore, payload: CategoryRequest) -> CategoryResponse:
        name = self._require_name(payload.name)
        category = store.create_category(name=name, color=self._clean_color(payload.color))
        return CategoryResponse.model_validate(category)

    def update_category(
        self,
        store: NoteStore,
        category_id: str,
        payload: CategoryRequest,
    ) -> CategoryResponse:
        """
        Rename (and optionally recolor) a category.

        Raises:
            NotFoundError:   unknown category id
            ValidationError: blank name
        """
        store.get_category(category_id)
        name = self._require_name(payload.name)
        category = store.replace_category(
            category_id,
            name=name,
            color=self._clean_color(payload.color),
        )
        return CategoryResponse.model_validate(category)

    def delete_category(self, store: NoteStore, category_id: str) -> None:
        store.delete_category(category_id)

    @staticmethod
    def _require_name(name: Optional[str]) -> str:
        name = clean_text(name)
        if not name:
            raise ValidationError(message="Category name is required", field="name")
        return name

    @staticmethod
    def _clean_color(color: Optional[str]) -> Optional[str]:
        return clean_text(color) or None


category_service = CategoryService()
