"""
Notes App Backend — Domain Records
====================================

What:  The Note and Category records held by the in-memory store.
How:   Plain dataclasses. The store owns the instances and hands out copies
       (dataclasses.replace), so a record returned to a caller can never be
       used to mutate the store behind its lock.

Field naming:
    Attributes are snake_case here; the camelCase wire names (isTodo,
    categoryId, createdAt, ...) are produced by the pydantic schemas.
"""

from dataclasses import dataclass
from datetime import datetime

# Identifier of the built-in category every note falls back to
GENERAL_CATEGORY_ID = "general"
GENERAL_CATEGORY_NAME = "General"


@dataclass
class Category:
    """A named, colored tag that notes may reference."""

    id: str
    name: str
    color: str


@dataclass
class Note:
    """
    A user-authored text note, optionally a to-do item.

    Invariants (maintained by NoteStore):
        - updated_at >= created_at
        - is_completed is False whenever is_todo is False
        - category_id names an existing Category
    """

    id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    is_todo: bool = False
    is_completed: bool = False
    category_id: str = GENERAL_CATEGORY_ID

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, todo={self.is_todo}, category={self.category_id})>"
