"""
Notes App Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract between front end and backend.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and generate the OpenAPI documentation.

Wire format:
    Attributes are snake_case in Python and camelCase on the wire
    (alias_generator=to_camel). FastAPI serializes response models by alias,
    so NoteResponse.is_todo goes out as "isTodo".

Required fields:
    Request bodies declare title/content/name as Optional on purpose. A body
    without them must produce our 400 validation_error ("Title and content
    are required"), raised by the services layer, not a schema failure.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from app.models.note import GENERAL_CATEGORY_ID

CAMEL_CASE_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "from_attributes": True,
}


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteCreateRequest(BaseModel):
    """Body of POST /api/notes."""

    title: Optional[str] = Field(default=None, description="Note title (required, trimmed)")
    content: Optional[str] = Field(default=None, description="Note body (required, trimmed)")
    is_todo: Optional[bool] = Field(default=None, description="Mark the note as a to-do item")
    category_id: Optional[str] = Field(
        default=None,
        description=f"Category id; defaults to '{GENERAL_CATEGORY_ID}'",
    )

    model_config = CAMEL_CASE_CONFIG


class NoteUpdateRequest(BaseModel):
    """
    Body of PUT /api/notes/{id}.

    title and content are always required. The remaining fields keep their
    previous value when omitted.
    """

    title: Optional[str] = Field(default=None)
    content: Optional[str] = Field(default=None)
    is_todo: Optional[bool] = Field(default=None)
    is_completed: Optional[bool] = Field(default=None)
    category_id: Optional[str] = Field(default=None)

    model_config = CAMEL_CASE_CONFIG


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  Full representation of a note.
    Who:   Returned by every /api/notes endpoint that yields a note.
    """

    id: str = Field(description="Unique note identifier")
    title: str
    content: str
    is_todo: bool = Field(description="Whether the note is a to-do item")
    is_completed: bool = Field(description="Completion state (false unless isTodo)")
    category_id: str = Field(description="Id of the category the note belongs to")
    created_at: datetime = Field(description="When the note was created (UTC ISO 8601)")
    updated_at: datetime = Field(description="Last mutation time (UTC ISO 8601)")

    model_config = CAMEL_CASE_CONFIG


# ══════════════════════════════════════════════════════════════════════════
# Error & Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "invalid_state",
            "message": "Note is not a todo item",
            "details": {"note_id": "..."},
            "request_id": "a1b2c3d4"
        }
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""

    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently held in memory")
    categories: int = Field(description="Number of categories currently held in memory")
    uptime_seconds: float = Field(description="Seconds since service started")
