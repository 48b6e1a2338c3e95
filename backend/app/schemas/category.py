"""
Notes App Backend — Category Schemas
======================================

Request and response models for /api/categories. Same camelCase wire
convention as the note schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.note import CAMEL_CASE_CONFIG


class CategoryRequest(BaseModel):
    """Body of POST /api/categories and PUT /api/categories/{id}."""

    name: Optional[str] = Field(default=None, description="Category name (required, trimmed)")
    color: Optional[str] = Field(default=None, description="CSS color; server default when omitted")

    model_config = CAMEL_CASE_CONFIG


class CategoryResponse(BaseModel):
    id: str
    name: str
    color: str

    model_config = CAMEL_CASE_CONFIG
