"""
Notes App Backend — Category Route Handlers
=============================================

Endpoints:
    GET    /api/categories          list ("general" first)
    POST   /api/categories          create (201)
    PUT    /api/categories/{id}     rename / recolor
    DELETE /api/categories/{id}     delete (204); 400 "conflict" while notes use it
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.schemas.category import CategoryRequest, CategoryResponse
from app.schemas.note import ErrorResponse
from app.services.category_service import category_service
from app.store import NoteStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Categories"])


@router.get(
    "/categories",
    response_model=List[CategoryResponse],
    summary="List categories",
)
async def list_categories(store: NoteStore = Depends(get_store)) -> List[CategoryResponse]:
    return category_service.list_categories(store)


@router.post(
    "/categories",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Missing name", "model": ErrorResponse}},
    summary="Create a category",
)
async def create_category(
    payload: CategoryRequest,
    store: NoteStore = Depends(get_store),
) -> CategoryResponse:
    return category_service.create_category(store, payload)


@router.put(
    "/categories/{category_id}",
    response_model=CategoryResponse,
    responses={
        400: {"description": "Missing name", "model": ErrorResponse},
        404: {"description": "Category not found", "model": ErrorResponse},
    },
    summary="Update a category",
)
async def update_category(
    category_id: str,
    payload: CategoryRequest,
    store: NoteStore = Depends(get_store),
) -> CategoryResponse:
    return category_service.update_category(store, category_id, payload)


@router.delete(
    "/categories/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"description": "Category is in use", "model": ErrorResponse},
        404: {"description": "Category not found", "model": ErrorResponse},
    },
    summary="Delete an unused category",
)
async def delete_category(
    category_id: str,
    store: NoteStore = Depends(get_store),
) -> Response:
    category_service.delete_category(store, category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
