"""
Notes App Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the error scenarios of the notes API.
How:   Each exception carries a human-readable message and an optional context
       dict. Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching HTTP status.
Who:   Raised by the store, services and middleware; caught by global handlers.

Exception Hierarchy:
    NotesAppError (base)
    ├── ValidationError          → 400 Bad Request (missing field, unknown category)
    ├── NotFoundError            → 404 Not Found
    ├── ConflictError            → 400 Bad Request (category still in use)
    ├── InvalidStateError        → 400 Bad Request (toggle on a non-todo note)
    └── RateLimitExceededError   → 429 Too Many Requests
"""

from typing import Any, Dict, Optional


class NotesAppError(Exception):
    """
    Base exception for all notes app errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional structured info (field name, resource id, ...)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = dict(context or {})
        super().__init__(self.message)


class ValidationError(NotesAppError):
    """
    Raised when client input fails validation.

    When:    Blank title/content/name, or a categoryId that does not exist.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Title and content are required",
            "details": {"field": "title"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NotesAppError):
    """
    Raised when a requested note or category does not exist.

    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource.capitalize()} with ID '{resource_id}' was not found"
        ctx = dict(context or {})
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class ConflictError(NotesAppError):
    """
    Raised when an operation would break a reference between records.

    When:    Deleting a category that notes still point at, or deleting the
             built-in "general" category.
    HTTP:    400 Bad Request (error code "conflict")
    """

    def __init__(
        self,
        message: str = "The operation conflicts with existing data",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InvalidStateError(NotesAppError):
    """
    Raised when a record is not in a state that allows the operation.

    When:    PATCH /api/notes/{id}/toggle on a note whose isTodo is false.
    HTTP:    400 Bad Request (error code "invalid_state")
    """

    def __init__(
        self,
        message: str = "The operation is not valid in the current state",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RateLimitExceededError(NotesAppError):
    """
    Raised when a client exceeds the per-IP request rate limit.

    HTTP:    429 Too Many Requests, with a Retry-After header.
    """

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Rate limit exceeded. Please wait {retry_after} seconds before making more requests."
        )
        ctx = dict(context or {})
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after
