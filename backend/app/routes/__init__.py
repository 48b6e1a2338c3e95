# Routes package init
"""
Notes App Backend — API Routes Package
========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - notes.py:       /api/notes CRUD + PATCH /api/notes/{id}/toggle
    - categories.py:  /api/categories CRUD
    - health.py:      GET /health
    - frontend.py:    static client build with index.html fallback (optional)

Routes are thin: they pull the store from app state, call a service, and let
the global exception handlers turn domain errors into status codes.
"""
