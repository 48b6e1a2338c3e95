# Services package init
"""
Notes App Backend — Services Layer
====================================

What:  Business logic layer sitting between routes (HTTP) and the store.
How:   Services accept the store plus request schemas, apply the business
       rules, and return response schemas. Routes receive the store through
       FastAPI's dependency injection and pass it along.

Service Inventory:
    - NoteService: create, list, get, update, toggle and delete notes
    - CategoryService: create, list, update and delete categories
"""
