"""
Notes App Backend — Application Package Initializer
=====================================================

Architecture Note:
    This backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Trimming, required fields
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Dataclass records + Pydantic
    ├─────────────────────────────────────┤
    │         Store (In-Memory State)     │  ← Locked, process-lifetime only
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
