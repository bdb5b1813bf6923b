"""
Notes API Backend — Application Package Initializer
===================================================

What: Marks the `notes_api` directory as a Python package.
Why:  Enables module imports like `from notes_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Notes Service (Validation)     │  ← Business rules, normalization
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Domain dataclasses + Pydantic
    ├─────────────────────────────────────┤
    │       Note Store (In-Memory)        │  ← Authoritative note collection
    └─────────────────────────────────────┘

    The store is handed to the service at construction, so a database-backed
    store can replace the in-memory one without touching validation.
"""

__version__ = "1.0.0"
