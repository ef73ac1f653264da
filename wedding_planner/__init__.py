"""
Wedding Planner Backend — Application Package Initializer
===========================================================

What: Marks the `wedding_planner` directory as a Python package.
Who:  Imported by uvicorn, Alembic, pytest and the `wedding-planner` entry point.

Architecture Note:
    The backend is layered the same way top to bottom:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Rules)   │  ← Validation, orchestration
    ├─────────────────────────────────────┤
    │      Repositories (Data Access)     │  ← One class per entity
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Explicit store handle
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
