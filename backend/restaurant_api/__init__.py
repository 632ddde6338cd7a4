"""
NYB Restaurant Backend — Application Package Initializer
=========================================================

What: Marks the `restaurant_api` directory as a Python package.
Who:  Imported by uvicorn (`restaurant_api.main:app`), Alembic and pytest.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (Menu / Order logic)   │  ← id parsing, not-found mapping
    ├─────────────────────────────────────┤
    │      Schemas (Pydantic contracts)   │  ← MenuItem, Order, acknowledgments
    ├─────────────────────────────────────┤
    │   Document Store Gateway (storage)  │  ← SQL or in-memory collections
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
