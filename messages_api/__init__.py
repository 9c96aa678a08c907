"""
Messages API — Application Package Initializer
===============================================

What: Marks the `messages_api` directory as a Python package.
Why:  Enables module imports like `from messages_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The service follows a layered architecture wired by dependency injection:

    ┌─────────────────────────────────────┐
    │        Routes (Controllers)         │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        Services (Pass-through)      │  ← Delegates to the repository
    ├─────────────────────────────────────┤
    │      Repositories (Persistence)     │  ← JSON file read/write
    ├─────────────────────────────────────┤
    │     Schemas (Validation / DTOs)     │  ← Pydantic request/response models
    └─────────────────────────────────────┘

    The layers never construct each other. Provider functions in
    `messages_api.dependencies` build them and FastAPI injects them per request.
"""

__version__ = "1.0.0"
