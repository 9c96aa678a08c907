# Services package init
"""
Messages API — Services Layer
==============================

What:  Business logic layer sitting between routes (HTTP) and repositories (persistence).
Why:   Routes handle HTTP, services handle business rules, repositories handle storage.
How:   Services are constructed around a repository and injected into routes
       via FastAPI's dependency injection.

Service Inventory:
    - MessagesService: find_one / find_all / create over a MessagesRepository
"""
