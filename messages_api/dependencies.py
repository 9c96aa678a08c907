"""
Messages API — Dependency Providers
====================================

What:  Provider functions that build and wire the repository and service layers.
Why:   Routes declare what they need (`Depends(get_messages_service)`) instead of
       constructing collaborators, so each layer can be replaced independently.
How:   FastAPI resolves the provider graph per request:

           get_messages_service
               └── get_messages_repository   (cached: one per process)

Testing:
    Override either provider through `app.dependency_overrides`, e.g.

        app.dependency_overrides[get_messages_repository] = lambda: repo
"""

from functools import lru_cache

from fastapi import Depends

from messages_api.config import settings
from messages_api.repositories.base import MessagesRepository
from messages_api.repositories.json_file import JsonFileMessagesRepository
from messages_api.services.message_service import MessagesService


@lru_cache
def get_messages_repository() -> MessagesRepository:
    """
    Get the process-wide message repository.

    Cached so every request shares one instance (and one write lock) over
    the configured store file.
    """
    return JsonFileMessagesRepository(
        path=settings.messages_path,
        id_upper_bound=settings.message_id_upper_bound,
    )


def get_messages_service(
    repository: MessagesRepository = Depends(get_messages_repository),
) -> MessagesService:
    """Get a MessagesService wrapping the injected repository."""
    return MessagesService(repository=repository)
