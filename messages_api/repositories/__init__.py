# Repositories package init
"""
Messages API — Repository Layer
================================

What:  Persistence adapters for messages.
Why:   Services depend on the MessagesRepository interface rather than on the
       JSON file, so the storage backend can be swapped without touching them.

Repository Inventory:
    - MessagesRepository (abstract): find_one / find_all / create contract
    - JsonFileMessagesRepository: Stores every message in one JSON file
"""

from messages_api.repositories.base import MessagesRepository
from messages_api.repositories.json_file import JsonFileMessagesRepository

__all__ = ["MessagesRepository", "JsonFileMessagesRepository"]
