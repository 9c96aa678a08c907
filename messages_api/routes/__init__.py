# Routes package init
"""
Messages API — API Routes Package
==================================

What:  HTTP route handlers (controllers) that accept requests and return responses.

Route Inventory:
    - messages.py:  GET  /messages           (list all messages)
                    POST /messages           (create a message)
                    GET  /messages/{id}      (get a single message)
    - health.py:    GET  /health             (service health check)

Design Principle:
    Routes are THIN. They receive a validated body or path parameter, call the
    injected MessagesService, and shape the response. Storage lives behind the
    service in the repository layer.
"""
