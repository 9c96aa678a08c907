"""
Messages API — Health Check Route
==================================

What:  Health check endpoint for monitoring and load balancer checks.
How:   Asks the repository whether the store can be read and written; reports uptime.
Who:   Called by container health checks, load balancers, and monitoring systems.

Status levels:
    - healthy:   Message store reachable (HTTP 200)
    - unhealthy: Message store unreadable, corrupt or not writable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response

from messages_api import __version__
from messages_api.dependencies import get_messages_repository
from messages_api.repositories.base import MessagesRepository
from messages_api.schemas.message import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Returns the health status of the service and its message store.",
)
async def health_check(
    response: Response,
    repository: MessagesRepository = Depends(get_messages_repository),
) -> HealthResponse:
    """
    Check the health of the service.

    Check details:
        Asks the repository whether the store is readable and writable. A store
        that does not exist yet is healthy as long as create() could make it.
    """
    storage_status = "available"
    overall = "healthy"

    if not await repository.check_available():
        storage_status = "unavailable"
        overall = "unhealthy"
        logger.warning("Health check: message store unavailable")

    if overall == "unhealthy":
        response.status_code = 503

    return HealthResponse(
        status=overall,
        version=__version__,
        storage=storage_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
