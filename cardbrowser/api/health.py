"""
Health check endpoints.

Provides liveness and readiness probes. Readiness requires the set catalog
to have loaded.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from cardbrowser.api.dependencies import get_controller
from cardbrowser.services.view_controller import ViewController

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    sets_loaded: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not check the card-data API.
    """
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(
    response: Response,
    controller: Annotated[ViewController, Depends(get_controller)],
) -> HealthResponse:
    """
    Readiness probe.

    Returns ready once the set catalog is loaded. Returns 503 otherwise.
    """
    loaded = len(controller.sets)
    if loaded:
        return HealthResponse(status="ready", sets_loaded=loaded)
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponse(status="not ready", sets_loaded=0)
