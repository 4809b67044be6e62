from typing import Any

from fastapi import APIRouter, Request, Response
from loguru import logger

from locomotive_api.app.core import SERVICE_NAME

health_router = APIRouter(tags=["Health"])

def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")

@health_router.get(
    "/health/live",
    summary="Liveness probe",
    description="Returns 200 if the API process is running.",
    responses={200: {"description": "Service is alive."}},
)
async def live() -> dict:
    return {"status": "ok"}


@health_router.get(
    "/health/ready",
    summary="Readiness probe",
    description="Returns 200 only when the auth gate and the locomotive repository are wired. Used to confirm the service is ready to accept requests.",
    responses={
        200: {"description": "Auth gate and repository are ready."},
        503: {"description": "Auth gate or repository not ready."},
    },
)
async def ready(request: Request) -> Response:
    auth_gate = getattr(request.app.state, "auth_gate", None)
    repository = getattr(request.app.state, "locomotive_repository", None)
    if auth_gate is None or repository is None:
        _log("components_not_initialized")
        return Response(status_code=503, content="Not ready")
    return Response(status_code=200, content="OK")
