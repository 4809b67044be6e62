from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from loguru import logger

from locomotive_api.app.core import SERVICE_NAME
from locomotive_api.app.routers.auth import require_admin, require_reader
from locomotive_api.app.routers.locomotive_serializers import response_from_record, response_from_records
from locomotive_api.app.routers.utils import error_response, locomotive_repository, parse_body
from locomotive_api.app.schemas.locomotive import LocomotiveCreateRequest, LocomotivePatchRequest


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


def _repository_unavailable() -> Response:
    _log("repository_missing")
    return error_response(503, "Repository not available")


_AUTH_RESPONSES: dict[int | str, dict[str, Any]] = {
    401: {"description": "Missing or invalid API key."},
}
_ADMIN_RESPONSES: dict[int | str, dict[str, Any]] = {
    **_AUTH_RESPONSES,
    403: {"description": "Read key used for an admin operation."},
}

locomotive_router = APIRouter(prefix="/records", tags=["Locomotives"])


@locomotive_router.get(
    "",
    summary="List locomotives",
    description="Returns every locomotive in collection order. Requires the read or admin key.",
    responses={200: {"description": "All locomotives."}, **_AUTH_RESPONSES},
)
async def list_locomotives(request: Request, _tier: str = Depends(require_reader)) -> Response:
    repo = locomotive_repository(request)
    if repo is None:
        return _repository_unavailable()
    return response_from_records(repo.list_all())


@locomotive_router.get(
    "/{record_id}",
    summary="Get one locomotive",
    description="Returns the locomotive with the given id. Requires the read or admin key.",
    responses={200: {"description": "Locomotive found."}, 404: {"description": "Unknown id."}, **_AUTH_RESPONSES},
)
async def get_locomotive(record_id: str, request: Request, _tier: str = Depends(require_reader)) -> Response:
    repo = locomotive_repository(request)
    if repo is None:
        return _repository_unavailable()
    record = repo.get_by_id(record_id)
    if record is None:
        return error_response(404, "Not found")
    return response_from_record(record)


@locomotive_router.post(
    "",
    summary="Create a locomotive",
    description="Adds a locomotive and assigns the next id. `series` and `category` are required. Requires the admin key.",
    responses={201: {"description": "Locomotive created."}, 400: {"description": "Missing series or category."}, **_ADMIN_RESPONSES},
)
async def create_locomotive(request: Request, _tier: str = Depends(require_admin)) -> Response:
    repo = locomotive_repository(request)
    if repo is None:
        return _repository_unavailable()

    body = await parse_body(request, LocomotiveCreateRequest)
    if body is None:
        _log("create_rejected", reason="body_not_object")
        return error_response(400, "Bad request")
    if not body.series or not body.category:
        _log("create_rejected", reason="missing_required_field")
        return error_response(400, "Bad request")

    created = repo.add(body.model_dump())
    _log("locomotive_created", record_id=created.id, series=created.series)
    return response_from_record(created, status_code=201)


@locomotive_router.put(
    "/{record_id}",
    summary="Update a locomotive",
    description="Applies a partial update: only fields present in the body are changed. The id cannot be changed. Requires the admin key.",
    responses={200: {"description": "Locomotive updated."}, 404: {"description": "Unknown id."}, **_ADMIN_RESPONSES},
)
async def update_locomotive(record_id: str, request: Request, _tier: str = Depends(require_admin)) -> Response:
    repo = locomotive_repository(request)
    if repo is None:
        return _repository_unavailable()

    body = await parse_body(request, LocomotivePatchRequest)
    if body is None:
        _log("update_rejected", record_id=record_id, reason="body_not_object")
        return error_response(400, "Bad request")
    patch = body.model_dump(exclude_unset=True)

    updated = repo.update(record_id, patch)
    if updated is None:
        return error_response(404, "Not found")
    _log("locomotive_updated", record_id=updated.id, fields=sorted(patch))
    return response_from_record(updated)


@locomotive_router.delete(
    "/{record_id}",
    summary="Delete a locomotive",
    description="Removes the locomotive and returns it. Requires the admin key.",
    responses={200: {"description": "Locomotive removed."}, 404: {"description": "Unknown id."}, **_ADMIN_RESPONSES},
)
async def delete_locomotive(record_id: str, request: Request, _tier: str = Depends(require_admin)) -> Response:
    repo = locomotive_repository(request)
    if repo is None:
        return _repository_unavailable()
    removed = repo.remove(record_id)
    if removed is None:
        return error_response(404, "Not found")
    _log("locomotive_removed", record_id=removed.id)
    return response_from_record(removed)
