from __future__ import annotations

from typing import TypeVar

from fastapi import Request, Response
from pydantic import BaseModel, ValidationError

from locomotive_api.app.ports.locomotive_repository import LocomotiveRepository
from locomotive_api.app.schemas.locomotive import ErrorResponse

ModelT = TypeVar("ModelT", bound=BaseModel)


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> Response:
    return Response(
        status_code=status_code,
        media_type="application/json",
        content=ErrorResponse(error=message).model_dump_json(),
        headers=headers,
    )


def locomotive_repository(request: Request) -> LocomotiveRepository | None:
    return getattr(request.app.state, "locomotive_repository", None)


async def parse_body(request: Request, model: type[ModelT]) -> ModelT | None:
    """Validate the request body as `model`. Empty body yields an empty model; malformed JSON or a non-object yields None."""
    raw = await request.body()
    if not raw.strip():
        return model()
    try:
        return model.model_validate_json(raw)
    except ValidationError:
        return None


__all__ = [
    "error_response",
    "locomotive_repository",
    "parse_body",
]
