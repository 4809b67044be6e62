"""Helpers to serialize repository records into API responses."""
from __future__ import annotations

from fastapi import Response
from pydantic import TypeAdapter

from locomotive_api.app.domain.models import Locomotive
from locomotive_api.app.schemas.locomotive import LocomotiveResponse

_LIST_ADAPTER = TypeAdapter(list[LocomotiveResponse])


def to_response_model(record: Locomotive) -> LocomotiveResponse:
    return LocomotiveResponse(**record.to_dict())


def response_from_record(record: Locomotive, *, status_code: int = 200) -> Response:
    """Single record as camelCase JSON."""
    return Response(
        status_code=status_code,
        media_type="application/json",
        content=to_response_model(record).model_dump_json(by_alias=True),
    )


def response_from_records(records: list[Locomotive]) -> Response:
    return Response(
        status_code=200,
        media_type="application/json",
        content=_LIST_ADAPTER.dump_json([to_response_model(r) for r in records], by_alias=True),
    )
