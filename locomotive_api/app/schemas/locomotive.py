"""Wire models for /records. Inputs are loosely typed; the domain coerces them."""
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class LocomotiveCreateRequest(_CamelModel):
    series: Any = None
    category: Any = None
    manufacturer: Any = None
    year_built: Any = None
    track_gauge: Any = None
    traction_code: Any = None
    max_speed: Any = None


class LocomotivePatchRequest(_CamelModel):
    """Every field optional. Only fields present in the request body are applied."""

    series: Any = None
    category: Any = None
    manufacturer: Any = None
    year_built: Any = None
    track_gauge: Any = None
    traction_code: Any = None
    max_speed: Any = None


class LocomotiveResponse(_CamelModel):
    id: int
    series: str
    category: str
    manufacturer: str
    year_built: int
    track_gauge: int
    traction_code: str
    max_speed: int


class ErrorResponse(BaseModel):
    error: str
