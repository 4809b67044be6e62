"""Domain models."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping

from locomotive_api.app.constants import DEFAULT_TRACK_GAUGE_MM
from locomotive_api.app.core.coercion import to_int, to_text


# Fields an update may overwrite, with the coercion applied to incoming values. `id` is not patchable.
PATCHABLE_FIELDS: dict[str, Callable[[Any], Any]] = {
    "series": to_text,
    "category": to_text,
    "manufacturer": to_text,
    "year_built": to_int,
    "track_gauge": to_int,
    "traction_code": to_text,
    "max_speed": to_int,
}

OPTIONAL_DEFAULTS: dict[str, Any] = {
    "manufacturer": "",
    "year_built": 0,
    "track_gauge": DEFAULT_TRACK_GAUGE_MM,
    "traction_code": "",
    "max_speed": 0,
}


@dataclass
class Locomotive:
    """One locomotive entry. Stored instances are owned by the repository; callers only see copies."""

    id: int
    series: str
    category: str
    manufacturer: str = ""
    year_built: int = 0
    track_gauge: int = DEFAULT_TRACK_GAUGE_MM
    traction_code: str = ""
    max_speed: int = 0

    @staticmethod
    def from_fields(record_id: int, fields: Mapping[str, Any]) -> "Locomotive":
        """Build a record from loose input. Missing or None optional fields take their defaults."""
        values: dict[str, Any] = {}
        for name, coerce in PATCHABLE_FIELDS.items():
            raw = fields.get(name)
            if raw is None and name in OPTIONAL_DEFAULTS:
                values[name] = OPTIONAL_DEFAULTS[name]
            else:
                values[name] = coerce(raw)
        return Locomotive(id=int(record_id), **values)

    def apply_patch(self, patch: Mapping[str, Any]) -> "Locomotive":
        """Overwrite only the patchable fields present in `patch`. Returns self."""
        for name, coerce in PATCHABLE_FIELDS.items():
            if name in patch:
                setattr(self, name, coerce(patch[name]))
        return self

    def snapshot(self) -> "Locomotive":
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "series": self.series,
            "category": self.category,
            "manufacturer": self.manufacturer,
            "year_built": self.year_built,
            "track_gauge": self.track_gauge,
            "traction_code": self.traction_code,
            "max_speed": self.max_speed,
        }
