"""Port: locomotive record storage. Implementations live in infrastructure."""
from __future__ import annotations

from typing import Any, Mapping, Protocol

from locomotive_api.app.domain.models import Locomotive


class LocomotiveRepository(Protocol):
    """Every method returns detached copies; a miss returns None instead of raising."""

    def list_all(self) -> list[Locomotive]: ...

    def get_by_id(self, record_id: Any) -> Locomotive | None: ...

    def add(self, fields: Mapping[str, Any]) -> Locomotive: ...

    def update(self, record_id: Any, patch: Mapping[str, Any]) -> Locomotive | None: ...

    def remove(self, record_id: Any) -> Locomotive | None: ...

    def count(self) -> int: ...
