"""In-memory implementation of LocomotiveRepository.

Records live in a list in insertion order; state is lost on restart.
Methods never suspend, so requests handled on one event loop cannot
interleave inside a mutation.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from locomotive_api.app.core.coercion import to_record_id
from locomotive_api.app.domain.models import Locomotive
from locomotive_api.app.ports.locomotive_repository import LocomotiveRepository


class InMemoryLocomotiveRepository(LocomotiveRepository):
    def __init__(self, seed: Iterable[Mapping[str, Any]] = ()) -> None:
        self._items: list[Locomotive] = []
        # Highest id ever issued, so ids freed by remove() are never handed out again.
        self._last_issued_id = 0
        for entry in seed:
            self._insert(Locomotive.from_fields(to_record_id(entry.get("id")) or self._next_id(), entry))

    def _next_id(self) -> int:
        highest_live = max((item.id for item in self._items), default=0)
        return max(highest_live, self._last_issued_id) + 1

    def _insert(self, item: Locomotive) -> None:
        self._items.append(item)
        self._last_issued_id = max(self._last_issued_id, item.id)

    def _index_of(self, record_id: Any) -> int | None:
        wanted = to_record_id(record_id)
        if wanted is None:
            return None
        for index, item in enumerate(self._items):
            if item.id == wanted:
                return index
        return None

    def list_all(self) -> list[Locomotive]:
        return [item.snapshot() for item in self._items]

    def get_by_id(self, record_id: Any) -> Locomotive | None:
        index = self._index_of(record_id)
        if index is None:
            return None
        return self._items[index].snapshot()

    def add(self, fields: Mapping[str, Any]) -> Locomotive:
        item = Locomotive.from_fields(self._next_id(), fields)
        self._insert(item)
        return item.snapshot()

    def update(self, record_id: Any, patch: Mapping[str, Any]) -> Locomotive | None:
        index = self._index_of(record_id)
        if index is None:
            return None
        return self._items[index].apply_patch(patch).snapshot()

    def remove(self, record_id: Any) -> Locomotive | None:
        index = self._index_of(record_id)
        if index is None:
            return None
        return self._items.pop(index).snapshot()

    def count(self) -> int:
        return len(self._items)
