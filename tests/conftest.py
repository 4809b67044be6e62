from __future__ import annotations

from typing import Any

import pytest
from fastapi import FastAPI

from locomotive_api.app.domain.auth_gate import AuthGate
from locomotive_api.app.infrastructure.persistence.inmemory.in_memory_locomotive_repository import (
    InMemoryLocomotiveRepository,
)
from locomotive_api.app.routers.errors import register_exception_handlers
from locomotive_api.app.routers.health import health_router
from locomotive_api.app.routers.locomotives import locomotive_router

READ_KEY = "test-read"
ADMIN_KEY = "test-admin"

NS_1300: dict[str, Any] = {
    "series": "NS 1300",
    "category": "Elektrisch",
    "manufacturer": "Alsthom",
    "yearBuilt": 1952,
    "trackGauge": 1435,
    "tractionCode": "E",
    "maxSpeed": 130,
}


def read_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {READ_KEY}"}


def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {ADMIN_KEY}"}


@pytest.fixture()
def repository() -> InMemoryLocomotiveRepository:
    return InMemoryLocomotiveRepository()


@pytest.fixture()
def auth_gate() -> AuthGate:
    return AuthGate(READ_KEY, ADMIN_KEY)


@pytest.fixture()
def test_app(repository: InMemoryLocomotiveRepository, auth_gate: AuthGate) -> FastAPI:
    app = FastAPI()
    app.state.auth_gate = auth_gate
    app.state.locomotive_repository = repository
    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(locomotive_router)
    return app
