"""Repository factory: selects implementation from config. Only place that imports concrete repositories."""
from __future__ import annotations

from loguru import logger

from locomotive_api.app.config.settings import Settings
from locomotive_api.app.core import SERVICE_NAME
from locomotive_api.app.infrastructure.persistence.inmemory.in_memory_locomotive_repository import (
    InMemoryLocomotiveRepository,
)
from locomotive_api.app.infrastructure.persistence.inmemory.seed import DEMO_LOCOMOTIVES
from locomotive_api.app.ports.locomotive_repository import LocomotiveRepository


def create_locomotive_repository(settings: Settings) -> LocomotiveRepository:
    backend = settings.repository_backend.strip().lower()

    if backend == "inmemory":
        seed = DEMO_LOCOMOTIVES if settings.seed_demo_data else []
        repository = InMemoryLocomotiveRepository(seed)
        logger.bind(service_name=SERVICE_NAME, event="repository_seeded", count=repository.count()).info("")
        return repository

    raise ValueError(f"Unsupported repository backend: {backend}")
