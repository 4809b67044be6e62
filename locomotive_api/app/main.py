from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from loguru import logger

from locomotive_api.app.composition import create_app_dependencies
from locomotive_api.app.config.settings import Settings
from locomotive_api.app.core import SERVICE_NAME
from locomotive_api.app.core.logging import configure_logging
from locomotive_api.app.routers.errors import register_exception_handlers
from locomotive_api.app.routers.health import health_router
from locomotive_api.app.routers.locomotives import locomotive_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()
    configure_logging(settings.log_level)
    logger.bind(service_name=SERVICE_NAME, event="api_starting").info("")
    deps = create_app_dependencies(settings)
    app.state.settings = deps.settings
    app.state.auth_gate = deps.auth_gate
    app.state.locomotive_repository = deps.locomotive_repository
    try:
        yield
    finally:
        logger.bind(service_name=SERVICE_NAME, event="api_stopping").info("")


app = FastAPI(
    title="Locomotive Inventory API",
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)
app.include_router(health_router)
app.include_router(locomotive_router)


def main() -> None:
    settings = Settings()
    configure_logging(settings.log_level)
    logger.bind(service_name=SERVICE_NAME, event="api_listening", host=settings.host, port=settings.port).info("")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
