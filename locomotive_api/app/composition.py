"""
Composition root: single place where concrete implementations are wired.

Builds settings, the auth gate and the locomotive repository from config.
Used by lifespan to populate app.state. No DI container library; explicit
wiring only. Repository backend selection is driven by settings.
"""

from locomotive_api.app.config.settings import Settings
from locomotive_api.app.domain.auth_gate import AuthGate
from locomotive_api.app.infrastructure.persistence.factory import create_locomotive_repository
from locomotive_api.app.ports.locomotive_repository import LocomotiveRepository


class AppDependencies:
    """Holds wired dependencies. Built only in composition root."""

    def __init__(
        self,
        *,
        settings: Settings,
        auth_gate: AuthGate,
        locomotive_repository: LocomotiveRepository,
    ) -> None:
        self._settings = settings
        self._auth_gate = auth_gate
        self._locomotive_repository = locomotive_repository

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def auth_gate(self) -> AuthGate:
        return self._auth_gate

    @property
    def locomotive_repository(self) -> LocomotiveRepository:
        return self._locomotive_repository


def create_app_dependencies(settings: Settings | None = None) -> AppDependencies:
    """
    Composition root: build all app dependencies in one place.
    The repository backend is selected from settings (repository_backend).
    """
    _settings = settings or Settings()
    auth_gate = AuthGate(_settings.api_key, _settings.admin_key)
    repository = create_locomotive_repository(_settings)

    return AppDependencies(
        settings=_settings,
        auth_gate=auth_gate,
        locomotive_repository=repository,
    )
