import pytest

from locomotive_api.app.composition import create_app_dependencies
from locomotive_api.app.config.settings import Settings
from locomotive_api.app.constants import AccessTier
from locomotive_api.app.infrastructure.persistence.factory import create_locomotive_repository
from locomotive_api.app.infrastructure.persistence.inmemory.in_memory_locomotive_repository import (
    InMemoryLocomotiveRepository,
)


def test_settings_defaults(monkeypatch):
    for name in ("PORT", "API_KEY", "ADMIN_KEY", "REPOSITORY_BACKEND", "SEED_DEMO_DATA"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.api_key == "demo-read"
    assert settings.admin_key == "demo-admin"
    assert settings.repository_backend == "inmemory"
    assert settings.seed_demo_data is True


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "3100")
    monkeypatch.setenv("API_KEY", "env-read")
    monkeypatch.setenv("ADMIN_KEY", "env-admin")
    monkeypatch.setenv("SEED_DEMO_DATA", "false")
    settings = Settings(_env_file=None)
    assert settings.port == 3100
    assert settings.api_key == "env-read"
    assert settings.admin_key == "env-admin"
    assert settings.seed_demo_data is False


def test_create_app_dependencies_wires_gate_and_repository():
    settings = Settings(_env_file=None, API_KEY="r", ADMIN_KEY="a", SEED_DEMO_DATA=True)
    deps = create_app_dependencies(settings)
    assert deps.settings is settings
    assert deps.auth_gate.classify("r") == AccessTier.READER
    assert deps.auth_gate.classify("a") == AccessTier.ADMIN
    assert isinstance(deps.locomotive_repository, InMemoryLocomotiveRepository)
    assert deps.locomotive_repository.count() == 7


def test_repository_can_start_empty():
    settings = Settings(_env_file=None, SEED_DEMO_DATA=False)
    repository = create_locomotive_repository(settings)
    assert repository.count() == 0


def test_unknown_repository_backend_raises():
    settings = Settings(_env_file=None, REPOSITORY_BACKEND="mongo")
    with pytest.raises(ValueError, match="Unsupported repository backend"):
        create_locomotive_repository(settings)
