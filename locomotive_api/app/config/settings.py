"""Settings for the API."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    host: str = Field("0.0.0.0", validation_alias="HOST")
    port: int = Field(3000, validation_alias="PORT")

    api_key: str = Field("demo-read", validation_alias="API_KEY")
    admin_key: str = Field("demo-admin", validation_alias="ADMIN_KEY")

    repository_backend: str = Field("inmemory", validation_alias="REPOSITORY_BACKEND")
    seed_demo_data: bool = Field(True, validation_alias="SEED_DEMO_DATA")

    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
