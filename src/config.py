from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.runtime import ServiceIdentity


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        # An exported-but-empty variable falls back to the default as well.
        env_ignore_empty=True,
    )

    # Listener
    host: str = "0.0.0.0"
    port: int = Field(8080, ge=0, le=65535)

    # Identity
    app_name: str = "go-demo-app"
    app_version: str = "1.0.0"

    # Logging
    log_level: str = "INFO"

    def identity(self) -> ServiceIdentity:
        return ServiceIdentity(name=self.app_name, version=self.app_version)


def load_settings() -> Settings:
    """Read configuration from the process environment, applying defaults."""
    return Settings()
