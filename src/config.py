from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """HTTP server settings."""

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="SERVER_", env_file=".env", extra="ignore")


class LanguageSettings(BaseSettings):
    """Google Cloud Natural Language settings."""

    request_timeout: float | None = None

    model_config = SettingsConfigDict(env_prefix="LANGUAGE_", env_file=".env", extra="ignore")


class Settings(BaseSettings):
    """Application settings container."""

    server: ServerSettings = ServerSettings()
    language: LanguageSettings = LanguageSettings()

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
