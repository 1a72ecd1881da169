"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Values are validated at load time.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Every field has a default so the service can start (and answer /health
    with 503) even when MongoDB or Firebase are not configured.
    """

    # App
    app_name: str = "tutorhub-api"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    # MongoDB
    mongo_uri: str = Field(
        default="mongodb://localhost:27017",
        validation_alias=AliasChoices("MONGO_URI", "MONGO_URI_TEST"),
    )
    mongo_db_name: str = "tutorhub"
    mongo_connect_timeout_ms: int = 10_000
    mongo_socket_timeout_ms: int = 45_000
    mongo_server_selection_timeout_ms: int = 30_000

    # CORS
    allowed_origins: str = "*"

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    # Firebase Authentication: either the three service account fields or a
    # full service account JSON (key as string, or path to file).
    firebase_project_id: str | None = None
    firebase_client_email: str | None = None
    firebase_private_key: SecretStr | None = None
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def validate_ranges(self) -> "Settings":
        """Reject out-of-range port, timeouts and sample rate."""
        if not 1 <= self.port <= 65535:
            raise ValueError(f"PORT must be between 1 and 65535, got: {self.port}")
        for name in (
            "mongo_connect_timeout_ms",
            "mongo_socket_timeout_ms",
            "mongo_server_selection_timeout_ms",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name.upper()} must be positive")
        if not 0.0 <= self.telemetry_sample_rate <= 1.0:
            raise ValueError(
                f"TELEMETRY_SAMPLE_RATE must be between 0.0 and 1.0, got: {self.telemetry_sample_rate}"
            )
        return self

    @property
    def cors_origins(self) -> list[str]:
        """Allowed origins as a list (``["*"]`` allows any origin)."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
