from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_PATH = Path(__file__).resolve().parents[2] / ".env"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_PATH, env_file_encoding="utf-8", extra="ignore")

    # App
    env: str = "dev"
    service_name: str = "homestay-api"
    log_level: str = "INFO"

    # Database (credentials come from DATABASE_URL in the environment / .env)
    database_url: str = "postgresql+asyncpg://localhost:5432/homestay"

    # Session
    session_header: str = "X-CSRF-TOKEN"
    session_cookie: str = "viewer_token"
    viewer_cookie: str = "viewer"

    # Telemetry
    telemetry_enabled: bool = False
    otlp_endpoint: str = "http://localhost:4318"  # Jaeger OTLP HTTP


settings = Settings()
