"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    environment: str = "development"
    debug: bool = False
    service_name: str = "timeflow-service"

    # CORS
    cors_origins: list[str] = ["*"]

    # Relative dates ("tomorrow", "friday") resolve against this calendar
    timezone: str = "America/New_York"

    # REST schedule store
    schedule_store_url: str = "http://localhost:5000/api"
    schedule_store_timeout: float = 10.0

    class Config:
        env_prefix = "TIMEFLOW_"
        case_sensitive = False


settings = Settings()
