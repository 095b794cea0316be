"""Application configuration."""
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Completion service (OpenAI-compatible)
    openai_api_key: str
    openai_base_url: Optional[str] = None
    completion_model: str = "gpt-4o-mini"
    completion_max_attempts: int = 3
    completion_retry_delay: float = 5.0

    # Spreadsheet storage
    sheets_backend: str = "google"  # google, memory
    spreadsheet_id: Optional[str] = None
    google_service_account_file: str = "service-account.json"
    orders_range: str = "Orders!A:J"

    # Pricing
    prices_file: Optional[str] = None

    # Logging
    log_level: str = "INFO"

    # Server
    cors_origins: str = "*"
    host: str = "0.0.0.0"
    port: int = 4000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
