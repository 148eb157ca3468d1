"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-simulator"
    log_level: str = "INFO"

    # Validation limits (values above these block the simulation)
    max_principal: float = 1e9
    max_rate_percent: float = 200.0
    max_months: int = 480

    # Display normalization clamps
    currency_display_max: float = 1e12
    percent_display_max: float = 1000.0


settings = Settings()
