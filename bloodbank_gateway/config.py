"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "bloodbank-gateway"
    log_level: str = "INFO"

    # Matching
    match_result_limit: int = 20  # Max donors returned per match request
    max_candidates_per_request: int = 5000


settings = Settings()
