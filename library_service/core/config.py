"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name of the service.
        version: Current service version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        notification_max_attempts: Total send attempts before a review
            notification is reported as failed.
        review_service_url: Base URL of the review backend.
        review_service_timeout: HTTP timeout in seconds for review calls.
        notification_webhook_timeout: HTTP timeout in seconds for webhook
            notification calls.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "LibraryService"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    notification_max_attempts: int = Field(default=5, ge=1)

    review_service_url: str = "http://localhost:8081"
    review_service_timeout: float = 10.0
    notification_webhook_timeout: float = 10.0


settings = Settings()
