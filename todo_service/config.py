"""
Configuration Management Module

Configures application parameters via environment variables or .env file.
Store credentials are read here once and handed to the DynamoDB client explicitly.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from todo_service import __version__


class Settings(BaseSettings):
    """
    Application Configuration Class

    All configuration items can be overridden by environment variables, with names matching fields (uppercase).
    """

    # Application Config
    APP_NAME: str = "Todo Service"
    APP_VERSION: str = __version__
    DEBUG: bool = False

    # Standalone Server Config
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # CORS Config
    # Comma-separated list of allowed origins, "*" allows all
    ALLOWED_ORIGINS: str = "*"

    # AWS Credentials
    # Left unset, boto3 falls back to its default credential chain (e.g. the Lambda role)
    AWS_ACCESS_KEY_ID: Optional[str] = None
    AWS_SECRET_ACCESS_KEY: Optional[str] = None
    AWS_SESSION_TOKEN: Optional[str] = None
    AWS_REGION: str = "eu-west-1"

    # DynamoDB Config
    # Endpoint override for local testing, e.g. "http://localhost:8000"
    DYNAMODB_ENDPOINT_URL: Optional[str] = None
    TODO_TABLE_NAME: str = "TodoTable"
    # Max items returned by one list scan (1-20)
    TODO_LIST_LIMIT: int = Field(20, ge=1, le=20)
    # Create the table on startup if missing (local development only)
    DYNAMODB_CREATE_TABLE: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get application configuration (Singleton)

    Uses lru_cache to ensure configuration is loaded only once.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()
