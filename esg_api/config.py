"""Application configuration loaded from environment variables."""

import os
from pathlib import Path
from pydantic_settings import BaseSettings

# Check if .env file exists and is readable
_env_file = None
try:
    env_path = Path(".env")
    if env_path.exists() and os.access(env_path, os.R_OK):
        _env_file = ".env"
except (OSError, PermissionError):
    pass


class Settings(BaseSettings):
    """All configuration for the ESG sustainability API.

    Values are loaded from environment variables or a .env file.
    """

    # Application
    app_name: str = "esg-sustainability-api"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database
    database_url: str = "sqlite:///./data/esg_sustainability.db"

    # JWT bearer tokens
    jwt_secret_key: str = "change-me-esg-sustainability-api-development-secret"
    jwt_algorithm: str = "HS256"
    jwt_issuer: str = "ESGSustainabilityAPI"
    jwt_audience: str = "ESGSustainabilityAPI_Users"
    jwt_expiration_minutes: int = 60

    # CORS
    allowed_origins: list[str] = ["http://localhost:3000", "http://localhost:8080"]

    # Listing and dashboard limits
    default_page_size: int = 10
    max_page_size: int = 100
    ranking_max_limit: int = 100
    comparison_max_companies: int = 10

    model_config = {
        "env_file": _env_file,
        "env_file_encoding": "utf-8",
        "env_file_ignore_empty": True,
    }
