"""
API Configuration

Centralized settings for the FastAPI application.
API metadata is hardcoded, while environment-specific settings load from .env file.
Explorer endpoint settings live in atomic_offchain.config.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from atomic_offchain.config import ExplorerSettings


# Get the project root directory (one level up from fields_api/)
PROJECT_ROOT = Path(__file__).parent.parent


class Settings(BaseSettings):
    """
    Application settings for the Fields API

    API metadata (title, description, version) are hardcoded.
    Environment-specific settings are loaded from .env file.
    """

    # ============================================================================
    # API Metadata (hardcoded - versioned with code)
    # ============================================================================

    api_title: str = "AtomicAssets Fields API"
    api_description: str = (
        "Metadata field discovery and field-filtered NFT queries for AtomicAssets collections. "
        "Reports which fields the templates and schemas of a collection carry, and fetches "
        "assets by discovered templates, field values or nation code."
    )
    api_version: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    # ============================================================================
    # Environment Settings (loaded from .env)
    # ============================================================================

    environment: str = "development"  # development, staging, production
    api_port: int = 8000
    log_level: str = "INFO"

    # When unset, /api/v1 routes are open
    api_key: str | None = None

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"), env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode"""
        return self.environment.lower() == "development"


# ============================================================================
# Global settings instance
# ============================================================================

settings = Settings()

# Explorer settings instance (for convenience)
explorer_settings = ExplorerSettings(_env_file=str(PROJECT_ROOT / ".env"))
