"""
Explorer Configuration

Settings for the AtomicAssets explorer API consumed by the field discovery
and asset filter operations. Values load from the environment (prefix
``EXPLORER_``) or a local .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_FIELDS = [
    "timestamp",
    "date",
    "year",
    "month",
    "day",
    "location",
    "nation",
    "state",
    "city",
    "geotag",
]


class ExplorerSettings(BaseSettings):
    """
    Connection settings for the explorer API

    The endpoint layout is ``{base_url}/{namespace}/v1/<resource>``.
    """

    base_url: str = "https://wax.api.atomicassets.io"
    namespace: str = "atomicassets"

    # Fields looked up in template immutable data when the caller passes none
    default_fields: list[str] = DEFAULT_FIELDS

    request_timeout: float | None = 30.0
    page_limit: int = 100

    model_config = SettingsConfigDict(
        env_prefix="EXPLORER_", env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @property
    def api_root(self) -> str:
        """Root URL of the versioned explorer endpoints"""
        return f"{self.base_url.rstrip('/')}/{self.namespace.strip('/')}/v1"
