from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppConfig(BaseSettings):
    """Application configuration using Pydantic BaseSettings.

    Loads configuration from environment variables and .env file (if present).
    Fields are type-checked and validated. Defaults are provided where appropriate.
    """
    # Application
    app_env: str = "local"
    log_level: str = "DEBUG"

    # Backend API
    server_api_url: str = "http://localhost:8080/"
    http_timeout: float = 10.0

    # Default sort for list queries
    default_sort_predicate: str = "id"
    default_sort_ascending: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    def get_endpoint_for(self, api: str, microservice: Optional[str] = None) -> str:
        """Resolve a relative API path to a fully-qualified URL.

        Args:
            api (str): Resource path relative to the server, e.g. ``api/orders``.
            microservice (str, optional): Gateway-routed service name. Defaults to None.
        Returns:
            str: The absolute resource URL.
        """
        prefix = self.server_api_url
        if prefix and not prefix.endswith("/"):
            prefix += "/"
        if microservice:
            return f"{prefix}services/{microservice}/{api}"
        return f"{prefix}{api}"

_config: Optional[AppConfig] = None

def get_config() -> AppConfig:
    """Return the AppConfig instance (singleton pattern)."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config

def set_config_for_test(**kwargs):
    """For testing only: override the AppConfig instance with new values."""
    global _config
    _config = AppConfig(**kwargs)
