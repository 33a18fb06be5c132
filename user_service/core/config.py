# Standard library imports
import os
from typing import Final, Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_user: Final[str] = os.getenv("MONGO_USER", "")
        self.mongo_password: Final[str] = os.getenv("MONGO_PASS", "")
        self.mongo_host: Final[str] = os.getenv("MONGO_HOST", "localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "users")
        self.mongo_direct_connection: Final[bool] = _env_bool("MONGO_DIRECT_CONNECTION", "true")

        # Every operation is bounded by this deadline (client-side timeoutMS)
        self.mongo_timeout_seconds: Final[float] = float(os.getenv("MONGO_TIMEOUT_SECONDS", "30"))
        self.mongo_connect_timeout_seconds: Final[float] = float(
            os.getenv("MONGO_CONNECT_TIMEOUT_SECONDS", "10")
        )

        # Startup bootstrap
        self.db_retry_interval_seconds: Final[float] = float(
            os.getenv("DB_RETRY_INTERVAL_SECONDS", "1")
        )

        # HTTP Configuration
        self.public_base_url: Final[str] = os.getenv("PUBLIC_BASE_URL", "http://user")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment"""
    global _settings
    _settings = None
