# Standard library imports
import os
from typing import Final, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3001"))
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "swfavorites")
        self.mongo_server_selection_timeout_ms: Final[int] = int(
            os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000")
        )

        # Collection Names
        self.favorites_collection: Final[str] = os.getenv("FAVORITES_COLLECTION", "favorites")

        # Catalog API Configuration (Star Wars API)
        self.catalog_base_url: Final[str] = os.getenv(
            "CATALOG_BASE_URL",
            "https://swapi.dev/api"
        ).rstrip("/")
        self.catalog_timeout_seconds: Final[float] = float(
            os.getenv("CATALOG_TIMEOUT_SECONDS", "10")
        )


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
