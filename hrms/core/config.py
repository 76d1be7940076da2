# Standard library imports
import os
from typing import Final, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults,
    except the connection string, which must be supplied externally.
    """
    
    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()
        
        # Database Configuration
        self.mongo_uri: Final[Optional[str]] = os.getenv("MONGO_URI")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "fiber-hrms")
        self.mongo_connect_timeout_seconds: Final[float] = float(
            os.getenv("MONGO_CONNECT_TIMEOUT_SECONDS", "10")
        )
        
        # Collection Names
        self.employees_collection: Final[str] = os.getenv("EMPLOYEES_COLLECTION", "employees")
        
        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        
        # Server Configuration (used by `python -m hrms`)
        self.app_host: Final[str] = os.getenv("APP_HOST", "0.0.0.0")
        self.app_port: Final[int] = int(os.getenv("APP_PORT", "3000"))


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
