# Standard library imports
import os
from typing import Final, List, Optional


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Application metadata
        self.app_title: Final[str] = os.getenv("APP_TITLE", "Users API")
        self.app_version: Final[str] = os.getenv("APP_VERSION", "1.0.0")
        
        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3131"))
        
        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        
        # CORS Configuration (comma-separated origins)
        self.cors_allow_origins: Final[List[str]] = _split_csv(
            os.getenv("CORS_ALLOW_ORIGINS", "*")
        )


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


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
