from .config import Settings, get_settings
from .logging_config import configure_logging
from .security import generate_session_token

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "generate_session_token",
]
