"""Core configuration, database session and error types."""

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.exceptions import AppError

__all__ = ["AppError", "Settings", "get_db", "get_settings"]
