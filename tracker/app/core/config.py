"""
Configuration settings for the Parcel Tracker.

This module handles application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings
from typing import Any, Dict


class Settings(BaseSettings):
    """Application settings."""
    
    # Database Configuration
    database_url: str = "sqlite+aiosqlite:///./tracker.db"
    db_echo: bool = False
    db_pool_size: int = 20
    db_max_overflow: int = 10
    
    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s %(message)s"
    
    class Config:
        env_file = ".env"
        case_sensitive = False


def engine_options(config: Settings) -> Dict[str, Any]:
    """
    Build keyword arguments for create_async_engine.
    
    SQLite engines get their pool from the dialect, so pool sizing
    is only passed to server backends.
    """
    options: Dict[str, Any] = {
        "echo": config.db_echo,
        "future": True,
    }
    if not config.database_url.startswith("sqlite"):
        options["pool_size"] = config.db_pool_size
        options["max_overflow"] = config.db_max_overflow
    return options


settings = Settings()
