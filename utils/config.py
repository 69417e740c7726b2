"""
Configuration management for Recipe Keeper.

Handles environment variables, storage settings, and application configuration.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Config:
    """Application configuration settings"""

    # Storage settings
    storage_backend: str = "sqlite"  # sqlite or memory
    database_path: str = "recipe_keeper.db"
    favorites_key: str = "recipe-keeper-favorites"
    shopping_list_key: str = "recipe-keeper-shopping-list"

    # Application
    debug_mode: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: str = "logs/recipe_keeper.log"

    @classmethod
    def from_environment(cls) -> 'Config':
        """Create configuration from environment variables"""
        return cls(
            # Storage
            storage_backend=os.getenv("RECIPE_STORAGE_BACKEND", "sqlite").lower(),
            database_path=os.getenv("RECIPE_DB_PATH", "recipe_keeper.db"),
            favorites_key=os.getenv("RECIPE_FAVORITES_KEY", "recipe-keeper-favorites"),
            shopping_list_key=os.getenv("RECIPE_SHOPPING_LIST_KEY", "recipe-keeper-shopping-list"),

            # Application
            debug_mode=os.getenv("RECIPE_DEBUG", "false").lower() == "true",

            # Logging
            log_level=os.getenv("RECIPE_LOG_LEVEL", "INFO"),
            log_file=os.getenv("RECIPE_LOG_FILE", "logs/recipe_keeper.log")
        )

    def ensure_directories(self):
        """Create necessary directories"""
        directories = [Path(self.log_file).parent]
        if self.uses_sqlite() and self.database_path != ":memory:":
            directories.append(Path(self.database_path).parent)

        for directory in directories:
            if directory and directory != Path("."):
                directory.mkdir(parents=True, exist_ok=True)

    def uses_sqlite(self) -> bool:
        """Check if persisted collections live in SQLite"""
        return self.storage_backend == "sqlite"


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get global configuration instance"""
    global _config
    if _config is None:
        _config = Config.from_environment()
        _config.ensure_directories()
    return _config


def reload_config():
    """Reload configuration from environment"""
    global _config
    _config = None
    return get_config()
