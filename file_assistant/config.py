# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load all configuration from environment variables / .env file.
#   Provides typed config objects to all other modules.
#
# CLASSES:
# --------
# - StorageConfig (dataclass)
#     storage_dir: str     (default "~/.file_assistant")
#     metadata_file: str   (default "fileMetadata.json")
#     indent: int          (default 2)
#
# - AppConfig (dataclass)
#     storage: StorageConfig
#     app_name: str        (default "File Assistant")
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Forget the cached singleton (next get_config() re-reads the env).
#
# USAGE:
# ------
#   from file_assistant.config import get_config
#   config = get_config()
#   print(config.storage.metadata_path)
#
# ==============================================

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


DEFAULT_STORAGE_DIR = "~/.file_assistant"
DEFAULT_METADATA_FILE = "fileMetadata.json"


@dataclass
class StorageConfig:
    """Where the metadata JSON document lives."""
    storage_dir: str = DEFAULT_STORAGE_DIR
    metadata_file: str = DEFAULT_METADATA_FILE
    indent: int = 2

    @property
    def storage_path(self) -> Path:
        return Path(self.storage_dir).expanduser()

    @property
    def metadata_path(self) -> Path:
        return self.storage_path / self.metadata_file


@dataclass
class AppConfig:
    """Main application configuration."""
    storage: StorageConfig = field(default_factory=StorageConfig)
    app_name: str = "File Assistant"


# Singleton instance
_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.
    
    Returns:
        AppConfig: Application configuration
    """
    global _config_instance
    
    if _config_instance is not None:
        return _config_instance
    
    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)
    
    storage_config = StorageConfig(
        storage_dir=os.getenv("FILE_ASSISTANT_STORAGE_DIR", DEFAULT_STORAGE_DIR),
        metadata_file=os.getenv("FILE_ASSISTANT_METADATA_FILE", DEFAULT_METADATA_FILE),
        indent=int(os.getenv("FILE_ASSISTANT_JSON_INDENT", "2"))
    )
    
    _config_instance = AppConfig(
        storage=storage_config,
        app_name=os.getenv("FILE_ASSISTANT_APP_NAME", "File Assistant")
    )
    
    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration."""
    global _config_instance
    _config_instance = None
