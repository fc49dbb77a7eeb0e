"""
Settings and Configuration Management

Loads the environment file, then builds the application and database
sections into one aggregate Config.
"""

import os
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from src.config.app import AppConfig, build_app_config
from src.config.database import DatabaseConfig, build_database_config
from src.config.env import PathLike, load_environment


class Config(BaseModel):
    """Aggregate configuration: one field per section."""
    model_config = ConfigDict(frozen=True)

    app: AppConfig
    database: DatabaseConfig

    @classmethod
    def keys(cls) -> Tuple[str, ...]:
        return tuple(cls.model_fields)

    def to_dict(self) -> Dict[str, Any]:
        """Plain mapping of every section, secrets masked."""
        data = self.model_dump(mode='json')
        data['database']['url'] = self.database.safe_url()
        return data


def build_config(env: Optional[Mapping[str, str]] = None) -> Config:
    """
    Build the aggregate config from an environment snapshot.

    Section errors are not handled here.

    Args:
        env: Environment variables (default: ``os.environ``)

    Returns:
        Config with ``app`` and ``database`` sections

    Raises:
        ConfigurationError: If a section rejects its variables
    """
    if env is None:
        env = os.environ
    return Config(
        app=build_app_config(env),
        database=build_database_config(env),
    )


def load_config(env_file: Optional[PathLike] = None) -> Config:
    """
    Load the environment file, then build the aggregate config.

    The config is built whether or not the environment file loaded.

    Args:
        env_file: Environment file path (default: ``.env`` in the working directory)

    Returns:
        Validated Config
    """
    load_environment(env_file)
    return build_config()


# Global config instance (lazy loaded)
_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get global config instance (singleton pattern).

    Returns:
        Config instance
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the global config instance so the next get_config() rebuilds it."""
    global _config
    _config = None
