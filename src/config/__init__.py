"""
Configuration Module

Loads ``.env`` into the process environment and exposes the application
and database sections as one pydantic-validated Config.
"""

from src.config.app import AppConfig, build_app_config
from src.config.database import DatabaseConfig, build_database_config
from src.config.env import load_environment, read_env_file
from src.config.settings import Config, build_config, load_config, get_config, reset_config

__all__ = [
    'Config',
    'AppConfig',
    'DatabaseConfig',
    'build_app_config',
    'build_database_config',
    'load_environment',
    'read_env_file',
    'build_config',
    'load_config',
    'get_config',
    'reset_config',
]
