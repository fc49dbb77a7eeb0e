"""
Application Configuration

Server identity, runtime environment and logging settings.
"""

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.config.base import build_section


ENVIRONMENTS = ('development', 'test', 'staging', 'production')

APP_SOURCES = {
    'name': ('APP_NAME',),
    'env': ('APP_ENV', 'NODE_ENV'),
    'host': ('APP_HOST', 'HOST'),
    'port': ('APP_PORT', 'PORT'),
    'url': ('APP_URL',),
    'debug': ('APP_DEBUG',),
    'log_level': ('LOG_LEVEL',),
    'log_format': ('LOG_FORMAT',),
    'log_file': ('LOG_FILE',),
}


class AppConfig(BaseModel):
    """Application configuration."""
    model_config = ConfigDict(frozen=True)

    name: str = Field('app', min_length=1, description="Application name")
    env: str = Field('development', description="Runtime environment")
    host: str = Field('0.0.0.0', min_length=1, description="Bind address")
    port: int = Field(3000, ge=1, le=65535, description="Listen port")
    url: str = Field('', description="Public base URL")
    debug: bool = Field(True, description="Debug mode")
    log_level: str = Field('INFO', description="Log level")
    log_format: str = Field('text', description="Log format (json or text)")
    log_file: Optional[str] = Field(None, description="Log file path")

    @model_validator(mode='before')
    @classmethod
    def derive_defaults(cls, data: Any) -> Any:
        # url and debug follow port and env unless given explicitly
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if data.get('debug') is None:
            env = str(data.get('env', 'development')).strip().lower()
            data['debug'] = env != 'production'
        if not data.get('url'):
            data['url'] = f"http://localhost:{data.get('port', 3000)}"
        return data

    @field_validator('env')
    @classmethod
    def validate_env(cls, v):
        v = v.strip().lower()
        if v not in ENVIRONMENTS:
            raise ValueError(f"Invalid environment: {v}. Must be one of {list(ENVIRONMENTS)}")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator('log_format')
    @classmethod
    def validate_format(cls, v):
        valid_formats = ['json', 'text']
        if v.lower() not in valid_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of {valid_formats}")
        return v.lower()

    @property
    def is_production(self) -> bool:
        return self.env == 'production'

    @property
    def is_development(self) -> bool:
        return self.env == 'development'


def build_app_config(env: Mapping[str, str]) -> AppConfig:
    """
    Build the application config from an environment snapshot.

    Args:
        env: Environment variables (e.g. ``os.environ`` or a plain dict)

    Returns:
        Validated AppConfig

    Raises:
        ConfigurationError: If a variable holds an invalid value
    """
    return build_section('app', AppConfig, env, APP_SOURCES)
