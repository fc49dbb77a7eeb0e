"""
Database Configuration

Connection and pool settings. ``DATABASE_URL`` takes precedence over the
individual ``DB_*`` variables when building the connection URL.
"""

from typing import Any, Mapping, Optional
from urllib.parse import quote, urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator, model_validator

from src.config.base import build_section


DEFAULT_PORTS = {'postgres': 5432, 'mysql': 3306}
URL_SCHEMES = {'postgres': 'postgresql', 'mysql': 'mysql', 'sqlite': 'sqlite'}
PASSWORD_MASK = '***'

DATABASE_SOURCES = {
    'client': ('DB_CLIENT',),
    'host': ('DB_HOST',),
    'port': ('DB_PORT',),
    'name': ('DB_NAME', 'DB_DATABASE'),
    'user': ('DB_USER', 'DB_USERNAME'),
    'password': ('DB_PASSWORD',),
    'pool_min': ('DB_POOL_MIN',),
    'pool_max': ('DB_POOL_MAX',),
    'ssl': ('DB_SSL',),
    'url': ('DATABASE_URL',),
}


class DatabaseConfig(BaseModel):
    """Database connection configuration."""
    model_config = ConfigDict(frozen=True)

    client: str = Field('postgres', description="Database driver")
    host: str = Field('localhost', min_length=1, description="Database host")
    port: Optional[int] = Field(None, ge=1, le=65535, description="Database port")
    name: str = Field('app', min_length=1, description="Database name or sqlite file")
    user: str = Field('postgres', description="Database user")
    password: SecretStr = Field(SecretStr(''), description="Database password")
    pool_min: int = Field(2, ge=0, le=100, description="Minimum pool connections")
    pool_max: int = Field(10, ge=1, le=100, description="Maximum pool connections")
    ssl: bool = Field(False, description="Require SSL")
    url: Optional[str] = Field(None, description="Full connection URL override")

    @model_validator(mode='before')
    @classmethod
    def default_port(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get('port') is None:
            client = str(data.get('client', 'postgres')).strip().lower()
            if client in DEFAULT_PORTS:
                data = dict(data, port=DEFAULT_PORTS[client])
        return data

    @field_validator('client')
    @classmethod
    def validate_client(cls, v):
        v = v.strip().lower()
        if v == 'postgresql':
            v = 'postgres'
        if v not in URL_SCHEMES:
            raise ValueError(f"Invalid database client: {v}. Must be one of {list(URL_SCHEMES)}")
        return v

    @field_validator('url')
    @classmethod
    def validate_url(cls, v):
        if v is None:
            return v
        parts = urlsplit(v)
        if not parts.scheme:
            raise ValueError("Connection URL must include a scheme")
        try:
            parts.port
        except ValueError as e:
            raise ValueError(f"Invalid port in connection URL: {e}") from e
        return v

    @model_validator(mode='after')
    def check_pool(self):
        if self.pool_min > self.pool_max:
            raise ValueError(f"pool_min ({self.pool_min}) must not exceed pool_max ({self.pool_max})")
        return self

    @property
    def connection_url(self) -> str:
        """Connection URL, with the real password."""
        if self.url:
            return self.url
        return self._compose(self.password.get_secret_value())

    def safe_url(self) -> str:
        """Connection URL suitable for logs, password masked."""
        if self.url:
            parts = urlsplit(self.url)
            if parts.password is None:
                return self.url
            userinfo, _, hostport = parts.netloc.rpartition('@')
            username = userinfo.split(':', 1)[0]
            netloc = f"{username}:{PASSWORD_MASK}@{hostport}"
            return urlunsplit(parts._replace(netloc=netloc))
        return self._compose(PASSWORD_MASK if self.password.get_secret_value() else '', masked=True)

    def _compose(self, password: str, masked: bool = False) -> str:
        scheme = URL_SCHEMES[self.client]
        if self.client == 'sqlite':
            return f"{scheme}:///{self.name}"

        auth = quote(self.user, safe='')
        if password:
            auth += ':' + (password if masked else quote(password, safe=''))
        netloc = f"{auth}@{self.host}" if auth else self.host
        if self.port is not None:
            netloc += f":{self.port}"
        return f"{scheme}://{netloc}/{self.name}"


def build_database_config(env: Mapping[str, str]) -> DatabaseConfig:
    """
    Build the database config from an environment snapshot.

    Args:
        env: Environment variables

    Returns:
        Validated DatabaseConfig

    Raises:
        ConfigurationError: If a variable holds an invalid value
    """
    return build_section('database', DatabaseConfig, env, DATABASE_SOURCES)
