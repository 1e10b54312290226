"""Configuration using pydantic-settings."""

from pydantic_settings import BaseSettings


class HttpdescSettings(BaseSettings):
    """httpdesc configuration."""

    timeout: float = 10.0
    user_agent: str = "httpdesc/0.1"
    max_connections: int = 100
    max_keepalive_connections: int = 20
    http_version: str = "HTTP/1.1"
    log_level: str = "WARNING"

    model_config = {"env_prefix": "HTTPDESC_"}


settings = HttpdescSettings()
