"""Configuration schema using Pydantic.

Persisted to ~/.blockwatch/config.json; every field can be overridden through
BLOCKWATCH_* environment variables (nested with ``__``).
"""

from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic_settings import BaseSettings

DEFAULT_ENDPOINT = "https://cloudflare-eth.com"


class RpcConfig(BaseModel):
    """JSON-RPC node configuration."""
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float | None = 30.0  # seconds; None waits indefinitely

    @field_validator("endpoint")
    @classmethod
    def _endpoint_is_http(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"rpc endpoint must be an http(s) URL: {value!r}")
        return value

    @field_validator("timeout")
    @classmethod
    def _timeout_positive(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("rpc timeout must be positive")
        return value


class LoggingConfig(BaseModel):
    """Log sinks configured by the CLI."""
    level: str = "WARNING"
    file: bool = False  # also write ~/.blockwatch/logs/<command>.log


class Config(BaseSettings):
    """Root configuration for blockwatch."""
    rpc: RpcConfig = Field(default_factory=RpcConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(
        env_prefix="BLOCKWATCH_",
        env_nested_delimiter="__"
    )
