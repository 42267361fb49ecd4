"""Effective configuration: file + environment + command-line overrides."""

from __future__ import annotations

from pathlib import Path

from blockwatch.config.loader import load_config
from blockwatch.config.schema import Config, RpcConfig


def apply_overrides(config: Config, *, endpoint: str | None = None, timeout: float | None = None) -> Config:
    """
    Return a copy of ``config`` with the given RPC fields replaced.

    The RPC section is rebuilt through ``RpcConfig`` so overrides go through
    the same validation as the file; a bad value raises ``ValueError``.
    """
    if endpoint is None and timeout is None:
        return config
    rpc = config.rpc.model_dump()
    if endpoint is not None:
        rpc["endpoint"] = endpoint
    if timeout is not None:
        rpc["timeout"] = timeout
    return config.model_copy(update={"rpc": RpcConfig(**rpc)})


def resolve_config(
    config_path: Path | None = None,
    *,
    endpoint: str | None = None,
    timeout: float | None = None,
) -> Config:
    """Load the config file (or defaults) and apply command-line overrides."""
    path = Path(config_path).expanduser() if config_path else None
    return apply_overrides(load_config(path), endpoint=endpoint, timeout=timeout)
