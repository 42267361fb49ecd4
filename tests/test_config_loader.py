"""Tests for config schema, loader and cached access."""

import json
from pathlib import Path

import pytest

from blockwatch.config.access import apply_overrides, resolve_config
from blockwatch.config.loader import (
    camel_to_snake,
    convert_keys,
    convert_to_camel,
    load_config,
    save_config,
    snake_to_camel,
)
from blockwatch.config.schema import DEFAULT_ENDPOINT, Config, RpcConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("BLOCKWATCH_RPC__ENDPOINT", raising=False)
    monkeypatch.delenv("BLOCKWATCH_RPC__TIMEOUT", raising=False)


def test_defaults() -> None:
    cfg = Config()
    assert cfg.rpc.endpoint == DEFAULT_ENDPOINT == "https://cloudflare-eth.com"
    assert cfg.rpc.timeout == 30.0
    assert cfg.logging.level == "WARNING"
    assert cfg.logging.file is False


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "missing.json")
    assert cfg.rpc.endpoint == DEFAULT_ENDPOINT


def test_load_camel_case_file(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"rpc": {"endpoint": "http://localhost:8545", "timeout": 5}, "logging": {"level": "DEBUG"}}))
    cfg = load_config(path)
    assert cfg.rpc.endpoint == "http://localhost:8545"
    assert cfg.rpc.timeout == 5.0
    assert cfg.logging.level == "DEBUG"


def test_null_timeout_disables_it(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"rpc": {"timeout": None}}))
    assert load_config(path).rpc.timeout is None


def test_malformed_json_raises_value_error(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ValueError, match="Failed to load config"):
        load_config(path)


@pytest.mark.parametrize(
    "data",
    [
        {"rpc": {"endpoint": "ftp://node"}},
        {"rpc": {"timeout": 0}},
        ["not", "an", "object"],
    ],
)
def test_invalid_values_raise_value_error(tmp_path: Path, data) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data))
    with pytest.raises(ValueError):
        load_config(path)


def test_env_overrides_missing_file_values(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("BLOCKWATCH_RPC__ENDPOINT", "https://env.example.org")
    cfg = load_config(tmp_path / "missing.json")
    assert cfg.rpc.endpoint == "https://env.example.org"


def test_save_and_reload_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    cfg = Config(rpc=RpcConfig(endpoint="https://rpc.example.org", timeout=12.5))
    save_config(cfg, path)
    assert json.loads(path.read_text())["rpc"]["endpoint"] == "https://rpc.example.org"
    assert load_config(path).rpc.timeout == 12.5


def test_key_conversion_helpers() -> None:
    assert camel_to_snake("requestTimeout") == "request_timeout"
    assert snake_to_camel("request_timeout") == "requestTimeout"
    assert convert_keys({"rpcNode": [{"maxWait": 1}]}) == {"rpc_node": [{"max_wait": 1}]}
    assert convert_to_camel({"rpc_node": {"max_wait": 1}}) == {"rpcNode": {"maxWait": 1}}


def test_apply_overrides_replaces_endpoint_only() -> None:
    base = Config(rpc=RpcConfig(endpoint="https://one.example.org", timeout=9.0))
    cfg = apply_overrides(base, endpoint="http://localhost:8545")
    assert cfg.rpc.endpoint == "http://localhost:8545"
    assert cfg.rpc.timeout == 9.0
    assert base.rpc.endpoint == "https://one.example.org"


def test_apply_overrides_without_values_returns_same_config() -> None:
    base = Config()
    assert apply_overrides(base) is base


@pytest.mark.parametrize("endpoint", ["ftp://node", "localhost:8545", ""])
def test_apply_overrides_validates_endpoint(endpoint: str) -> None:
    with pytest.raises(ValueError):
        apply_overrides(Config(), endpoint=endpoint)


def test_apply_overrides_validates_timeout() -> None:
    with pytest.raises(ValueError):
        apply_overrides(Config(), timeout=-1)


def test_resolve_config_reads_file_then_overrides(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"rpc": {"endpoint": "http://one", "timeout": 4}}))
    assert resolve_config(path).rpc.endpoint == "http://one"
    cfg = resolve_config(path, endpoint="http://two")
    assert cfg.rpc.endpoint == "http://two"
    assert cfg.rpc.timeout == 4.0
