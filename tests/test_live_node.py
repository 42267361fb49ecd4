"""Smoke test against a real node; opt in with BLOCKWATCH_LIVE=1."""

import os

import pytest

from blockwatch.chain.client import ChainClient
from blockwatch.config.schema import Config, RpcConfig


@pytest.mark.network
def test_live_block_height_is_positive() -> None:
    endpoint = os.environ.get("BLOCKWATCH_RPC__ENDPOINT") or Config().rpc.endpoint
    with ChainClient.from_config(Config(rpc=RpcConfig(endpoint=endpoint))) as client:
        assert client.get_current_block_height() > 0
