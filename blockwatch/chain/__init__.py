"""
Chain access

JSON-RPC transport, value types and the client used by every command.
"""

from blockwatch.chain.client import ChainClient
from blockwatch.chain.hexutil import parse_hex_uint64, to_hex_quantity
from blockwatch.chain.models import Block, RpcEnvelope, RpcFailure, RpcSuccess, Transaction
from blockwatch.chain.rpc import JsonRpcTransport

__all__ = [
    "ChainClient",
    "JsonRpcTransport",
    "Block",
    "Transaction",
    "RpcEnvelope",
    "RpcSuccess",
    "RpcFailure",
    "parse_hex_uint64",
    "to_hex_quantity",
]
