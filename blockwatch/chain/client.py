"""
Chain client

Current block height, subscription management and latest-block transaction
lookup for subscribed addresses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from loguru import logger

from blockwatch.chain.hexutil import parse_hex_uint64, to_hex_quantity
from blockwatch.chain.models import Block, Transaction
from blockwatch.chain.rpc import JsonRpcTransport
from blockwatch.storage.subscribers import MemorySubscriberRegistry, SubscriberRegistry
from blockwatch.utils.exceptions import InvalidInputError, NotSubscribedError

if TYPE_CHECKING:
    from blockwatch.config.schema import Config


def _require_address(address: Any) -> str:
    if not isinstance(address, str) or not address:
        raise InvalidInputError("address must be a non-empty string", field="address")
    return address


class ChainClient:
    """Engine behind every user command.

    Owns its subscriber registry; two clients never share membership unless
    the same registry is passed to both.
    """

    def __init__(self, transport: JsonRpcTransport, registry: SubscriberRegistry | None = None):
        self.transport = transport
        self.registry = registry if registry is not None else MemorySubscriberRegistry()

    @classmethod
    def from_config(cls, config: "Config", registry: SubscriberRegistry | None = None) -> "ChainClient":
        transport = JsonRpcTransport(config.rpc.endpoint, timeout=config.rpc.timeout)
        return cls(transport, registry=registry)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "ChainClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def get_current_block_height(self) -> int:
        """Query ``eth_blockNumber`` and parse the hex height."""
        result = self.transport.call("eth_blockNumber", [])
        return parse_hex_uint64(result)

    def get_block(self, height: int) -> Block:
        """Fetch the block at ``height`` with full transaction objects."""
        result = self.transport.call("eth_getBlockByNumber", [to_hex_quantity(height), True])
        return Block.from_dict(result)

    def get_transactions_for_address(self, address: str) -> list[Transaction]:
        """
        Transactions in the latest block sent from or to ``address``.

        Only the most recent block at call time is inspected; earlier blocks
        are never scanned.

        Raises:
            InvalidInputError: empty address.
            NotSubscribedError: address not in the registry (no network call made).
            RPCError: transport failure or node-reported error.
            ParseError: malformed height or block payload.
        """
        address = _require_address(address)
        if not self.registry.is_subscribed(address):
            raise NotSubscribedError(address)
        height = self.get_current_block_height()
        block = self.get_block(height)
        matches = [tx for tx in block.transactions if tx.involves(address)]
        logger.debug(f"block {height}: {len(matches)}/{len(block.transactions)} transactions match {address}")
        return matches

    def subscribe_address(self, address: str) -> bool:
        address = _require_address(address)
        return self.registry.subscribe(address)

    def unsubscribe_address(self, address: str) -> bool:
        address = _require_address(address)
        return self.registry.unsubscribe(address)

    def is_subscribed(self, address: str) -> bool:
        return self.registry.is_subscribed(address)
