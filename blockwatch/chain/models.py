"""
Chain value types

Transactions, blocks and the JSON-RPC response envelope.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from blockwatch.utils.exceptions import ParseError


def _require_str(raw: dict[str, Any], key: str, *, nullable: bool = False) -> str:
    value = raw.get(key)
    if value is None and nullable:
        return ""
    if not isinstance(value, str):
        raise ParseError(f"field {key!r} must be a string, got {type(value).__name__}", value=value)
    return value


@dataclass(frozen=True)
class Transaction:
    """Transaction as returned inside a full block"""
    hash: str
    block_number: str
    from_address: str
    to_address: str
    value: str

    @classmethod
    def from_dict(cls, raw: Any) -> "Transaction":
        if not isinstance(raw, dict):
            raise ParseError(f"transaction must be an object, got {type(raw).__name__}", value=raw)
        return cls(
            hash=_require_str(raw, "hash"),
            block_number=_require_str(raw, "blockNumber"),
            from_address=_require_str(raw, "from"),
            # contract creation has no recipient
            to_address=_require_str(raw, "to", nullable=True),
            value=_require_str(raw, "value"),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "hash": self.hash,
            "blockNumber": self.block_number,
            "from": self.from_address,
            "to": self.to_address,
            "value": self.value,
        }

    def involves(self, address: str) -> bool:
        return self.from_address == address or self.to_address == address


@dataclass(frozen=True)
class Block:
    """Block with full transaction objects"""
    hash: str
    transactions: tuple[Transaction, ...] = ()

    @classmethod
    def from_dict(cls, raw: Any) -> "Block":
        if raw is None:
            raise ParseError("block not found (null result)")
        if not isinstance(raw, dict):
            raise ParseError(f"block must be an object, got {type(raw).__name__}", value=raw)
        txs = raw.get("transactions", [])
        if not isinstance(txs, list):
            raise ParseError("block transactions must be a list", value=txs)
        return cls(
            hash=_require_str(raw, "hash"),
            transactions=tuple(Transaction.from_dict(tx) for tx in txs),
        )


@dataclass(frozen=True)
class RpcSuccess:
    """Envelope whose ``error`` was absent or null"""
    result: Any
    id: int | None = None


@dataclass(frozen=True)
class RpcFailure:
    """Envelope carrying a node-reported error payload"""
    error: Any
    id: int | None = None

    @property
    def message(self) -> str:
        return str(self.error)


RpcEnvelope = Union[RpcSuccess, RpcFailure]


def decode_envelope(body: Any) -> RpcEnvelope:
    """
    Split a decoded JSON-RPC response into success or failure.

    The error field is checked first so a node error is never reported as a
    decoding problem of the result.
    """
    if not isinstance(body, dict):
        raise ParseError(f"JSON-RPC response must be an object, got {type(body).__name__}", value=body)
    raw_id = body.get("id")
    envelope_id = raw_id if isinstance(raw_id, int) and not isinstance(raw_id, bool) else None
    error = body.get("error")
    if error is not None:
        return RpcFailure(error=error, id=envelope_id)
    if "result" not in body:
        raise ParseError("JSON-RPC response has neither result nor error", value=body)
    return RpcSuccess(result=body["result"], id=envelope_id)
