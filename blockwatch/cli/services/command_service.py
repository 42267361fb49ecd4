"""Turn shell command lines into ChainClient calls."""

from __future__ import annotations

from dataclasses import dataclass, field

from blockwatch.chain.client import ChainClient
from blockwatch.chain.models import Transaction
from blockwatch.utils.exceptions import BlockwatchError, format_error

ACTIONS: dict[str, str] = {
    "getCurrentBlock": "print the latest block height",
    "getTransaction": "getTransaction <address>: transactions of a subscribed address in the latest block",
    "subscribeAddress": "subscribeAddress <address>: start tracking an address",
    "unsubscribeAddress": "unsubscribeAddress <address>: stop tracking an address",
    "list": "list subscribed addresses",
    "help": "show this help",
}


@dataclass
class CommandResult:
    ok: bool
    message: str = ""
    transactions: list[Transaction] | None = None
    addresses: list[str] = field(default_factory=list)


def help_text() -> str:
    lines = ["Actions:"]
    lines.extend(f"  {name:<20} {desc}" for name, desc in ACTIONS.items())
    return "\n".join(lines)


class CommandService:
    """Executes one command line at a time against a single client."""

    def __init__(self, client: ChainClient):
        self.client = client

    def execute(self, line: str) -> CommandResult:
        args = line.split()
        if not args:
            return CommandResult(ok=False, message=f"You need to define an action ({', '.join(ACTIONS)})")
        action, rest = args[0], args[1:]
        address = rest[0] if rest else ""
        try:
            return self._run(action, address)
        except BlockwatchError as e:
            return CommandResult(ok=False, message=format_error(e))

    def _run(self, action: str, address: str) -> CommandResult:
        if action == "getCurrentBlock":
            return CommandResult(ok=True, message=str(self.client.get_current_block_height()))
        if action == "getTransaction":
            txs = self.client.get_transactions_for_address(address)
            return CommandResult(ok=True, message=f"{len(txs)} transaction(s) in latest block", transactions=txs)
        if action == "subscribeAddress":
            ok = self.client.subscribe_address(address)
            return CommandResult(ok=ok, message=f"subscribed {address}" if ok else f"could not subscribe {address}")
        if action == "unsubscribeAddress":
            ok = self.client.unsubscribe_address(address)
            return CommandResult(ok=ok, message=f"unsubscribed {address}" if ok else f"could not unsubscribe {address}")
        if action == "list":
            addresses = sorted(self.client.registry.subscribers())
            return CommandResult(ok=True, message=f"{len(addresses)} subscribed", addresses=addresses)
        if action == "help":
            return CommandResult(ok=True, message=help_text())
        return CommandResult(
            ok=False,
            message=f"Invalid action: {action}. Pick one of: {', '.join(ACTIONS)}",
        )
