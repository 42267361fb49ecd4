"""CLI commands for blockwatch.

Single entry point: one-shot commands (block, txs, config) and an
interactive shell that feeds command lines to one serializing worker.
"""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from blockwatch import __version__, __logo__
from blockwatch.chain.client import ChainClient
from blockwatch.chain.models import Transaction
from blockwatch.cli.services.command_service import CommandResult, CommandService, help_text
from blockwatch.cli.services.worker_service import CommandWorker
from blockwatch.cli.shared.logging_utils import configure_stderr, ensure_rotating_log_file
from blockwatch.config.access import resolve_config
from blockwatch.config.schema import Config
from blockwatch.utils.exceptions import BlockwatchError, format_error

app = typer.Typer(
    name="blockwatch",
    help=f"{__logo__} blockwatch - watch addresses in the latest block",
    no_args_is_help=True,
)

console = Console()
EXIT_COMMANDS = {"exit", "quit", "/exit", "/quit", ":q"}

_state: dict[str, object] = {"config_path": None, "endpoint": None, "verbose": False}


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} blockwatch v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config_path: Path = typer.Option(None, "--config", "-c", help="Path to config.json"),
    endpoint: str = typer.Option(None, "--endpoint", "-e", help="JSON-RPC endpoint URL (overrides config)"),
    verbose: bool = typer.Option(False, "--verbose", help="Print debug logs to stderr"),
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    """blockwatch - watch addresses in the latest block."""
    _state["config_path"] = config_path
    _state["endpoint"] = endpoint
    _state["verbose"] = verbose


def _load_config() -> Config:
    try:
        return resolve_config(_state["config_path"], endpoint=_state["endpoint"])
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e


def _setup_logging(config: Config, name: str) -> None:
    level = "DEBUG" if _state["verbose"] else config.logging.level
    configure_stderr(level)
    if config.logging.file:
        ensure_rotating_log_file(name, level=level)


def _make_client(name: str) -> ChainClient:
    config = _load_config()
    _setup_logging(config, name)
    return ChainClient.from_config(config)


def _print_transactions(transactions: list[Transaction]) -> None:
    if not transactions:
        console.print("[yellow]No matching transactions in the latest block[/yellow]")
        return
    table = Table(title="Transactions")
    table.add_column("Hash", style="cyan")
    table.add_column("Block")
    table.add_column("From")
    table.add_column("To")
    table.add_column("Value (wei, hex)")
    for tx in transactions:
        table.add_row(*(escape(cell) for cell in (tx.hash, tx.block_number, tx.from_address, tx.to_address or "-", tx.value)))
    console.print(table)


def _print_result(line: str, result: CommandResult) -> None:
    if not result.ok:
        console.print(f"[red]{escape(result.message)}[/red]")
        return
    if result.transactions is not None:
        console.print(escape(result.message))
        _print_transactions(result.transactions)
        return
    console.print(escape(result.message))
    for address in result.addresses:
        console.print(f"  [cyan]{escape(address)}[/cyan]")


@app.command()
def block():
    """Print the current block height."""
    with _make_client("block") as client:
        try:
            height = client.get_current_block_height()
        except BlockwatchError as e:
            console.print(f"[red]{escape(format_error(e))}[/red]")
            raise typer.Exit(1) from e
    console.print(height)


@app.command()
def txs(
    addresses: list[str] = typer.Argument(..., help="Addresses to look up in the latest block"),
    as_json: bool = typer.Option(False, "--json", help="Print transactions as JSON"),
):
    """Subscribe addresses for this run and print their latest-block transactions."""
    found: list[Transaction] = []
    with _make_client("txs") as client:
        try:
            for address in addresses:
                client.subscribe_address(address)
            for address in addresses:
                found.extend(tx for tx in client.get_transactions_for_address(address) if tx not in found)
        except BlockwatchError as e:
            console.print(f"[red]{escape(format_error(e))}[/red]")
            raise typer.Exit(1) from e
    if as_json:
        console.print_json(json.dumps([tx.to_dict() for tx in found]))
        return
    _print_transactions(found)


@app.command()
def shell():
    """Interactive loop: getCurrentBlock, getTransaction, subscribeAddress, ..."""
    client = _make_client("shell")
    worker = CommandWorker(CommandService(client), _print_result)
    worker.start()
    console.print(f"{__logo__} blockwatch shell - endpoint {escape(client.transport.endpoint)}")
    console.print(f"[dim]{help_text()}[/dim]")
    try:
        while True:
            try:
                line = console.input("Enter command (e.g: getCurrentBlock): ").strip()
            except (KeyboardInterrupt, EOFError):
                console.print("\nGoodbye!")
                break
            if not line:
                continue
            if line.lower() in EXIT_COMMANDS:
                console.print("Goodbye!")
                break
            worker.put(line)
            worker.wait_idle()
    finally:
        worker.stop()
        client.close()


@app.command("config")
def show_config():
    """Print the effective configuration."""
    config = _load_config()
    console.print_json(config.model_dump_json())


if __name__ == "__main__":
    app()
