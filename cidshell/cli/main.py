"""cidshell CLI - interactive menu and direct commands."""
import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Awaitable, Callable

import typer
from rich.console import Console

from ..core.exceptions import CidShellError, OperatorInterrupted
from ..core.store import AddOptions, KuboContentStore, StoreConfig, TimeoutConfig
from ..core.upload import TerminalWidth
from .prompts import ConsoleOperator
from .shell import Shell
from .terminal import ConsoleReporter, LiveProgressLine, watch_terminal_width

app = typer.Typer(
    name="cidshell",
    help="Browse and transfer content-addressed data in IPFS",
    add_completion=False
)
console = Console()
reporter = ConsoleReporter(console)


@dataclass
class Settings:
    """Options collected from the command line."""
    store: StoreConfig = field(default_factory=StoreConfig)
    add: AddOptions = field(default_factory=AddOptions)


def run_shell(settings: Settings, flow: Callable[[Shell], Awaitable[None]]) -> None:
    """Open the store, run one flow, and turn failures into exit codes."""
    async def runner():
        terminal = TerminalWidth()
        async with KuboContentStore(settings.store) as store:
            shell = Shell(
                store,
                ConsoleOperator(console, reporter),
                reporter,
                display=LiveProgressLine(console),
                terminal=terminal,
                add_options=settings.add
            )
            with watch_terminal_width(terminal, console):
                await flow(shell)
    
    try:
        asyncio.run(runner())
    except (OperatorInterrupted, KeyboardInterrupt):
        reporter.info("Exiting program...")
        raise typer.Exit(130)
    except CidShellError as e:
        reporter.error(str(e))
        raise typer.Exit(1)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    api_url: str = typer.Option("http://127.0.0.1:5001", "--api-url", "-a", help="Kubo RPC API address"),
    timeout: float = typer.Option(300.0, "--timeout", "-t", help="Request timeout in seconds"),
    pin: bool = typer.Option(False, "--pin", help="Pin uploaded content"),
    no_wrap: bool = typer.Option(False, "--no-wrap", help="Do not wrap uploads in a directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable INFO logging"),
):
    """Start the interactive menu when no command is given."""
    if verbose:
        from .. import setup_logging
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(levelname)s - %(message)s'
        )
        setup_logging(logging.INFO)
    
    settings = Settings(
        store=StoreConfig(api_url=api_url, timeout=TimeoutConfig(total=timeout)),
        add=AddOptions(pin=pin, wrap_with_directory=not no_wrap, timeout=timeout)
    )
    ctx.obj = settings
    
    if ctx.invoked_subcommand is None:
        run_shell(settings, lambda shell: shell.run_menu())


@app.command()
def upload(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Local file or directory to upload", exists=True),
):
    """Upload a file or directory."""
    async def flow(shell: Shell):
        await shell.upload(path)
    
    run_shell(ctx.obj, flow)


@app.command()
def inspect(
    ctx: typer.Context,
    cid: str = typer.Argument(..., help="CID of a file or directory"),
):
    """List a CID's immediate children, then save or show it."""
    async def flow(shell: Shell):
        await shell.inspect(cid)
    
    run_shell(ctx.obj, flow)


@app.command()
def browse(
    ctx: typer.Context,
    cid: str = typer.Argument(..., help="CID to start from"),
):
    """Navigate a CID tree interactively."""
    async def flow(shell: Shell):
        await shell.browse(cid)
    
    run_shell(ctx.obj, flow)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
