"""Terminal output: marked message lines and the live progress line."""
import signal
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.text import Text

from ..core.upload.progress import TerminalWidth

ERROR_ICON = "[bold red]✖[/bold red]"
SUCCESS_ICON = "[bold green]✔[/bold green]"
WARN_ICON = "[yellow]⚠[/yellow]"
INFO_ICON = "[cyan]ℹ[/cyan]"
PROMPT_ICON = "[blue]➜[/blue]"


class ConsoleReporter:
    """Prints info, warning, error and success lines with distinct markers."""
    
    def __init__(self, console: Console):
        self._console = console
    
    @property
    def console(self) -> Console:
        return self._console
    
    def info(self, message: str) -> None:
        self._console.print(f"{INFO_ICON}  [cyan]{escape(message)}[/cyan]")
    
    def warn(self, message: str) -> None:
        self._console.print(f"{WARN_ICON}  [yellow]{escape(message)}[/yellow]")
    
    def error(self, message: str) -> None:
        self._console.print(f"{ERROR_ICON}  [bold red]{escape(message)}[/bold red]")
    
    def success(self, message: str) -> None:
        self._console.print(f"{SUCCESS_ICON}  {escape(message)}")


class LiveProgressLine:
    """
    One live-updating progress line below the scrolling output.
    
    Lines printed on the same console while the line is live scroll above
    it. close() always leaves a final, fully rendered line behind.
    """
    
    def __init__(self, console: Console):
        self._console = console
        self._live: Optional[Live] = None
    
    def update(self, line: str) -> None:
        if self._live is None:
            self._live = Live(console=self._console, auto_refresh=False, transient=False)
            self._live.start()
        self._live.update(Text(line, style="cyan"), refresh=True)
    
    def close(self, final_line: str) -> None:
        if self._live is None:
            self._console.print(Text(final_line, style="cyan"))
            return
        self._live.update(Text(final_line, style="cyan"), refresh=True)
        self._live.stop()
        self._live = None


@contextmanager
def watch_terminal_width(width: TerminalWidth, console: Console) -> Iterator[TerminalWidth]:
    """
    Keep width in step with the terminal while the block runs.
    
    Resize notifications (SIGWINCH) are only available on POSIX and only
    from the main thread; elsewhere the width is sampled once.
    """
    width.update(console.size.width)
    if not hasattr(signal, "SIGWINCH") or threading.current_thread() is not threading.main_thread():
        yield width
        return
    
    def on_resize(signum, frame):
        width.update(console.size.width)
    
    previous = signal.signal(signal.SIGWINCH, on_resize)
    try:
        yield width
    finally:
        signal.signal(signal.SIGWINCH, previous if previous is not None else signal.SIG_DFL)
