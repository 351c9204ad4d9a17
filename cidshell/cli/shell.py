"""
Interactive menu loop.

Dispatches one flow at a time (upload, inspect, navigate) and returns to the
menu when the flow finishes or fails.
"""
from pathlib import Path
from typing import Optional, Union

from ..core.browse import Choice, Inspector, NavigationEngine, Operator
from ..core.exceptions import CidShellError, OperatorInterrupted
from ..core.logging import get_logger
from ..core.store.models import AddedEntry, AddOptions
from ..core.store.protocols import ContentStore
from ..core.upload import ProgressDisplay, TerminalWidth, UploadCoordinator, UploadReport
from ..core.validation import ensure_valid, validate_cid, validate_existing_path
from .terminal import ConsoleReporter

logger = get_logger('cidshell.shell')

MENU_CHOICES = [
    Choice(value="save", label="Save file/dir to IPFS"),
    Choice(value="get", label="Get file/dir from IPFS"),
    Choice(value="list", label="List in IPFS"),
    Choice(value="exit", label="Exit"),
]


class Shell:
    """
    The top-level menu and the flows it dispatches to.
    
    StoreLookupError and LocalIOError end the current flow with an error
    line; OperatorInterrupted ends the whole session.
    """
    
    def __init__(
        self,
        store: ContentStore,
        operator: Operator,
        reporter: ConsoleReporter,
        display: Optional[ProgressDisplay] = None,
        terminal: Optional[TerminalWidth] = None,
        add_options: Optional[AddOptions] = None
    ):
        self._store = store
        self._operator = operator
        self._reporter = reporter
        self._display = display
        self._terminal = terminal or TerminalWidth()
        self._add_options = add_options or AddOptions()
    
    async def upload(self, local_path: Optional[Union[str, Path]] = None) -> UploadReport:
        """Upload a local path, asking for it if not given."""
        if local_path is None:
            local_path = self._operator.ask_text(
                "Enter the path of the file to save",
                validate=validate_existing_path
            )
        coordinator = UploadCoordinator(
            self._store,
            options=self._add_options,
            display=self._display,
            terminal=self._terminal,
            on_entry=self._report_added
        )
        return await coordinator.upload(local_path)
    
    def _report_added(self, entry: AddedEntry, line: str) -> None:
        self._reporter.info(line)
    
    def _ask_cid(self, message: str) -> str:
        return self._operator.ask_text(message, validate=validate_cid)
    
    async def inspect(self, cid: Optional[str] = None) -> None:
        """Show one CID and act on it."""
        cid = ensure_valid(cid, validate_cid) if cid else self._ask_cid("Enter the CID of file/directory")
        await Inspector(self._store, self._operator).inspect(cid)
    
    async def browse(self, cid: Optional[str] = None) -> None:
        """Navigate a CID tree."""
        cid = ensure_valid(cid, validate_cid) if cid else self._ask_cid("Enter the CID to list")
        await NavigationEngine(self._store, self._operator).run(cid)
    
    async def run_menu(self) -> None:
        """Run the menu until the operator chooses Exit."""
        handlers = {
            "save": self.upload,
            "get": self.inspect,
            "list": self.browse,
        }
        while True:
            job = self._operator.choose("What do you want to do?", MENU_CHOICES)
            if job == "exit":
                return
            try:
                await handlers[job]()
            except OperatorInterrupted:
                raise
            except CidShellError as e:
                logger.debug(f"{job} failed: {e!r}")
                self._reporter.error(str(e))
