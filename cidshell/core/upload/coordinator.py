"""
Upload coordinator.

Orchestrates size estimation, progress accounting and the content store's
add/add_all for one upload command.
"""
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, List, Optional, Union

from ..exceptions import LocalIOError
from ..logging import get_logger
from ..store.models import AddedEntry, AddOptions
from ..store.protocols import ContentStore
from .progress import TerminalWidth, UploadProgressTracker, UploadSession
from .protocols import ProgressDisplay
from .sizing import DirectorySizeEstimator
from .sources import file_entry, walk_upload_entries

logger = get_logger('cidshell.upload.coordinator')

EntryCallback = Callable[[AddedEntry, str], None]


def describe_added(entry: AddedEntry, local_path: Union[str, Path], is_directory: bool) -> str:
    """Operator-facing line for one confirmed entry."""
    if not is_directory:
        return f"File {local_path} added with CID {entry.cid}"
    if entry.is_wrapping_root:
        return f"Root directory {local_path} added with CID {entry.cid}"
    return f"{entry.path} added with CID {entry.cid}"


@dataclass
class UploadReport:
    """
    Outcome of a finished upload.
    
    Attributes:
        local_path: Uploaded file or directory
        total_bytes: Size estimated before the upload
        uploaded_bytes: Bytes the store reported as processed
        entries: Every {path, cid} the store confirmed, in arrival order
    """
    local_path: Path
    total_bytes: int
    uploaded_bytes: int
    entries: List[AddedEntry] = field(default_factory=list)
    
    @property
    def root(self) -> Optional[AddedEntry]:
        """The wrapping root if present, else the last confirmed entry."""
        for entry in self.entries:
            if entry.is_wrapping_root:
                return entry
        return self.entries[-1] if self.entries else None


class UploadCoordinator:
    """
    Coordinates a single upload.
    
    Sequence:
    1. Size the local path (tree estimate for directories, st_size for files)
    2. Start a fresh session with uploaded_bytes at zero
    3. add_all for directories, add for files, with progress wired to the
       tracker, reporting each {path, cid} as it arrives
    
    Store errors abort the upload unchanged; nothing is rolled back or
    retried. The progress line is always closed with a final line.
    """
    
    def __init__(
        self,
        store: ContentStore,
        options: Optional[AddOptions] = None,
        estimator: Optional[DirectorySizeEstimator] = None,
        display: Optional[ProgressDisplay] = None,
        terminal: Optional[TerminalWidth] = None,
        on_entry: Optional[EntryCallback] = None
    ):
        """
        Initialize upload coordinator.
        
        Args:
            store: Content store to add to
            options: Add options; progress is replaced by the tracker
            estimator: Local size estimator
            display: Live progress line
            terminal: Shared terminal width cell
            on_entry: Called with each confirmed entry and its report line
        """
        self._store = store
        self._options = options or AddOptions()
        self._estimator = estimator or DirectorySizeEstimator()
        self._display = display
        self._terminal = terminal or TerminalWidth()
        self._on_entry = on_entry
        self.session: Optional[UploadSession] = None
    
    async def upload(self, local_path: Union[str, Path]) -> UploadReport:
        """
        Upload a local file or directory.
        
        Raises:
            LocalIOError: If the path is missing or unreadable
            StoreLookupError: If the store fails during the add
        """
        path = Path(local_path).expanduser()
        if not path.exists():
            raise LocalIOError(f"Path not found: {path}", path=str(path))
        is_directory = path.is_dir()
        
        if is_directory:
            total_bytes = self._estimator.estimate(path)
        else:
            total_bytes = file_entry(path).size
        
        self.session = UploadSession(total_bytes=total_bytes, terminal=self._terminal)
        self.session.uploaded_bytes = 0
        on_render = self._display.update if self._display is not None else None
        tracker = UploadProgressTracker(self.session, on_render=on_render)
        options = replace(self._options, progress=tracker.on_progress)
        
        logger.info(f"Uploading {path} ({total_bytes} bytes estimated)")
        report = UploadReport(local_path=path, total_bytes=total_bytes, uploaded_bytes=0)
        completed = False
        try:
            if is_directory:
                entries = list(walk_upload_entries(path))
                logger.debug(f"{len(entries)} entries to add from {path}")
                async for added in self._store.add_all(entries, options):
                    self._record(report, added, path, is_directory)
            else:
                added = await self._store.add(file_entry(path), options)
                self._record(report, added, path, is_directory)
            completed = True
        finally:
            report.uploaded_bytes = self.session.uploaded_bytes
            if self._display is not None:
                final_line = tracker.completion_message() if completed else tracker.render()
                self._display.close(final_line)
            if not completed:
                logger.warning(f"Upload of {path} aborted after {report.uploaded_bytes} bytes")
        
        logger.info(f"Upload of {path} complete: {len(report.entries)} entries")
        return report
    
    def _record(self, report: UploadReport, added: AddedEntry, path: Path, is_directory: bool) -> None:
        report.entries.append(added)
        if self._on_entry is not None:
            self._on_entry(added, describe_added(added, path, is_directory))
