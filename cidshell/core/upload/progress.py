"""
Upload progress accounting.

Turns the stream of (bytes, unit) progress events of one upload into a single
aggregate and renders it as a bar that always fits the terminal line.
"""
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..logging import get_logger

logger = get_logger('cidshell.upload.progress')

BAR_GLYPH = "█"
PROGRESS_LABEL = "Uploading:"
BAR_MARGIN = 2
DEFAULT_COLUMNS = 100
IN_PROGRESS_CAP = 99


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


class TerminalWidth:
    """
    Column count of the output terminal.
    
    Shared by every upload of a process and updated whenever the terminal
    reports a resize.
    """
    
    def __init__(self, columns: int = DEFAULT_COLUMNS):
        self._columns = max(int(columns), 1)
    
    @property
    def columns(self) -> int:
        return self._columns
    
    def update(self, columns: int) -> None:
        """Record a new column count."""
        self._columns = max(int(columns), 1)


@dataclass
class UploadSession:
    """
    Accounting state of one upload.
    
    Attributes:
        total_bytes: Estimated size, fixed before the upload starts
        uploaded_bytes: Running sum of progress deltas
        terminal: Live terminal width used by the renderer
    """
    total_bytes: int
    uploaded_bytes: int = 0
    terminal: TerminalWidth = field(default_factory=TerminalWidth)
    
    @property
    def columns(self) -> int:
        return self.terminal.columns


class UploadProgressTracker:
    """
    Accumulates progress deltas and renders the progress line.
    
    Every event's byte count is a delta added to the session total; events
    from different files may interleave freely. total_bytes is an estimate,
    so uploaded_bytes may end up above it.
    
    Example:
        >>> tracker = UploadProgressTracker(UploadSession(total_bytes=1000))
        >>> tracker.on_progress(250, "a.txt")
        >>> tracker.percentage
        25
    """
    
    def __init__(
        self,
        session: UploadSession,
        on_render: Optional[Callable[[str], None]] = None
    ):
        """
        Initialize tracker.
        
        Args:
            session: Upload accounting state
            on_render: Receives the rendered line after every event
        """
        self._session = session
        self._on_render = on_render
    
    @property
    def session(self) -> UploadSession:
        return self._session
    
    @property
    def uploaded_bytes(self) -> int:
        return self._session.uploaded_bytes
    
    def on_progress(self, bytes_count: int, unit: str = "") -> None:
        """
        Record one progress event.
        
        Args:
            bytes_count: Bytes processed since the previous event
            unit: File or chunk the event belongs to
        """
        if bytes_count < 0:
            logger.debug(f"Ignoring negative progress {bytes_count} for {unit!r}")
            return
        self._session.uploaded_bytes += bytes_count
        if self._on_render is not None:
            self._on_render(self.render())
    
    @property
    def percentage(self) -> int:
        """Percentage shown while the upload runs, capped below 100."""
        total = self._session.total_bytes
        if total <= 0:
            return 100
        return min(_ceil_div(self._session.uploaded_bytes * 100, total), IN_PROGRESS_CAP)
    
    @property
    def prefix(self) -> str:
        return f"{PROGRESS_LABEL} {self.percentage:>3}% "
    
    @property
    def glyph_count(self) -> int:
        """Bar length: at least one glyph, never wider than the line allows."""
        columns = self._session.columns
        total = self._session.total_bytes
        if total <= 0:
            scaled = columns
        else:
            scaled = _ceil_div(self._session.uploaded_bytes * columns, total)
        reserved = len(self.prefix) + BAR_MARGIN
        return max(1, min(scaled - reserved, columns - reserved))
    
    def render(self) -> str:
        """Render the current progress line."""
        return f"{self.prefix}{BAR_GLYPH * self.glyph_count}"
    
    def completion_message(self) -> str:
        """Final line shown once the store confirms the upload."""
        return f"Upload complete, {self._session.uploaded_bytes} bytes"
