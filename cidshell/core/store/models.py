"""
Data models for content store access.

Uses dataclasses for small, type-safe records exchanged with the store.
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional


ProgressCallback = Callable[[int, str], None]


class NodeKind(str, Enum):
    """Kind of a node, derived from a fresh listing."""
    FILE = "file"
    DIRECTORY = "dir"
    EMPTY = "empty"


@dataclass(frozen=True)
class ListEntry:
    """
    One entry of a store listing.
    
    Attributes:
        name: Entry name (the CID itself for a file listed on its own)
        path: Path of the entry as reported by the store
        cid: Content identifier of the entry
        type: 'dir' or 'file'
        size: Size in bytes if the store reports it
    """
    name: str
    path: str
    cid: str
    type: str = "file"
    size: Optional[int] = None


@dataclass(frozen=True)
class ContentNode:
    """
    A node visited while browsing.
    
    The kind is never stored by the content store; it is derived from the
    listing each time the node is shown.
    """
    cid: str
    name: str
    path: str
    kind: NodeKind
    
    @classmethod
    def from_entry(cls, entry: ListEntry) -> 'ContentNode':
        """Build a child node from its parent's listing entry."""
        kind = NodeKind.DIRECTORY if entry.type == "dir" else NodeKind.FILE
        return cls(cid=entry.cid, name=entry.name, path=entry.path, kind=kind)
    
    @property
    def label(self) -> str:
        """Label used when presenting the node as a choice."""
        return f"{self.name} ({self.kind.value}) - {self.cid}"


@dataclass(frozen=True)
class AddedEntry:
    """
    Result of adding one entry to the store.
    
    An empty path denotes the synthetic wrapping root directory.
    """
    path: str
    cid: str
    size: Optional[int] = None
    
    @property
    def is_wrapping_root(self) -> bool:
        """Returns True for the synthetic directory wrapping the upload."""
        return self.path.strip() == ""


@dataclass(frozen=True)
class UploadEntry:
    """
    A local entry to add to the store.
    
    Attributes:
        path: Path inside the upload, '/'-separated, rooted at the upload name
        source: Local file to stream, None for directories
        size: Byte length for files, 0 for directories
    """
    path: str
    source: Optional[Path] = None
    size: int = 0
    
    @property
    def is_directory(self) -> bool:
        """Returns True if the entry is a directory."""
        return self.source is None


@dataclass
class AddOptions:
    """
    Options recognized by ContentStore.add / add_all.
    
    Attributes:
        pin: Pin the added content
        wrap_with_directory: Wrap the added entries in a directory
        timeout: Whole-call timeout in seconds
        progress: Called with (bytes, unit) for every progress event
    """
    pin: bool = False
    wrap_with_directory: bool = True
    timeout: float = 300.0
    progress: Optional[ProgressCallback] = None
