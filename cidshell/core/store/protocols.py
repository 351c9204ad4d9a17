"""
Protocol definitions for content store access.

The browsing and upload code depend on this interface only; hashing,
chunking, pinning and transport are the store's business.
"""
from typing import AsyncIterator, Iterable, List, Optional, Protocol, runtime_checkable

from .models import AddedEntry, AddOptions, ListEntry, UploadEntry


@runtime_checkable
class ContentStore(Protocol):
    """
    Protocol for content-addressed stores.
    
    Streams returned by add_all, get and cat are finite, not restartable,
    and consumed exactly once per call.
    """
    
    async def add(
        self,
        entry: UploadEntry,
        options: Optional[AddOptions] = None
    ) -> AddedEntry:
        """
        Add a single entry.
        
        Returns:
            The root entry produced by the add (the wrapping directory when
            options.wrap_with_directory is set)
        """
        ...
    
    def add_all(
        self,
        entries: Iterable[UploadEntry],
        options: Optional[AddOptions] = None
    ) -> AsyncIterator[AddedEntry]:
        """Add many entries, yielding each {path, cid} as the store confirms it."""
        ...
    
    def get(self, cid: str) -> AsyncIterator[bytes]:
        """Stream the materialized content (archive for directories) of a CID."""
        ...
    
    def cat(self, cid: str) -> AsyncIterator[bytes]:
        """Stream the raw file content of a CID."""
        ...
    
    async def ls(self, cid: str) -> List[ListEntry]:
        """List a CID. A file lists as one entry whose name equals its path."""
        ...
