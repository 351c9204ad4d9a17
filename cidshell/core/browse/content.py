"""
Content retrieval actions shared by the navigator and the inspector.
"""
from pathlib import Path
from typing import AsyncIterator, Union

import aiofiles

from ..exceptions import LocalIOError
from ..logging import get_logger
from ..store.protocols import ContentStore
from ..validation import validate_save_path
from .protocols import Operator

logger = get_logger('cidshell.browse.content')


async def collect(stream: AsyncIterator[bytes]) -> bytes:
    """Concatenate a whole byte stream."""
    chunks = []
    async for chunk in stream:
        chunks.append(chunk)
    return b"".join(chunks)


async def save_to_local(store: ContentStore, cid: str, destination: Union[str, Path]) -> int:
    """
    Fetch the full content of a CID and write it to a local file.
    
    The byte stream is concatenated before anything is written, so a failed
    fetch leaves no partial file behind.
    
    Returns:
        Number of bytes written
        
    Raises:
        StoreLookupError: If the store cannot deliver the content
        LocalIOError: If the destination cannot be written
    """
    data = await collect(store.get(cid))
    path = Path(destination).expanduser()
    try:
        async with aiofiles.open(path, 'wb') as f:
            await f.write(data)
    except OSError as e:
        raise LocalIOError(f"Cannot write {path}: {e}", path=str(path)) from e
    logger.info(f"Saved {cid} to {path} ({len(data)} bytes)")
    return len(data)


async def read_text(store: ContentStore, cid: str) -> str:
    """Fetch file content and decode it as UTF-8, replacing invalid bytes."""
    data = await collect(store.cat(cid))
    return data.decode('utf-8', errors='replace')


class ContentActions:
    """Save and Show, performed on behalf of an operator."""
    
    def __init__(self, store: ContentStore, operator: Operator):
        self._store = store
        self._operator = operator
    
    async def save(self, cid: str) -> int:
        destination = self._operator.ask_text(
            "Enter the path to save the file",
            validate=validate_save_path
        )
        written = await save_to_local(self._store, cid, destination)
        self._operator.report(f"Saved {written} bytes to {destination}")
        return written
    
    async def show(self, cid: str) -> str:
        text = await read_text(self._store, cid)
        self._operator.show_text(text)
        return text
