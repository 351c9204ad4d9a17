"""
Upload entry enumeration.

Turns a local file or directory into the ordered entries the content store
adds. Directory trees are walked depth-first, each directory immediately
followed by its whole subtree, hidden entries included.
"""
import os
from pathlib import Path
from typing import Iterator, List, Tuple, Union

from ..exceptions import LocalIOError
from ..logging import get_logger
from ..store.models import UploadEntry

logger = get_logger('cidshell.upload.sources')


def file_entry(local_path: Union[str, Path]) -> UploadEntry:
    """
    Build the entry for a single file upload.
    
    Raises:
        LocalIOError: If the file cannot be read
    """
    path = Path(local_path)
    try:
        size = path.stat().st_size
    except OSError as e:
        raise LocalIOError(f"Cannot read {path}: {e}", path=str(path)) from e
    return UploadEntry(path=path.name, source=path, size=size)


def walk_upload_entries(root: Union[str, Path]) -> Iterator[UploadEntry]:
    """
    Yield entries for a directory tree in depth-first pre-order.
    
    Paths are '/'-separated and rooted at the directory's own name. Regular
    files and directories are included; symlinks and special files are
    skipped.
    
    Raises:
        LocalIOError: If a directory cannot be listed
    """
    root = Path(root).resolve()
    # (local path, upload path, is directory, size)
    pending: List[Tuple[Path, str, bool, int]] = [(root, root.name, True, 0)]
    
    while pending:
        local, upload_path, is_dir, size = pending.pop()
        if not is_dir:
            yield UploadEntry(path=upload_path, source=local, size=size)
            continue
        
        yield UploadEntry(path=upload_path)
        children = []
        try:
            with os.scandir(local) as it:
                for entry in it:
                    child_path = f"{upload_path}/{entry.name}"
                    if entry.is_dir(follow_symlinks=False):
                        children.append((Path(entry.path), child_path, True, 0))
                    elif entry.is_file(follow_symlinks=False):
                        child_size = entry.stat(follow_symlinks=False).st_size
                        children.append((Path(entry.path), child_path, False, child_size))
                    else:
                        logger.debug(f"Skipping special entry {entry.path}")
        except OSError as e:
            raise LocalIOError(f"Cannot list {local}: {e}", path=str(local)) from e
        
        # Reversed so the stack pops children in name order
        children.sort(key=lambda child: child[1], reverse=True)
        pending.extend(children)
