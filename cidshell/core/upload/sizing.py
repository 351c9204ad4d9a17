"""
Local size estimation.

Produces the denominator used by upload progress accounting.
"""
import os
import stat
from pathlib import Path
from typing import List, Union

from ..exceptions import LocalIOError
from ..logging import get_logger

logger = get_logger('cidshell.upload.sizing')


class DirectorySizeEstimator:
    """
    Sums the byte sizes of a local tree.
    
    Directories contribute the sum of their children, regular files their
    length, and every other entry kind (symlinks, devices, sockets, fifos)
    contributes nothing. Traversal uses an explicit stack, so tree depth is
    not limited by the interpreter's recursion limit.
    
    Example:
        >>> DirectorySizeEstimator().estimate("photos/")
        48213
    """
    
    def estimate(self, local_path: Union[str, Path]) -> int:
        """
        Estimate the size of a file or directory tree.
        
        Args:
            local_path: File or directory to measure
            
        Returns:
            Total size in bytes
            
        Raises:
            LocalIOError: If any part of the tree cannot be read; no partial
                total is returned
        """
        path = Path(local_path)
        try:
            root_stat = path.stat()
            if stat.S_ISREG(root_stat.st_mode):
                return root_stat.st_size
            if not stat.S_ISDIR(root_stat.st_mode):
                return 0
            total = self._walk(path)
        except OSError as e:
            raise LocalIOError(f"Cannot measure {path}: {e}", path=str(path)) from e
        
        logger.debug(f"Estimated {total} bytes under {path}")
        return total
    
    def _walk(self, root: Path) -> int:
        total = 0
        pending: List[str] = [str(root)]
        while pending:
            current = pending.pop()
            with os.scandir(current) as it:
                for entry in it:
                    if entry.is_dir(follow_symlinks=False):
                        pending.append(entry.path)
                    elif entry.is_file(follow_symlinks=False):
                        total += entry.stat(follow_symlinks=False).st_size
        return total


def estimate_size(local_path: Union[str, Path]) -> int:
    """Shortcut for DirectorySizeEstimator().estimate(local_path)."""
    return DirectorySizeEstimator().estimate(local_path)
