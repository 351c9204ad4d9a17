"""
Protocol definitions for upload module.
"""
from typing import Protocol


class ProgressDisplay(Protocol):
    """Protocol for the single live progress line."""
    
    def update(self, line: str) -> None:
        """Replace the progress line with a freshly rendered one."""
        ...
    
    def close(self, final_line: str) -> None:
        """Write a final line and release the live display."""
        ...
