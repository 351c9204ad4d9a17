"""
Protocol definitions for interactive browsing.

The operator is the only blocking step between navigation states.
"""
from typing import Any, Optional, Protocol, Sequence

from ..store.models import ListEntry
from ..validation import Validator
from .actions import Choice


class Operator(Protocol):
    """Protocol for the person driving the browser."""
    
    def choose(self, message: str, choices: Sequence[Choice]) -> Any:
        """
        Ask the operator to pick one of the choices.
        
        Returns:
            The value of the chosen Choice
        """
        ...
    
    def ask_text(self, message: str, validate: Optional[Validator] = None) -> str:
        """
        Ask for free text, re-asking until validate accepts it.
        
        Returns:
            The accepted, stripped answer
        """
        ...
    
    def show_text(self, text: str) -> None:
        """Display retrieved file contents."""
        ...
    
    def show_listing(self, entries: Sequence[ListEntry]) -> None:
        """Display a raw store listing."""
        ...
    
    def report(self, message: str) -> None:
        """Display a success message."""
        ...
