"""Node classification from a store listing."""
from typing import Callable, Sequence

from ..store.models import ListEntry, NodeKind

Classifier = Callable[[Sequence[ListEntry]], NodeKind]


def classify(listing: Sequence[ListEntry]) -> NodeKind:
    """
    Decide whether a listed CID is a file, a directory or empty.
    
    A file lists as a single entry describing itself, so its name equals its
    path. A single entry whose name differs from its path is the only child
    of a directory.
    
    Args:
        listing: Result of ContentStore.ls for the CID
        
    Returns:
        NodeKind.EMPTY, NodeKind.FILE or NodeKind.DIRECTORY
    """
    if len(listing) == 0:
        return NodeKind.EMPTY
    if len(listing) == 1:
        entry = listing[0]
        return NodeKind.FILE if entry.name == entry.path else NodeKind.DIRECTORY
    return NodeKind.DIRECTORY
