"""
Content store access.

Exposes the ContentStore protocol, its data models, and the Kubo HTTP
implementation.
"""
from .config import StoreConfig, TimeoutConfig
from .kubo import KuboContentStore
from .models import (
    AddedEntry,
    AddOptions,
    ContentNode,
    ListEntry,
    NodeKind,
    ProgressCallback,
    UploadEntry,
)
from .protocols import ContentStore

__all__ = [
    'ContentStore',
    'KuboContentStore',
    'StoreConfig',
    'TimeoutConfig',
    'AddedEntry',
    'AddOptions',
    'ContentNode',
    'ListEntry',
    'NodeKind',
    'ProgressCallback',
    'UploadEntry',
]
