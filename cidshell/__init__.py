"""
cidshell - Interactive terminal browser for content-addressed storage.

Usage:
    >>> from cidshell import KuboContentStore, NavigationEngine
    >>> 
    >>> async with KuboContentStore() as store:
    ...     for entry in await store.ls("bafy..."):
    ...         print(entry.name, entry.cid)
"""
import logging

from .core.browse import Inspector, NavigationContext, NavigationEngine, classify
from .core.exceptions import (
    CidShellError,
    InvalidInputError,
    LocalIOError,
    OperatorInterrupted,
    StoreLookupError,
)
from .core.logging import namespace_loggers
from .core.store import (
    AddedEntry,
    AddOptions,
    ContentNode,
    ContentStore,
    KuboContentStore,
    ListEntry,
    NodeKind,
    StoreConfig,
    TimeoutConfig,
    UploadEntry,
)
from .core.upload import (
    DirectorySizeEstimator,
    UploadCoordinator,
    UploadProgressTracker,
    UploadSession,
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for cidshell modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    for logger in namespace_loggers():
        logger.setLevel(level)


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
    'UploadEntry',
    'DirectorySizeEstimator',
    'UploadCoordinator',
    'UploadProgressTracker',
    'UploadSession',
    'Inspector',
    'NavigationContext',
    'NavigationEngine',
    'classify',
    'CidShellError',
    'InvalidInputError',
    'LocalIOError',
    'OperatorInterrupted',
    'StoreLookupError',
    'setup_logging',
]
