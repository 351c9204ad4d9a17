"""
Upload module.

Size estimation, local entry enumeration, progress accounting and the
coordinator that ties them to a content store.
"""
from .coordinator import UploadCoordinator, UploadReport, describe_added
from .progress import TerminalWidth, UploadProgressTracker, UploadSession
from .protocols import ProgressDisplay
from .sizing import DirectorySizeEstimator, estimate_size
from .sources import file_entry, walk_upload_entries

__all__ = [
    'UploadCoordinator',
    'UploadReport',
    'describe_added',
    'TerminalWidth',
    'UploadProgressTracker',
    'UploadSession',
    'ProgressDisplay',
    'DirectorySizeEstimator',
    'estimate_size',
    'file_entry',
    'walk_upload_entries',
]
