"""
Custom exceptions for cidshell operations.

Every failure the operator can see derives from CidShellError:

- InvalidInputError: empty or malformed CID/path, recovered by re-prompting
- StoreLookupError: the content store could not resolve or transfer a CID
- LocalIOError: local filesystem read/write failed
- OperatorInterrupted: the operator aborted a prompt, fatal to the process
"""
from typing import Optional


class CidShellError(Exception):
    """Base exception for all cidshell errors."""
    
    def __init__(self, message: str, cid: Optional[str] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            cid: CID involved in the failure (if any)
        """
        self.cid = cid
        super().__init__(message)


class InvalidInputError(CidShellError):
    """Exception raised when operator input fails validation."""
    pass


class StoreLookupError(CidShellError):
    """Exception raised when the content store fails a lookup or transfer."""
    
    def __init__(
        self,
        message: str,
        cid: Optional[str] = None,
        status: Optional[int] = None,
        code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message (store message kept verbatim)
            cid: CID that was being resolved
            status: HTTP status returned by the store API (if any)
            code: Store-specific error code (if any)
        """
        self.status = status
        self.code = code
        super().__init__(message, cid)


class LocalIOError(CidShellError):
    """Exception raised for local filesystem failures."""
    
    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)


class OperatorInterrupted(CidShellError):
    """Exception raised when the operator interrupts a prompt."""
    
    def __init__(self, message: str = "Interrupted by operator") -> None:
        super().__init__(message)
