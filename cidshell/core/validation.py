"""Validation of operator input."""
from pathlib import Path
from typing import Callable, Optional

from .exceptions import InvalidInputError

# Returns an error message, or None when the value is acceptable
Validator = Callable[[str], Optional[str]]


def validate_cid(value: str) -> Optional[str]:
    """Accept a non-blank CID or /ipfs/ path without inner whitespace."""
    value = (value or "").strip()
    if not value or any(ch.isspace() for ch in value):
        return "Please enter a valid CID"
    return None


def validate_save_path(value: str) -> Optional[str]:
    if not (value or "").strip():
        return "Please enter a path to save to"
    return None


def validate_existing_path(value: str) -> Optional[str]:
    value = (value or "").strip()
    if not value or not Path(value).expanduser().exists():
        return "Please enter a valid path"
    return None


def ensure_valid(value: str, validator: Validator) -> str:
    """
    Validate and strip operator input.
    
    Raises:
        InvalidInputError: If the validator rejects the value
    """
    error = validator(value)
    if error is not None:
        raise InvalidInputError(error)
    return value.strip()
