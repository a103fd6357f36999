"""Exceptions raised by the reference config loader."""

from pathlib import Path
from typing import Optional


class ReferenceConfigError(Exception):
    """Base exception for reference config errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ReferenceConfigLoadError(ReferenceConfigError):
    """Raised when the reference config input cannot be acquired or read.

    This is fatal for the current load. Single malformed lines never raise it.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path
