"""
Error classification for path conversion
Both kinds are terminal and fully determined by the input text
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Why a conversion failed"""
    RELATIVE_PATH = "RelativePath"
    INVALID_PREFIX = "InvalidPrefix"


class PathConversionError(Exception):
    """Raised when a path cannot be converted"""
    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class RelativePathError(PathConversionError):
    """The input is not absolute in its own syntax"""
    kind = ErrorKind.RELATIVE_PATH

    def __init__(self, path: str):
        super().__init__(f"Path is not absolute: {path!r}", path)


class InvalidPrefixError(PathConversionError):
    """The input is absolute but its prefix is not a supported form"""
    kind = ErrorKind.INVALID_PREFIX

    def __init__(self, path: str, reason: str = "unsupported prefix"):
        super().__init__(f"Invalid prefix ({reason}): {path!r}", path)
        self.reason = reason
