"""Core path conversion modules"""

from .converter import (
    windows_to_wsl,
    wsl_to_windows,
    convert,
    Direction,
    ConversionResult,
    LOOPBACK_HOSTNAME,
)
from .errors import (
    ErrorKind,
    PathConversionError,
    RelativePathError,
    InvalidPrefixError,
)
from .normalize import ComponentKind, normalize_components

__all__ = [
    "windows_to_wsl",
    "wsl_to_windows",
    "convert",
    "Direction",
    "ConversionResult",
    "LOOPBACK_HOSTNAME",
    "ErrorKind",
    "PathConversionError",
    "RelativePathError",
    "InvalidPrefixError",
    "ComponentKind",
    "normalize_components",
]
