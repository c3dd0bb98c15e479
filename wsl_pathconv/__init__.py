"""
WSL Path Conversion
Lexical conversion of paths between Windows and WSL addressing
"""

__version__ = "1.0.0"
__author__ = "wsl-pathconv contributors"

from .core import (
    windows_to_wsl,
    wsl_to_windows,
    convert,
    Direction,
    ConversionResult,
    ErrorKind,
    PathConversionError,
    RelativePathError,
    InvalidPrefixError,
)

__all__ = [
    "windows_to_wsl",
    "wsl_to_windows",
    "convert",
    "Direction",
    "ConversionResult",
    "ErrorKind",
    "PathConversionError",
    "RelativePathError",
    "InvalidPrefixError",
]
