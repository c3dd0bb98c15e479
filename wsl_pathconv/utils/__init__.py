"""Utility modules"""

from .paths import (
    looks_like_windows_path,
    looks_like_wsl_path,
    detect_direction,
    to_windows_path,
    to_wsl_path,
)

from .clipboard import copy_to_clipboard

__all__ = [
    "looks_like_windows_path",
    "looks_like_wsl_path",
    "detect_direction",
    "to_windows_path",
    "to_wsl_path",
    "copy_to_clipboard",
]
