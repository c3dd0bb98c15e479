"""Path style detection for mixed Windows/WSL input"""

import re
from typing import Optional

from ..core.converter import Direction, windows_to_wsl, wsl_to_windows

_DRIVE_RE = re.compile(r"^[A-Za-z]:")
# Any number of leading slashes before the mount root is still a guest path
_GUEST_MOUNT_RE = re.compile(r"^/+mnt(/|$)")


def looks_like_windows_path(path: str) -> bool:
    """Drive-letter paths (C:...) and anything starting with two separators, except //mnt/..."""
    path_str = str(path)
    if _GUEST_MOUNT_RE.match(path_str):
        return False
    return bool(_DRIVE_RE.match(path_str)) or path_str.startswith(("\\\\", "//"))


def looks_like_wsl_path(path: str) -> bool:
    """Guest paths start at '/'; '//' only counts when the mount root follows"""
    path_str = str(path)
    if _GUEST_MOUNT_RE.match(path_str):
        return True
    return path_str.startswith("/") and not path_str.startswith("//")


def detect_direction(path: str) -> Optional[Direction]:
    """Guess which way a path should be converted, None if neither style"""
    if looks_like_windows_path(path):
        return Direction.TO_WSL
    if looks_like_wsl_path(path):
        return Direction.TO_WINDOWS
    return None


def to_wsl_path(path: str) -> str:
    """Convert Windows path to WSL path, leaving WSL paths alone"""
    path_str = str(path)

    # Already a WSL path
    if looks_like_wsl_path(path_str):
        return path_str

    return windows_to_wsl(path_str)


def to_windows_path(path: str) -> str:
    """Convert WSL path to Windows path, leaving Windows paths alone"""
    path_str = str(path)

    # Already a Windows path
    if looks_like_windows_path(path_str):
        return path_str

    return wsl_to_windows(path_str)
