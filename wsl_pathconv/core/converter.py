"""
Windows <-> WSL path conversion
Parse the source path, check its prefix, rewrite the components into the
other syntax, normalize them and serialize the result
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from . import windows, wsl
from .errors import (
    ErrorKind,
    InvalidPrefixError,
    PathConversionError,
    RelativePathError,
)
from .normalize import normalize_components

logger = logging.getLogger(__name__)

MOUNT_ROOT = "mnt"
LOOPBACK_HOSTNAME = "wsl.localhost"


class Direction(Enum):
    """Which way a path is being converted"""
    TO_WSL = "to-wsl"
    TO_WINDOWS = "to-windows"


def _to_wsl_component(component: windows.Component) -> wsl.Component:
    if isinstance(component, windows.Normal):
        return wsl.Normal(component.segment)
    if isinstance(component, windows.ParentDir):
        return wsl.ParentDir()
    if isinstance(component, windows.CurDir):
        return wsl.CurDir()
    raise TypeError(f"Unexpected component: {component!r}")


def _to_windows_component(component: wsl.Component) -> windows.Component:
    if isinstance(component, wsl.Normal):
        return windows.Normal(component.segment)
    if isinstance(component, wsl.ParentDir):
        return windows.ParentDir()
    if isinstance(component, wsl.CurDir):
        return windows.CurDir()
    raise TypeError(f"Unexpected component: {component!r}")


def windows_to_wsl(windows_path: str) -> str:
    """
    Convert an absolute Windows path to a WSL path.

    C:\\Users\\me               -> /mnt/c/Users/me
    \\\\?\\D:\\data              -> /mnt/d/data
    \\\\?\\UNC\\wsl.localhost\\Ubuntu\\home -> /home

    Raises RelativePathError for relative input and InvalidPrefixError for
    any other prefix (plain UNC shares, device paths, foreign UNC hosts).
    """
    path = windows.parse_windows_path(windows_path)
    if not path.is_absolute:
        raise RelativePathError(windows_path)

    prefix = path.prefix
    if isinstance(prefix, (windows.Disk, windows.VerbatimDisk)):
        root = [wsl.Normal(MOUNT_ROOT), wsl.Normal(prefix.letter.lower())]
    elif isinstance(prefix, windows.VerbatimUNC):
        if prefix.hostname.lower() != LOOPBACK_HOSTNAME:
            raise InvalidPrefixError(
                windows_path, f"UNC host {prefix.hostname!r} is not {LOOPBACK_HOSTNAME}"
            )
        # The share names the distro; the rest is already rooted in the guest
        root = []
    else:
        raise InvalidPrefixError(windows_path, f"{type(prefix).__name__} prefix")

    tail = [
        _to_wsl_component(c)
        for c in path.components
        if not isinstance(c, windows.RootDir)
    ]
    result = wsl.format_wsl_path(root + normalize_components(tail))
    logger.debug(f"{type(prefix).__name__}: {windows_path!r} -> {result!r}")
    return result


def wsl_to_windows(wsl_path: str) -> str:
    """
    Convert an absolute /mnt/<letter>/... WSL path to a Windows path.

    /mnt/c/Users/me -> C:\\Users\\me

    Raises RelativePathError for relative input and InvalidPrefixError for
    anything outside /mnt/<single letter>.
    """
    path = wsl.parse_wsl_path(wsl_path)
    if not path.is_absolute:
        raise RelativePathError(wsl_path)

    components = path.components[1:]
    if not components or components[0] != wsl.Normal(MOUNT_ROOT):
        raise InvalidPrefixError(wsl_path, f"not under /{MOUNT_ROOT}")

    drive = components[1] if len(components) > 1 else None
    if not isinstance(drive, wsl.Normal) or not windows.is_drive_letter(drive.segment):
        raise InvalidPrefixError(wsl_path, "drive segment must be a single letter")

    tail = [_to_windows_component(c) for c in components[2:]]
    result = windows.format_windows_path(drive.segment, normalize_components(tail))
    logger.debug(f"drive {drive.segment}: {wsl_path!r} -> {result!r}")
    return result


@dataclass
class ConversionResult:
    """Outcome of one conversion: either output or error is set"""
    source: str
    direction: Direction
    output: Optional[str] = None
    error: Optional[PathConversionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'source': self.source,
            'direction': self.direction.value,
            'output': self.output,
            'error': self.error_kind.value if self.error else None,
            'message': str(self.error) if self.error else None,
        }


_CONVERTERS = {
    Direction.TO_WSL: windows_to_wsl,
    Direction.TO_WINDOWS: wsl_to_windows,
}


def convert(path: str, direction: Direction) -> ConversionResult:
    """Convert a path, returning the error as a value instead of raising"""
    try:
        output = _CONVERTERS[direction](path)
    except PathConversionError as e:
        logger.debug(f"Conversion failed ({e.kind.value}): {e}")
        return ConversionResult(source=path, direction=direction, error=e)
    return ConversionResult(source=path, direction=direction, output=output)
