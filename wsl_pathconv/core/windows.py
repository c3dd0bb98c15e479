"""
Windows path syntax
Splits a Windows path string into a prefix plus components, and joins
components back into a drive-rooted Windows path
"""

import re
import string
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Tuple, Union

from .normalize import ComponentKind

SEPARATORS = "\\/"
VERBATIM_MARKER = "\\\\?\\"
DEVICE_MARKER = "\\\\.\\"

_SEPARATOR_RE = re.compile(r"[\\/]+")


# Components

@dataclass(frozen=True)
class RootDir:
    kind: ClassVar[ComponentKind] = ComponentKind.ROOT
    segment: ClassVar[str] = ""


@dataclass(frozen=True)
class CurDir:
    kind: ClassVar[ComponentKind] = ComponentKind.CURRENT
    segment: ClassVar[str] = "."


@dataclass(frozen=True)
class ParentDir:
    kind: ClassVar[ComponentKind] = ComponentKind.PARENT
    segment: ClassVar[str] = ".."


@dataclass(frozen=True)
class Normal:
    segment: str
    kind: ClassVar[ComponentKind] = ComponentKind.NORMAL


Component = Union[RootDir, CurDir, ParentDir, Normal]


# Prefixes

@dataclass(frozen=True)
class Disk:
    """C:"""
    letter: str


@dataclass(frozen=True)
class VerbatimDisk:
    r"""\\?\C:"""
    letter: str


@dataclass(frozen=True)
class VerbatimUNC:
    r"""\\?\UNC\hostname\share"""
    hostname: str
    share: str


@dataclass(frozen=True)
class Verbatim:
    r"""\\?\name (anything verbatim that is neither a disk nor UNC)"""
    name: str


@dataclass(frozen=True)
class DeviceNS:
    r"""\\.\device"""
    name: str


@dataclass(frozen=True)
class UNC:
    r"""\\server\share"""
    server: str
    share: str


Prefix = Union[Disk, VerbatimDisk, VerbatimUNC, Verbatim, DeviceNS, UNC]


@dataclass(frozen=True)
class WindowsPath:
    """A parsed Windows path"""
    text: str
    prefix: Optional[Prefix] = None
    components: Tuple[Component, ...] = field(default_factory=tuple)

    @property
    def has_root(self) -> bool:
        return bool(self.components) and isinstance(self.components[0], RootDir)

    @property
    def is_absolute(self) -> bool:
        # Every prefix except a plain drive implies a root
        if self.prefix is None:
            return False
        return self.has_root or not isinstance(self.prefix, Disk)


def is_drive_letter(char: str) -> bool:
    return len(char) == 1 and char in string.ascii_letters


def _has_drive(text: str) -> bool:
    return len(text) >= 2 and text[1] == ":" and is_drive_letter(text[0])


def _take_segment(text: str, separators: str) -> Tuple[str, str]:
    """Split off the leading segment, leaving the separator on the remainder"""
    for i, char in enumerate(text):
        if char in separators:
            return text[:i], text[i:]
    return text, ""


def _take_server_share(text: str, separators: str) -> Tuple[str, str, str]:
    server, rest = _take_segment(text, separators)
    if not rest:
        return server, "", ""
    share, rest = _take_segment(rest[1:], separators)
    return server, share, rest


def parse_prefix(text: str) -> Tuple[Optional[Prefix], str]:
    """Classify the prefix of a Windows path and return it with the remainder"""
    if text.startswith(VERBATIM_MARKER):
        # Verbatim prefixes only recognize the backslash
        body = text[len(VERBATIM_MARKER):]
        if body == "UNC" or body.startswith("UNC\\"):
            hostname, share, rest = _take_server_share(body[4:], "\\")
            return VerbatimUNC(hostname, share), rest
        if _has_drive(body):
            return VerbatimDisk(body[0]), body[2:]
        name, rest = _take_segment(body, "\\")
        return Verbatim(name), rest

    if text.startswith(DEVICE_MARKER):
        name, rest = _take_segment(text[len(DEVICE_MARKER):], SEPARATORS)
        return DeviceNS(name), rest

    if len(text) >= 2 and text[0] in SEPARATORS and text[1] in SEPARATORS:
        server, share, rest = _take_server_share(text[2:], SEPARATORS)
        return UNC(server, share), rest

    if _has_drive(text):
        return Disk(text[0]), text[2:]

    return None, text


def parse_windows_path(text: str) -> WindowsPath:
    """
    Parse a Windows path into its prefix and components.

    Separators may be '\\' or '/', repeated separators collapse, and a
    '.' is only kept when it leads a path with neither prefix nor root.
    """
    prefix, rest = parse_prefix(text)

    components = []
    if rest[:1] and rest[0] in SEPARATORS:
        components.append(RootDir())

    for segment in _SEPARATOR_RE.split(rest):
        if not segment:
            continue
        if segment == ".":
            if prefix is None and not components:
                components.append(CurDir())
        elif segment == "..":
            components.append(ParentDir())
        else:
            components.append(Normal(segment))

    return WindowsPath(text=text, prefix=prefix, components=tuple(components))


def format_windows_path(letter: str, components) -> str:
    """Join components under the drive root '<LETTER>:\\'"""
    segments = [c.segment for c in components if c.kind is not ComponentKind.ROOT]
    return f"{letter.upper()}:\\" + "\\".join(segments)
