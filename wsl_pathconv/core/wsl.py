"""
Guest (WSL) path syntax
Forward-slash separated paths rooted at '/'
"""

from dataclasses import dataclass, field
from typing import ClassVar, Tuple, Union

from .normalize import ComponentKind

SEPARATOR = "/"


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


@dataclass(frozen=True)
class WslPath:
    """A parsed guest path"""
    text: str
    components: Tuple[Component, ...] = field(default_factory=tuple)

    @property
    def is_absolute(self) -> bool:
        return bool(self.components) and isinstance(self.components[0], RootDir)


def parse_wsl_path(text: str) -> WslPath:
    """Parse a guest path into components"""
    components = []
    if text.startswith(SEPARATOR):
        components.append(RootDir())

    for segment in text.split(SEPARATOR):
        if not segment:
            continue
        if segment == ".":
            # Only a leading '.' of a relative path survives parsing
            if not components:
                components.append(CurDir())
        elif segment == "..":
            components.append(ParentDir())
        else:
            components.append(Normal(segment))

    return WslPath(text=text, components=tuple(components))


def format_wsl_path(components) -> str:
    """Join components into an absolute guest path"""
    segments = [c.segment for c in components if c.kind is not ComponentKind.ROOT]
    return SEPARATOR + SEPARATOR.join(segments)
