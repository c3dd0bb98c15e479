"""
Lexical normalization shared by both path syntaxes
Collapses '.' and '..' without ever touching the filesystem
"""

from enum import Enum
from typing import Iterable, List, TypeVar


class ComponentKind(Enum):
    """Role of a path component, independent of its syntax"""
    ROOT = "root"
    CURRENT = "current"
    PARENT = "parent"
    NORMAL = "normal"


C = TypeVar("C")


def normalize_components(components: Iterable[C]) -> List[C]:
    """
    Collapse a component sequence left to right.

    Works on any component type exposing a ``kind`` attribute:
    - CURRENT components are dropped
    - PARENT cancels the immediately preceding NORMAL component
    - PARENT with no NORMAL to cancel is kept literally
    - everything else passes through in order

    Normalizing an already normalized sequence returns it unchanged.
    """
    result: List[C] = []
    for component in components:
        kind = component.kind
        if kind is ComponentKind.CURRENT:
            continue
        if kind is ComponentKind.PARENT and result and result[-1].kind is ComponentKind.NORMAL:
            result.pop()
            continue
        result.append(component)
    return result
