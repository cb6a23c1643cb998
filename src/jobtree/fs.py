# fs.py
from __future__ import annotations

from typing import Iterator, List, Protocol, Tuple, runtime_checkable


@runtime_checkable
class FileSystemComponent(Protocol):
    def name(self) -> str:
        ...

    def calculate_size(self) -> int:
        ...


class File:
    """Leaf entry with a fixed size."""

    def __init__(self, name: str, size: int):
        self._name = name
        self._size = size

    def name(self) -> str:
        return self._name

    def calculate_size(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"File({self._name!r}, size={self._size})"


class Directory:
    """
    Composite entry owning an ordered list of children.

    calculate_size() walks the whole subtree on every call; nothing is cached.
    The tree must be acyclic: adding an ancestor as a child recurses forever.
    """

    def __init__(self, name: str):
        self._name = name
        self._children: List[FileSystemComponent] = []

    def name(self) -> str:
        return self._name

    def add_child(self, child: FileSystemComponent) -> None:
        self._children.append(child)

    @property
    def children(self) -> Tuple[FileSystemComponent, ...]:
        return tuple(self._children)

    def calculate_size(self) -> int:
        return sum(child.calculate_size() for child in self._children)

    def __repr__(self) -> str:
        return f"Directory({self._name!r}, children={len(self._children)})"


def iter_leaves(component: FileSystemComponent) -> Iterator[FileSystemComponent]:
    """Depth-first leaves in insertion order. A bare leaf yields itself."""
    children = getattr(component, "children", None)
    if children is None:
        yield component
        return
    for child in children:
        yield from iter_leaves(child)
