# registry.py
from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Sequence

from .adapter import BlockList, BlockListAdapter
from .fs import Directory, File, FileSystemComponent
from .settings import FALLBACK_KIND
from .ui.console import get_console


@dataclass
class RegistryError(Exception):
    kind: str
    message: str
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        lines = [f"{self.message}", f"kind={self.kind}"]
        for k, v in self.details.items():
            lines.append(f"{k}={v}")
        return "\n".join(lines)


class UnknownEntry:
    """Placeholder leaf produced for unrecognised kinds. Contributes no size."""

    def __init__(self, name: str):
        self._name = name

    def name(self) -> str:
        return self._name

    def calculate_size(self) -> int:
        return 0

    def __repr__(self) -> str:
        return f"UnknownEntry({self._name!r})"


Factory = Callable[..., Any]


class Registry:
    """
    Maps a component kind to the factory that creates it.

    Kinds are case-insensitive. Asking for a kind nobody registered falls
    back to the factory registered under the fallback kind instead of failing.
    """

    def __init__(self, fallback: str = FALLBACK_KIND):
        self._factories: Dict[str, Factory] = {}
        self._fallback = fallback.lower()
        self._lock = threading.Lock()

    def register(self, kind: str, factory: Factory) -> None:
        """
        Register (or replace) the factory for a kind.

        Args:
            kind: Kind name, matched case-insensitively
            factory: Callable taking (name, **options) and returning a component
        """
        with self._lock:
            self._factories[kind.lower()] = factory

    def create(self, kind: str, name: str, **options: Any) -> Any:
        """
        Create a component of the given kind.

        Raises:
            RegistryError: If the kind is unknown and no fallback is registered
        """
        key = kind.lower()
        with self._lock:
            factory = self._factories.get(key)
            if factory is None:
                factory = self._factories.get(self._fallback)
                if factory is None:
                    raise RegistryError(
                        kind=kind,
                        message="No factory registered and no fallback available",
                        details={"fallback": self._fallback, "available": sorted(self._factories)},
                    )
                get_console().print_debug(f"unknown kind {kind!r}, using {self._fallback!r} for {name!r}")
        return factory(name, **options)

    def available_types(self) -> List[str]:
        with self._lock:
            return sorted(self._factories)

    def is_registered(self, kind: str) -> bool:
        with self._lock:
            return kind.lower() in self._factories


def _make_file(name: str, size: int = 0, **_options: Any) -> FileSystemComponent:
    return File(name, size)


def _make_directory(name: str, **_options: Any) -> FileSystemComponent:
    return Directory(name)


def _make_blocks(name: str, blocks: Sequence[int] = (), **_options: Any) -> FileSystemComponent:
    return BlockListAdapter(name, BlockList(blocks))


def _make_unknown(name: str, **_options: Any) -> FileSystemComponent:
    return UnknownEntry(name)


def default_registry() -> Registry:
    """Registry pre-loaded with file, directory, blocks and the unknown fallback."""
    registry = Registry()
    registry.register("file", _make_file)
    registry.register("directory", _make_directory)
    registry.register("blocks", _make_blocks)
    registry.register(FALLBACK_KIND, _make_unknown)
    return registry
