"""Shared result type and capability protocols."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of resolving one identifier.

    Unpacks as ``(path, found)`` and is truthy only when a file was
    loaded::

        path, found = resolver.resolve("Plugin.Models.User")
        if resolver.resolve("Plugin.Models.Post"):
            ...

    Attributes:
        path: The loaded file path, or ``""`` when nothing matched.
        found: Whether a file was located and loaded.
    """

    path: str = ""
    found: bool = False

    def __bool__(self) -> bool:
        return self.found

    def __iter__(self) -> Iterator[str | bool]:
        yield self.path
        yield self.found


NOT_FOUND = Resolution()


@runtime_checkable
class Resolver(Protocol):
    """Anything a ``ResolutionChain`` can consult."""

    def resolve(self, identifier: str) -> Resolution: ...


@runtime_checkable
class FileLoader(Protocol):
    """Loads a located file.

    Returns ``True`` when the file was loaded. ``False`` tells the
    resolver to try its next candidate path.
    """

    def load(self, identifier: str, path: str) -> bool: ...
