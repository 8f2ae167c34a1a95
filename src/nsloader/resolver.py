"""Prefix resolver — maps namespaced identifiers to files on disk.

Namespace prefixes are registered against one or more base directories.
Resolving ``Plugin.Models.User`` tries the longest registered prefix
first (``Plugin.Models.``), then each shorter one (``Plugin.``), and
for each prefix every base directory in registration order::

    resolver = PrefixResolver()
    resolver.register("Plugin", "src/plugin")
    resolver.register("Plugin.Models", "src/models")

    resolver.resolve("Plugin.Models.User")
    # tries src/models/User.py, then src/plugin/Models/User.py

The first candidate that exists and loads wins. Not finding anything is
a normal outcome, reported as ``Resolution(found=False)``.

Not thread-safe: register everything at startup, before the first
``resolve()``.
"""

import logging
import os
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from nsloader.config import ResolverConfig
from nsloader.loaders import ModuleFileLoader
from nsloader.types import NOT_FOUND, FileLoader, Resolution

if TYPE_CHECKING:
    from nsloader.chain import ResolutionChain

logger = logging.getLogger("nsloader.resolver")


class PrefixResolver:
    """Longest-prefix-first namespace to directory resolver.

    Args:
        config: Delimiter, separator and extension settings.
        loader: Loads located files. Defaults to ``ModuleFileLoader``.
    """

    __slots__ = ("_loaded", "_prefixes", "config", "loader")

    def __init__(
        self,
        config: ResolverConfig | None = None,
        loader: FileLoader | None = None,
    ) -> None:
        self.config = config if config is not None else ResolverConfig()
        self.loader: FileLoader = (
            loader if loader is not None else ModuleFileLoader(self.config.delimiter)
        )
        self._prefixes: dict[str, list[str]] = {}
        self._loaded: dict[str, str] = {}

    # -- Registration ----------------------------------------------------

    def normalize_prefix(self, prefix: str) -> str:
        """Strip edge delimiters and append exactly one."""
        delimiter = self.config.delimiter
        return prefix.strip(delimiter) + delimiter

    def normalize_base_dir(self, base_dir: str | os.PathLike[str]) -> str:
        """Strip trailing separators and append exactly one."""
        strip = self.config.strip_separators + self.config.separator
        return os.fspath(base_dir).rstrip(strip) + self.config.separator

    def register(self, prefix: str, base_dir: str | os.PathLike[str]) -> None:
        """Add a base directory for a namespace prefix.

        Directories registered under the same prefix are tried in
        registration order. Registering a directory again appends
        another entry; nothing is replaced or deduplicated.
        """
        key = self.normalize_prefix(prefix)
        directory = self.normalize_base_dir(base_dir)
        self._prefixes.setdefault(key, []).append(directory)
        logger.debug("Registered %r -> %s", key, directory)

    add_namespace = register

    @property
    def prefixes(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only snapshot of the prefix table."""
        return MappingProxyType({k: tuple(v) for k, v in self._prefixes.items()})

    @property
    def loaded(self) -> Mapping[str, str]:
        """Identifiers resolved so far, mapped to the file that was loaded."""
        return MappingProxyType(self._loaded)

    def __contains__(self, prefix: object) -> bool:
        if not isinstance(prefix, str):
            return False
        return self.normalize_prefix(prefix) in self._prefixes

    def __len__(self) -> int:
        return len(self._prefixes)

    # -- Resolution ------------------------------------------------------

    def _splits(self, identifier: str) -> Iterator[tuple[str, str]]:
        """Yield ``(prefix, relative_name)`` pairs, longest prefix first."""
        delimiter = self.config.delimiter
        current = identifier
        while True:
            pos = current.rfind(delimiter)
            if pos == -1:
                return
            end = pos + len(delimiter)
            prefix = identifier[:end]
            yield prefix, identifier[end:]
            current = prefix.rstrip(delimiter)

    def _file_path(self, base_dir: str, relative_name: str) -> str:
        relative = relative_name.replace(self.config.delimiter, self.config.separator)
        return base_dir + relative + self.config.suffix

    def candidates(self, identifier: str) -> Iterator[str]:
        """Yield every path ``resolve()`` would try, in order.

        Does not touch the filesystem.
        """
        for prefix, relative_name in self._splits(identifier):
            for base_dir in self._prefixes.get(prefix, ()):
                yield self._file_path(base_dir, relative_name)

    def resolve(self, identifier: str) -> Resolution:
        """Locate and load the file for a fully-qualified identifier.

        Returns the first candidate that exists and loads. An identifier
        resolved earlier returns its remembered path without loading it
        again.
        """
        known = self._loaded.get(identifier)
        if known is not None:
            return Resolution(known, True)

        for path in self.candidates(identifier):
            if not os.path.isfile(path):
                continue
            if self.loader.load(identifier, path):
                self._loaded[identifier] = path
                logger.debug("Loaded %s from %s", identifier, path)
                return Resolution(path, True)
            logger.debug("Skipped unloadable %s", path)

        logger.debug("No file for %s", identifier)
        return NOT_FOUND

    def install(self, chain: "ResolutionChain") -> None:
        """Append this resolver to an application's resolution chain."""
        chain.add(self)
